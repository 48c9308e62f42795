"""Payload schemas for the ThunderInsights player API.

The API speaks PascalCase keys (``UserID``, ``VehicleName``...) and spells the
image key ``VehicleIdentifiyingName``. Fields are snake_case here and mapped
through aliases; unknown keys are ignored so additive API changes do not
break validation.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Player(_ApiModel):
    user_id: int | str = Field(alias="UserID")
    name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Nick", "Username", "Name", "name"),
    )


class VehicleRecord(_ApiModel):
    vehicle_id: int | str = Field(alias="VehicleID")
    name: str = Field(alias="VehicleName")
    tier: int = Field(alias="Tier")
    battle_rating: float = Field(alias="Battlerating")
    country: str = Field(alias="OperatorCountry")
    identifying_name: str = Field(alias="VehicleIdentifiyingName")
    premium: bool = Field(default=False, alias="Premium")
    gift: bool = Field(default=False, alias="Gift")
    event: bool = Field(default=False, alias="Event")
    clan: bool = Field(default=False, alias="Clan")
