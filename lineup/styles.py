"""Card colours and display text shared by the Streamlit grid and the PNG capture."""

from __future__ import annotations

import re
from dataclasses import dataclass

from lineup.models import VehicleRecord

PAGE_BACKGROUND = "#030712"
TEXT_COLOR = "#FFFFFF"

# Word characters, whitespace, parentheses, double quotes and hyphen survive.
_NAME_JUNK = re.compile(r'[^\w\s()"-]', re.ASCII)


@dataclass(frozen=True)
class CardStyle:
    key: str
    background: str
    border: str


PREMIUM = CardStyle("premium", "#FACC15", "#FACC15")
SPECIAL = CardStyle("special", "#78350F", "#92400E")
CLAN = CardStyle("clan", "#14532D", "#166534")
STANDARD = CardStyle("standard", "#164E63", "#155E75")


def card_style(vehicle: VehicleRecord) -> CardStyle:
    """First matching flag wins: premium, then gift/event, then clan."""
    if vehicle.premium:
        return PREMIUM
    if vehicle.gift or vehicle.event:
        return SPECIAL
    if vehicle.clan:
        return CLAN
    return STANDARD


def sanitize_name(name: str) -> str:
    return _NAME_JUNK.sub("", name)


def format_battle_rating(value: float) -> str:
    return f"{value:g}"


def rating_line(vehicle: VehicleRecord) -> str:
    return f"BR: {format_battle_rating(vehicle.battle_rating)} (Rank: {vehicle.tier})"
