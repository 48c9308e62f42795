from __future__ import annotations

from collections.abc import Iterable

from lineup.models import VehicleRecord


def dedupe_vehicles(vehicles: Iterable[VehicleRecord]) -> list[VehicleRecord]:
    # Later duplicates overwrite the value but keep the first-seen key slot.
    by_id: dict[int | str, VehicleRecord] = {}
    for vehicle in vehicles:
        by_id[vehicle.vehicle_id] = vehicle
    return list(by_id.values())


def sort_vehicles(vehicles: Iterable[VehicleRecord]) -> list[VehicleRecord]:
    return sorted(vehicles, key=lambda v: (v.tier, v.battle_rating), reverse=True)


def normalize_vehicles(vehicles: Iterable[VehicleRecord]) -> tuple[VehicleRecord, ...]:
    """Deduplicate by vehicle id, then order by tier and battle rating, highest first."""
    return tuple(sort_vehicles(dedupe_vehicles(vehicles)))
