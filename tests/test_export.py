from __future__ import annotations

import io
import re

import pytest
from PIL import Image

from lineup.errors import TransportError
from lineup.export import (
    RESULTS_REGION,
    AssetCache,
    GridCapture,
    clipboard_text,
    vehicles_frame,
)
from lineup.models import VehicleRecord


def _vehicle(vehicle_id: int, name: str, **flags: bool) -> VehicleRecord:
    return VehicleRecord(
        vehicle_id=vehicle_id,
        name=name,
        tier=4,
        battle_rating=6.7,
        country="ussr",
        identifying_name=f"USSR_{vehicle_id}",
        **flags,
    )


def _png(color: str = "red", size: tuple[int, int] = (40, 20)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", size, color).save(buf, format="PNG")
    return buf.getvalue()


class FakeAssets:
    def __init__(self, missing: set[str] | None = None) -> None:
        self.missing = missing or set()
        self.fetched: list[str] = []

    def flag_url(self, country: str) -> str:
        return f"flag:{country}"

    def vehicle_image_url(self, identifying_name: str) -> str:
        return f"vehicle:{identifying_name.lower()}"

    def fetch_asset(self, url: str) -> bytes:
        self.fetched.append(url)
        if url in self.missing:
            raise TransportError("unreachable", endpoint=url)
        return _png()


def test_clipboard_text_takes_first_five_names() -> None:
    vehicles = [_vehicle(i, f"T-{i}4/85 ▂") for i in range(7)]

    text = clipboard_text(vehicles)

    assert text.count(" | ") == 4
    assert text.split(" | ")[0] == "T-0485 "
    assert re.fullmatch(r'[\w\s()"|-]*', text, re.ASCII)


def test_clipboard_text_with_fewer_entries() -> None:
    vehicles = [_vehicle(1, 'IS-2 "Bear"'), _vehicle(2, "Tiger (P)")]

    assert clipboard_text(vehicles) == 'IS-2 "Bear" | Tiger (P)'


def test_clipboard_text_empty() -> None:
    assert clipboard_text([]) == ""


def test_vehicles_frame_columns() -> None:
    frame = vehicles_frame([_vehicle(1, "KV-1", premium=True)])

    assert frame.columns.tolist() == [
        "Name", "Tier", "BR", "Country", "Premium", "Gift", "Event", "Clan"
    ]
    assert frame.iloc[0]["Name"] == "KV-1"
    assert bool(frame.iloc[0]["Premium"]) is True


def test_asset_cache_reuses_loaded_images() -> None:
    assets = FakeAssets()
    cache = AssetCache(assets)

    cache.wait_for_all(["flag:ussr", "flag:ussr", "vehicle:a"])
    cache.get("flag:ussr")

    assert assets.fetched == ["flag:ussr", "vehicle:a"]
    assert "flag:ussr" in cache


def test_capture_region_produces_png() -> None:
    capture = GridCapture(AssetCache(FakeAssets()), scale=1.0)
    capture.register(RESULTS_REGION, [_vehicle(i, f"T-{i}") for i in range(5)])

    data = capture.capture_region(RESULTS_REGION)

    with Image.open(io.BytesIO(data)) as img:
        assert img.format == "PNG"
        # 4 columns, 2 rows of cards with padding and gaps.
        assert img.size == (2 * 16 + 4 * 300 + 3 * 16, 2 * 16 + 2 * 110 + 16)


def test_capture_tolerates_missing_thumbnails() -> None:
    assets = FakeAssets(missing={"vehicle:ussr_1"})
    capture = GridCapture(AssetCache(assets))
    capture.register(RESULTS_REGION, [_vehicle(1, "T-34")])

    data = capture.capture_region(RESULTS_REGION)

    assert data.startswith(b"\x89PNG")
    assert "vehicle:ussr_1" in assets.fetched


def test_capture_unknown_region() -> None:
    capture = GridCapture(AssetCache(FakeAssets()))

    with pytest.raises(KeyError):
        capture.capture_region("nope")


def test_asset_cache_evicts_least_recently_used() -> None:
    assets = FakeAssets()
    cache = AssetCache(assets, max_entries=2)

    cache.get("a")
    cache.get("b")
    cache.get("a")
    cache.get("c")

    assert "a" in cache
    assert "c" in cache
    assert "b" not in cache
    cache.get("b")
    assert assets.fetched == ["a", "b", "c", "b"]
