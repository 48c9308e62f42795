"""Clipboard text, PNG capture of the result grid, and CSV export."""

from __future__ import annotations

import io
import logging
import math
import threading
from collections import OrderedDict
from collections.abc import Iterable, Sequence
from typing import Protocol

import pandas as pd
from PIL import Image, ImageDraw, ImageFont, ImageOps, UnidentifiedImageError

from lineup.errors import ApiError
from lineup.models import VehicleRecord
from lineup.styles import (
    PAGE_BACKGROUND,
    TEXT_COLOR,
    card_style,
    rating_line,
    sanitize_name,
)

logger = logging.getLogger(__name__)

CLIPBOARD_LIMIT = 5
SCREENSHOT_FILENAME = "screenshot.png"
RESULTS_REGION = "vehicles"


def clipboard_text(vehicles: Sequence[VehicleRecord], limit: int = CLIPBOARD_LIMIT) -> str:
    return " | ".join(sanitize_name(v.name) for v in vehicles[:limit])


def vehicles_frame(vehicles: Iterable[VehicleRecord]) -> pd.DataFrame:
    rows = [
        {
            "Name": sanitize_name(v.name),
            "Tier": v.tier,
            "BR": v.battle_rating,
            "Country": v.country,
            "Premium": v.premium,
            "Gift": v.gift,
            "Event": v.event,
            "Clan": v.clan,
        }
        for v in vehicles
    ]
    columns = ["Name", "Tier", "BR", "Country", "Premium", "Gift", "Event", "Clan"]
    return pd.DataFrame(rows, columns=columns)


# ---------------------------------------------------------------------------
# Environment seams
# ---------------------------------------------------------------------------
class ClipboardWriter(Protocol):
    def write_text(self, text: str) -> None: ...


class RegionCapture(Protocol):
    def capture_region(self, region_id: str) -> bytes: ...


class AssetSource(Protocol):
    def flag_url(self, country: str) -> str: ...

    def vehicle_image_url(self, identifying_name: str) -> str: ...

    def fetch_asset(self, url: str) -> bytes: ...


class AssetCache:
    """Image bytes by URL; already-loaded assets are returned without a fetch.

    Holds at most ``max_entries`` images and evicts the least recently used
    one beyond that. Shared across sessions, so bookkeeping is locked; the
    fetch itself runs outside the lock.
    """

    def __init__(self, source: AssetSource, max_entries: int = 512) -> None:
        self.source = source
        self.max_entries = max_entries
        self._loaded: OrderedDict[str, bytes] = OrderedDict()
        self._lock = threading.Lock()

    def __contains__(self, url: str) -> bool:
        with self._lock:
            return url in self._loaded

    def get(self, url: str) -> bytes | None:
        with self._lock:
            if url in self._loaded:
                self._loaded.move_to_end(url)
                return self._loaded[url]
        try:
            data = self.source.fetch_asset(url)
        except ApiError as exc:
            logger.warning("Could not load image %s: %s", url, exc)
            return None
        with self._lock:
            self._loaded[url] = data
            self._loaded.move_to_end(url)
            while len(self._loaded) > self.max_entries:
                self._loaded.popitem(last=False)
        return data

    def wait_for_all(self, urls: Iterable[str]) -> dict[str, bytes | None]:
        return {url: self.get(url) for url in dict.fromkeys(urls)}


# ---------------------------------------------------------------------------
# Grid capture
# ---------------------------------------------------------------------------
_CARD_W = 300
_CARD_H = 110
_GAP = 16
_PADDING = 16
_BORDER = 2
_COLUMNS = 4


class GridCapture:
    """Rasterizes registered result grids into PNG bytes with Pillow.

    The view registers the records it renders under a region id; capture
    loads every thumbnail of that region first, then draws the cards with
    the same colours and layout as the page.
    """

    def __init__(self, assets: AssetCache, *, scale: float = 1.5, columns: int = _COLUMNS) -> None:
        self.assets = assets
        self.scale = scale
        self.columns = columns
        self._regions: dict[str, tuple[VehicleRecord, ...]] = {}

    def register(self, region_id: str, vehicles: Iterable[VehicleRecord]) -> None:
        self._regions[region_id] = tuple(vehicles)

    def capture_region(self, region_id: str) -> bytes:
        vehicles = self._regions[region_id]
        urls: list[str] = []
        for v in vehicles:
            urls.append(self.assets.source.flag_url(v.country))
            urls.append(self.assets.source.vehicle_image_url(v.identifying_name))
        images = self.assets.wait_for_all(urls)

        canvas = self._draw_grid(vehicles, images)
        buf = io.BytesIO()
        canvas.save(buf, format="PNG")
        logger.debug("Captured region %r with %s cards", region_id, len(vehicles))
        return buf.getvalue()

    def _px(self, value: float) -> int:
        return int(round(value * self.scale))

    def _draw_grid(
        self,
        vehicles: Sequence[VehicleRecord],
        images: dict[str, bytes | None],
    ) -> Image.Image:
        rows = max(1, math.ceil(len(vehicles) / self.columns))
        width = 2 * _PADDING + self.columns * _CARD_W + (self.columns - 1) * _GAP
        height = 2 * _PADDING + rows * _CARD_H + (rows - 1) * _GAP
        canvas = Image.new("RGB", (self._px(width), self._px(height)), PAGE_BACKGROUND)

        title_font = ImageFont.load_default(size=self._px(15))
        body_font = ImageFont.load_default(size=self._px(13))

        for index, vehicle in enumerate(vehicles):
            row, col = divmod(index, self.columns)
            x = _PADDING + col * (_CARD_W + _GAP)
            y = _PADDING + row * (_CARD_H + _GAP)
            self._draw_card(canvas, vehicle, images, (x, y), title_font, body_font)
        return canvas

    def _draw_card(
        self,
        canvas: Image.Image,
        vehicle: VehicleRecord,
        images: dict[str, bytes | None],
        origin: tuple[int, int],
        title_font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
        body_font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
    ) -> None:
        style = card_style(vehicle)
        draw = ImageDraw.Draw(canvas)
        left, top = self._px(origin[0]), self._px(origin[1])
        right, bottom = left + self._px(_CARD_W) - 1, top + self._px(_CARD_H) - 1
        draw.rectangle(
            (left, top, right, bottom),
            fill=style.background,
            outline=style.border,
            width=self._px(_BORDER),
        )

        inset = self._px(_BORDER + 6)
        thumb_box = (
            left + inset,
            top + inset,
            left + self._px(_CARD_W / 2),
            bottom - inset,
        )
        thumb_size = (thumb_box[2] - thumb_box[0], thumb_box[3] - thumb_box[1])

        flag = self._open(images.get(self.assets.source.flag_url(vehicle.country)))
        if flag is not None:
            canvas.paste(ImageOps.fit(flag, thumb_size).convert("RGB"), thumb_box[:2])
        photo = self._open(images.get(self.assets.source.vehicle_image_url(vehicle.identifying_name)))
        if photo is not None:
            photo = ImageOps.contain(photo, thumb_size)
            offset = (
                thumb_box[0] + (thumb_size[0] - photo.width) // 2,
                thumb_box[1] + (thumb_size[1] - photo.height) // 2,
            )
            canvas.paste(photo, offset, photo)

        text_right = right - inset
        text_width = text_right - thumb_box[2] - inset
        name = _fit_text(draw, sanitize_name(vehicle.name), title_font, text_width)
        rating = rating_line(vehicle)
        mid = (top + bottom) // 2
        name_x = text_right - int(draw.textlength(name, font=title_font))
        rating_x = text_right - int(draw.textlength(rating, font=body_font))
        draw.text((name_x, mid - self._px(20)), name, font=title_font, fill=TEXT_COLOR)
        draw.text((rating_x, mid + self._px(4)), rating, font=body_font, fill=TEXT_COLOR)

    @staticmethod
    def _open(data: bytes | None) -> Image.Image | None:
        if not data:
            return None
        try:
            with Image.open(io.BytesIO(data)) as img:
                return img.convert("RGBA")
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Skipping undecodable image: %s", exc)
            return None


def _fit_text(
    draw: ImageDraw.ImageDraw,
    text: str,
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
    max_width: int,
) -> str:
    if draw.textlength(text, font=font) <= max_width:
        return text
    while text and draw.textlength(text + "...", font=font) > max_width:
        text = text[:-1]
    return text.rstrip() + "..."
