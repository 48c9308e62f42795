"""Reusable UI components for the Thunder Lineup page."""

from .banner import render_banner
from .export_bar import BrowserClipboard, render_export_bar
from .search_form import render_search_form
from .vehicle_grid import card_html, render_vehicle_grid

__all__ = [
    "BrowserClipboard",
    "card_html",
    "render_banner",
    "render_export_bar",
    "render_search_form",
    "render_vehicle_grid",
]
