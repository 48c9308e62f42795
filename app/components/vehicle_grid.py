"""Responsive grid of vehicle cards."""

from __future__ import annotations

import html
from collections.abc import Sequence

import streamlit as st
from lineup.client import ThunderInsightsClient
from lineup.export import RESULTS_REGION, GridCapture
from lineup.models import VehicleRecord
from lineup.styles import card_style, rating_line, sanitize_name


def card_html(vehicle: VehicleRecord, client: ThunderInsightsClient) -> str:
    style = card_style(vehicle)
    flag = html.escape(client.flag_url(vehicle.country), quote=True)
    photo = html.escape(client.vehicle_image_url(vehicle.identifying_name), quote=True)
    name = html.escape(sanitize_name(vehicle.name))
    return (
        f'<li class="vehicle-card card-{style.key}">'
        f"<div class=\"vehicle-thumb\" style=\"background-image:url('{flag}');\">"
        f'<img src="{photo}" alt="" /></div>'
        '<p class="vehicle-meta">'
        f"<strong>{name}</strong><span>{html.escape(rating_line(vehicle))}</span>"
        "</p></li>"
    )


def render_vehicle_grid(
    vehicles: Sequence[VehicleRecord],
    client: ThunderInsightsClient,
    capture: GridCapture,
) -> None:
    """Render the results region and register it for screenshot capture."""
    capture.register(RESULTS_REGION, vehicles)
    cards = "".join(card_html(v, client) for v in vehicles)
    st.markdown(
        f'<section class="vehicle-section" id="{RESULTS_REGION}">'
        f'<ul class="vehicle-grid">{cards}</ul></section>',
        unsafe_allow_html=True,
    )
