"""Rung grid construction.

With ground feet the grid is built bottom-up from the catalog first-rung
height and the top rung is forced to the requested height. Without feet it
is built top-down and stops at the first-rung height, so no rung is ever
placed at or below ground.
"""

from __future__ import annotations
import math

from configurator.models import RungGrid, RungAlignment
from configurator.core.catalog import RUNG_PITCH_IN
from configurator.core.units import EPSILON, round_to


def build_rung_grid(
    total_inches: float,
    using_feet: bool,
    first_rung_inches: float | None = None,
) -> RungGrid:
    if using_feet and first_rung_inches is not None:
        positions = _bottom_up(total_inches, first_rung_inches)
        alignment = compute_alignment(total_inches, first_rung_inches)
    else:
        positions = _top_down(total_inches, first_rung_inches)
        alignment = None
    return RungGrid(positions_in=positions, alignment=alignment)


def _bottom_up(total_inches: float, first_rung_inches: float) -> list[float]:
    out: list[float] = []
    y = first_rung_inches
    while y <= total_inches + EPSILON:
        out.append(round_to(y))
        y += RUNG_PITCH_IN
    if not out or abs(out[-1] - total_inches) > EPSILON:
        out.append(round_to(total_inches))
    out.reverse()
    return out


def _top_down(total_inches: float, first_rung_inches: float | None) -> list[float]:
    limit = max(0.0, first_rung_inches) if first_rung_inches is not None else 0.0
    count = max(1, math.floor(total_inches / RUNG_PITCH_IN) + 1)
    out = [
        total_inches - i * RUNG_PITCH_IN
        for i in range(count + 1)
        if total_inches - i * RUNG_PITCH_IN >= limit - EPSILON
    ]
    if out and abs(out[-1] - limit) > EPSILON and limit > 0:
        out.append(limit)
    return out


def compute_alignment(total_inches: float, first_rung_inches: float) -> RungAlignment:
    """Offset between the top and the 12" grid rising from the first rung."""
    remainder = math.fmod(total_inches - first_rung_inches, RUNG_PITCH_IN)
    aligned = abs(remainder) < EPSILON
    return RungAlignment(aligned=aligned, offset_in=0.0 if aligned else round_to(remainder))
