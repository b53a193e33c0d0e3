"""Splice placement: section boundaries snapped between rungs."""

from __future__ import annotations

from configurator.core.units import inches_to_feet


def rung_midpoints_ft(rung_positions_in: list[float]) -> list[float]:
    """Midpoints of consecutive rungs, in grid order, converted to feet."""
    return [
        inches_to_feet((a + b) / 2)
        for a, b in zip(rung_positions_in, rung_positions_in[1:])
    ]


def _nearest(value: float, candidates: list[float]) -> float:
    if not candidates:
        return value
    best = candidates[0]
    for c in candidates[1:]:
        if abs(c - value) < abs(best - value):
            best = c
    return best


def splice_positions(sections: list[int], rung_positions_in: list[float]) -> list[float]:
    """Elevation (ft) of each splice; one per boundary between sections."""
    mids = rung_midpoints_ft(rung_positions_in)
    out: list[float] = []
    acc = 0
    for length in sections[:-1]:
        acc += length
        out.append(_nearest(acc, mids))
    return out
