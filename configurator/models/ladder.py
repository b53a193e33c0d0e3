"""Resolved ladder geometry: height plan, rung grid, standoff plan."""

from __future__ import annotations
from pydantic import BaseModel

from .standoff import FootCatalogEntry


class HeightSpec(BaseModel):
    """Requested height to the top rung, in inches."""
    total_inches: float


class HeightPlan(BaseModel):
    """Nominal ladder length and first-rung height for a requested height."""
    total_inches: float
    feet_selection: FootCatalogEntry | None = None  # None = built top-down, no ground feet
    ladder_feet_ft: int
    first_rung_inches: float
    bottom_rung_ok: bool = True  # First rung inside the 6-15" window


class RungAlignment(BaseModel):
    """How far the 12" grid from the first rung misses the top (feet only)."""
    aligned: bool
    offset_in: float


class RungGrid(BaseModel):
    """Rung elevations in inches above ground, top rung first."""
    positions_in: list[float] = []
    alignment: RungAlignment | None = None


class StandoffPlan(BaseModel):
    """Rung elevations (feet, ascending) that carry a wall standoff pair."""
    positions_ft: list[float] = []

    @property
    def wall_pairs(self) -> int:
        return len(self.positions_ft)
