"""Standoff and ground-foot catalog models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class StandoffType(str, Enum):
    SO2 = "SO2"
    SO3 = "SO3"


class StandoffCatalogEntry(BaseModel):
    """One allowed wall offset of a standoff family."""
    type: StandoffType
    sku: str
    value_inches: float


class FootCatalogEntry(BaseModel):
    """One allowed first-rung height when ground feet carry the ladder."""
    type: StandoffType
    sku: str
    first_rung_inches: float


class ResolvedStandoff(BaseModel):
    """Nearest catalog standoff to a requested wall offset."""
    type: StandoffType
    sku: str
    value_inches: float
    exact: bool        # Request matched a catalog value within tolerance
    in_range: bool     # Request lies inside the catalog's overall min/max
