"""Reference data: standoff catalogs, prices and ERP inventory IDs.

Everything here is fixed process-wide and must not be mutated.
"""

from __future__ import annotations
from types import MappingProxyType

from configurator.models import StandoffCatalogEntry, FootCatalogEntry, StandoffType
from configurator.core.units import EPSILON, near


FIRST_RUNG_MIN_IN = 6.0
FIRST_RUNG_MAX_IN = 15.0
RUNG_PITCH_IN = 12.0

SO2_SKU = "LAD-SO2"
SO3_SKU = "LAD-SO3"

SO2_WALL = (8.625, 9.75, 10.875, 12.0)
SO3_WALL = (13.125, 14.25, 15.375)
SO2_FEET = (8.5, 10.75, 11.875)
SO3_FEET = (13.0, 14.125)

# Family order matters: SO2 wins every tie
WALL_STANDOFFS: tuple[StandoffCatalogEntry, ...] = tuple(
    [StandoffCatalogEntry(type=StandoffType.SO2, sku=SO2_SKU, value_inches=v) for v in SO2_WALL]
    + [StandoffCatalogEntry(type=StandoffType.SO3, sku=SO3_SKU, value_inches=v) for v in SO3_WALL]
)

FOOT_OPTIONS: tuple[FootCatalogEntry, ...] = tuple(
    c for c in (
        [FootCatalogEntry(type=StandoffType.SO2, sku=SO2_SKU, first_rung_inches=v) for v in SO2_FEET]
        + [FootCatalogEntry(type=StandoffType.SO3, sku=SO3_SKU, first_rung_inches=v) for v in SO3_FEET]
    )
    if FIRST_RUNG_MIN_IN - EPSILON <= c.first_rung_inches <= FIRST_RUNG_MAX_IN + EPSILON
)

PRICES = MappingProxyType({
    "LADDER_PER_FT": 64.06,
    "SPLICE_KIT": 48.6,
    "LAD-SO2": 22.5,
    "LAD-SO3": 24.6,
    "FEET_SO2": 22.5,
    "FEET_SO3": 24.6,
    "LAD-CP2": 1.36,
    "FL-WT-01": 329.22,
    "FL-PR-02": 146.44,
    "LSG-2030-PCY": 425.0,
    "FL-LGDFP-02": 620.0,
})

FEET_PRICE_KEYS = MappingProxyType({
    StandoffType.SO2: "FEET_SO2",
    StandoffType.SO3: "FEET_SO3",
})


class ErpSku:
    """Inventory IDs as the ERP knows them."""
    LADDER_SECTION_10FT = "FL-10"        # Sold in 10' sections, fractional quantities
    SPLICE_KIT = "LADDER SPLICE KIT"
    CLAMP_PAIR = "LAD-CP1"
    CLAMP_PAIR_ALT = "LAD-CP2"           # For the offsets in CLAMP_PAIR_ALT_OFFSETS
    STANDOFF_GUSSET = "LAD-SO1G"
    WALK_THROUGH = "FL-WT-01"
    P_RETURNS = "FL-PR-02"
    SAFETY_GATE = "LSG-2030-PCY"
    SECURITY_COVER = "FL-LGDFP-02"


HARDWARE_KIT_SKUS = ("19634", "36753", "33784", "0156022")

CLAMP_PAIR_ALT_OFFSETS = (10.875, 14.25, 15.375)

ACCESSORY_DESCRIPTIONS = MappingProxyType({
    ErpSku.WALK_THROUGH: "Walk-Through Arms",
    ErpSku.P_RETURNS: "P Returns",
    ErpSku.SAFETY_GATE: "Safety Gate",
    ErpSku.SECURITY_COVER: "Security Cover",
})


def is_alt_clamp_offset(offset: float) -> bool:
    return any(near(v, offset) for v in CLAMP_PAIR_ALT_OFFSETS)


def wall_range() -> tuple[float, float]:
    values = [e.value_inches for e in WALL_STANDOFFS]
    return min(values), max(values)
