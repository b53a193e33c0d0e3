"""Wall standoff, ground feet, clamp plate and hardware lines.

Support quantities on export rows are individual clamp units, two per pair.
"""

from __future__ import annotations

from configurator.rules.base import BomRule
from configurator.models import BomContext, BomLine, SupportLine
from configurator.core.catalog import (
    ErpSku, PRICES, FEET_PRICE_KEYS, HARDWARE_KIT_SKUS, is_alt_clamp_offset,
)


def combined_supports(context: BomContext) -> list[SupportLine]:
    """Wall pairs plus one pair for ground feet, merged by SKU (wall first)."""
    pairs: dict[str, int] = {}
    if context.wall_pairs > 0:
        pairs[context.wall_sku] = pairs.get(context.wall_sku, 0) + context.wall_pairs
    if context.feet_selection is not None:
        sku = context.feet_selection.sku
        pairs[sku] = pairs.get(sku, 0) + 1
    return [SupportLine(sku=sku, pairs=n) for sku, n in pairs.items()]


def clamp_pairs(context: BomContext) -> tuple[int, int]:
    """(standard, alternate) clamp pairs for the wall standoffs."""
    if context.wall_pairs <= 0:
        return 0, 0
    alt = context.wall_pairs if is_alt_clamp_offset(context.wall_offset) else 0
    return context.wall_pairs - alt, alt


class SupportRule(BomRule):
    priority = 30

    def get_id(self) -> str:
        return "bom.supports"

    def get_name(self) -> str:
        return "Standoffs and Ground Feet"

    def applies(self, context: BomContext) -> bool:
        return context.wall_pairs > 0 or context.feet_selection is not None

    def generate(self, context: BomContext) -> list[BomLine]:
        return self.lines(*((s.sku, 2 * s.pairs) for s in combined_supports(context)))

    def price(self, context: BomContext) -> float:
        total = context.wall_pairs * PRICES.get(context.wall_sku, 0.0)
        if context.feet_selection is not None:
            total += PRICES[FEET_PRICE_KEYS[context.feet_selection.type]]
        return total


class ClampPlateRule(BomRule):
    """Clamp plates and gussets, one pair of each per wall standoff pair."""

    priority = 40
    dependencies = ["bom.supports"]

    def get_id(self) -> str:
        return "bom.clamp_plates"

    def get_name(self) -> str:
        return "Clamp Plates and Gussets"

    def applies(self, context: BomContext) -> bool:
        return context.wall_pairs > 0

    def generate(self, context: BomContext) -> list[BomLine]:
        standard, alt = clamp_pairs(context)
        return self.lines(
            (ErpSku.CLAMP_PAIR, 2 * standard),
            (ErpSku.CLAMP_PAIR_ALT, 2 * alt),
            (ErpSku.STANDOFF_GUSSET, 2 * context.wall_pairs),
        )


class HardwareKitRule(BomRule):
    """Fasteners sized by feet standoffs and clamp plates."""

    priority = 60
    dependencies = ["bom.clamp_plates"]

    def get_id(self) -> str:
        return "bom.hardware_kit"

    def get_name(self) -> str:
        return "Hardware Kit"

    def quantity(self, context: BomContext) -> int:
        standard, alt = clamp_pairs(context)
        feet_standoffs = 2 if context.feet_selection is not None else 0
        return feet_standoffs * 2 + (standard * 2) * 4 + (alt * 2) * 6

    def applies(self, context: BomContext) -> bool:
        return self.quantity(context) > 0

    def generate(self, context: BomContext) -> list[BomLine]:
        qty = self.quantity(context)
        return self.lines(*((sku, qty) for sku in HARDWARE_KIT_SKUS))
