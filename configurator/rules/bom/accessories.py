"""Accessory lines with their dependency chain.

Walk-through arms stand alone; P-returns need the arms; the safety gate
needs both. The security cover is independent.
"""

from __future__ import annotations

from configurator.rules.base import BomRule
from configurator.models import BomContext, BomLine, AccessoryFlags, AccessoryLine
from configurator.core.catalog import ErpSku, PRICES, ACCESSORY_DESCRIPTIONS


def selected_accessories(flags: AccessoryFlags) -> list[AccessoryLine]:
    skus: list[str] = []
    if flags.has_walk_through:
        skus.append(ErpSku.WALK_THROUGH)
    if flags.has_p_returns:
        skus.append(ErpSku.P_RETURNS)
    if flags.has_safety_gate:
        skus.append(ErpSku.SAFETY_GATE)
    if flags.security_cover:
        skus.append(ErpSku.SECURITY_COVER)
    return [
        AccessoryLine(sku=sku, description=ACCESSORY_DESCRIPTIONS[sku], price=PRICES[sku])
        for sku in skus
    ]


class AccessoryRule(BomRule):
    priority = 50

    def get_id(self) -> str:
        return "bom.accessories"

    def get_name(self) -> str:
        return "Accessories"

    def applies(self, context: BomContext) -> bool:
        return len(selected_accessories(context.accessories)) > 0

    def generate(self, context: BomContext) -> list[BomLine]:
        return self.lines(*((a.sku, "1") for a in selected_accessories(context.accessories)))

    def price(self, context: BomContext) -> float:
        return sum(a.price for a in selected_accessories(context.accessories))
