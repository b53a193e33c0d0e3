"""Ladder rail lines: 10' sections and the splice kits joining them."""

from __future__ import annotations

from configurator.rules.base import BomRule
from configurator.models import BomContext, BomLine
from configurator.core.catalog import ErpSku, PRICES


class LadderSectionRule(BomRule):
    """One line per physical section, in tenths of a 10' section."""

    priority = 10

    def get_id(self) -> str:
        return "bom.ladder_sections"

    def get_name(self) -> str:
        return "Ladder Sections"

    def applies(self, context: BomContext) -> bool:
        return len(context.sections) > 0

    def generate(self, context: BomContext) -> list[BomLine]:
        # Not merged: two 7' sections are two 0.7 lines
        return self.lines(*(
            (ErpSku.LADDER_SECTION_10FT, f"{feet / 10:.1f}")
            for feet in context.sections
        ))

    def price(self, context: BomContext) -> float:
        return max(0, sum(context.sections)) * PRICES["LADDER_PER_FT"]


class SpliceKitRule(BomRule):
    priority = 20

    def get_id(self) -> str:
        return "bom.splice_kits"

    def get_name(self) -> str:
        return "Splice Kits"

    def applies(self, context: BomContext) -> bool:
        return context.splice_count > 0

    def generate(self, context: BomContext) -> list[BomLine]:
        return self.lines((ErpSku.SPLICE_KIT, context.splice_count))

    def price(self, context: BomContext) -> float:
        return context.splice_count * PRICES["SPLICE_KIT"]
