"""BOM and pricing generation over the rule registry."""

from __future__ import annotations
import logging

from configurator.models import (
    AccessoryFlags, BomConfig, BomContext, BomResult, FootCatalogEntry, StandoffPlan,
)
from configurator.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class BomGenerator:
    """
    Stateless BOM generator.

    Builds a context from the resolved geometry, runs the applicable rules
    in order, and returns their lines with the summed price.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def generate(self, context: BomContext) -> BomResult:
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            context.add_lines(rule.generate(context))
            context.add_price(rule.get_id(), rule.price(context))

        logger.debug(
            "BOM: %d lines from %d rules, total %.2f",
            len(context.lines), len(rules), context.total_price,
        )
        return BomResult(lines=context.lines, total_price=context.total_price)


def generate_bom(
    sections: list[int],
    splice_count: int,
    standoff_plan: StandoffPlan,
    feet_selection: FootCatalogEntry | None,
    wall_sku: str,
    wall_offset: float,
    accessories: AccessoryFlags | None = None,
    config: BomConfig | None = None,
    registry: RuleRegistry | None = None,
) -> BomResult:
    """Fold the resolved geometry and options into BOM lines and a price."""
    context = BomContext(
        sections=list(sections),
        splice_count=max(0, splice_count),
        standoff_plan=standoff_plan,
        feet_selection=feet_selection,
        wall_sku=wall_sku,
        wall_offset=wall_offset,
        accessories=accessories or AccessoryFlags(),
        config=config or BomConfig(),
    )
    return BomGenerator(registry).generate(context)
