"""Main ladder generator: runs the resolution pipeline end to end."""

from __future__ import annotations
import logging

from configurator.models import (
    LadderParams, LadderConfiguration, BomConfig, BomContext,
    HeightPlan, ResolvedStandoff, RungGrid,
)
from configurator.core.bom import BomGenerator
from configurator.core.errors import ConfiguratorError
from configurator.core.height import resolve_height
from configurator.core.planner import plan_standoffs
from configurator.core.registry import RuleRegistry
from configurator.core.rungs import build_rung_grid
from configurator.core.sections import sectionize, count_splices
from configurator.core.splices import splice_positions
from configurator.core.standoff import resolve_standoff
from configurator.core.units import format_feet, format_inches
from configurator.rules.bom.accessories import selected_accessories
from configurator.rules.bom.supports import combined_supports

logger = logging.getLogger(__name__)


class LadderGenerator:
    """
    Stateless ladder generator.

    Takes LadderParams, resolves height and standoff, sections the ladder,
    lays out rungs, splices and standoffs, and prices the BOM.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry
        self.bom_generator = BomGenerator(registry)

    def generate(
        self,
        params: LadderParams,
        config: BomConfig | None = None,
    ) -> LadderConfiguration:
        if config is None:
            config = BomConfig()

        total_inches = params.height_spec().total_inches
        standoff = resolve_standoff(params.standoff_in)
        result = LadderConfiguration(
            params=params,
            height_label=format_inches(max(0.0, total_inches)),
            standoff=standoff,
            warnings=self._standoff_warnings(params.standoff_in, standoff),
        )

        # Sectioning phase: a reported error stops the geometry here
        try:
            plan = resolve_height(total_inches, params.use_feet)
            sections = sectionize(plan.ladder_feet_ft)
        except ConfiguratorError as exc:
            logger.info("Configuration halted: %s", exc)
            result.error = str(exc)
            return result

        result.height_plan = plan
        result.sections = sections
        result.splice_count = count_splices(sections)

        # Geometry phase
        using_feet = plan.feet_selection is not None
        grid = build_rung_grid(total_inches, using_feet, plan.first_rung_inches)
        result.rung_grid = grid
        result.warnings.extend(self._height_warnings(plan, grid))
        result.splice_positions_ft = splice_positions(sections, grid.positions_in)
        result.splice_labels = [format_feet(p) for p in result.splice_positions_ft]
        result.standoff_plan = plan_standoffs(using_feet, grid.positions_in)

        # BOM phase: run applicable rules
        context = BomContext(
            sections=sections,
            splice_count=result.splice_count,
            standoff_plan=result.standoff_plan,
            feet_selection=plan.feet_selection,
            wall_sku=standoff.sku,
            wall_offset=standoff.value_inches,
            accessories=params.accessories,
            config=config,
        )
        bom = self.bom_generator.generate(context)
        result.bom = bom.lines
        result.total_price = bom.total_price
        result.supports = combined_supports(context)
        result.accessories = selected_accessories(params.accessories)
        return result

    def _standoff_warnings(self, requested: float, standoff: ResolvedStandoff) -> list[str]:
        warnings: list[str] = []
        if not standoff.in_range:
            warnings.append(
                f"Requested standoff {requested:g}″ is outside the catalog range; "
                f"using {standoff.sku} at {standoff.value_inches:g}″."
            )
        elif not standoff.exact:
            warnings.append(
                f"Requested standoff {requested:g}″ snapped to {standoff.sku} at {standoff.value_inches:g}″."
            )
        return warnings

    def _height_warnings(self, plan: HeightPlan, grid: RungGrid) -> list[str]:
        warnings: list[str] = []
        if not plan.bottom_rung_ok:
            warnings.append(
                f"First rung at {plan.first_rung_inches:g}″ is outside the 6″ to 15″ window."
            )
        alignment = grid.alignment
        if plan.feet_selection is not None and alignment is not None and not alignment.aligned:
            offset = abs(alignment.offset_in)
            miss = min(offset, 12 - offset)
            warnings.append(
                f"Top rung is {miss:g}″ off the 12″ grid from the "
                f"{plan.feet_selection.first_rung_inches:g}″ feet."
            )
        for w in warnings:
            logger.info(w)
        return warnings
