"""BOM context: accumulates state during a single BOM generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .bom import BomLine
from .ladder import StandoffPlan
from .parameters import AccessoryFlags, BomConfig
from .standoff import FootCatalogEntry


class BomContext(BaseModel):
    """
    Holds all state during a single BOM generation pass.

    The generator fills the inputs from the resolved geometry.
    Rules add lines and price contributions in priority order.
    """
    # Input
    sections: list[int] = []
    splice_count: int = 0
    standoff_plan: StandoffPlan = Field(default_factory=StandoffPlan)
    feet_selection: FootCatalogEntry | None = None
    wall_sku: str = "LAD-SO2"
    wall_offset: float = 0.0
    accessories: AccessoryFlags = Field(default_factory=AccessoryFlags)
    config: BomConfig = Field(default_factory=BomConfig)

    # Output (populated by rules)
    lines: list[BomLine] = []
    price_parts: dict[str, float] = {}

    @property
    def wall_pairs(self) -> int:
        return self.standoff_plan.wall_pairs

    @property
    def total_price(self) -> float:
        return sum(self.price_parts.values())

    def add_lines(self, lines: list[BomLine]) -> None:
        self.lines.extend(lines)

    def add_price(self, rule_id: str, amount: float) -> None:
        self.price_parts[rule_id] = self.price_parts.get(rule_id, 0.0) + amount
