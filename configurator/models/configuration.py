"""The complete resolved ladder configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .bom import AccessoryLine, BomLine, SupportLine
from .ladder import HeightPlan, RungGrid, StandoffPlan
from .parameters import LadderParams
from .standoff import ResolvedStandoff


class LadderConfiguration(BaseModel):
    """Everything derived from one set of LadderParams."""
    params: LadderParams
    height_label: str = ""
    height_plan: HeightPlan | None = None
    standoff: ResolvedStandoff
    sections: list[int] = []
    splice_count: int = 0
    splice_positions_ft: list[float] = []
    splice_labels: list[str] = []      # splice_positions_ft as feet-inches labels
    rung_grid: RungGrid = Field(default_factory=RungGrid)
    standoff_plan: StandoffPlan = Field(default_factory=StandoffPlan)
    supports: list[SupportLine] = []
    accessories: list[AccessoryLine] = []
    bom: list[BomLine] = []
    total_price: float = 0.0
    error: str | None = None      # Pipeline halted at sectioning; downstream is empty
    warnings: list[str] = []      # Non-blocking notes for the caller to display

    @property
    def wall_pairs(self) -> int:
        return self.standoff_plan.wall_pairs

    @property
    def ladder_feet(self) -> int:
        return sum(self.sections)
