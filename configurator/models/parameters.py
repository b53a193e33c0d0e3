"""User inputs and BOM/export configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .ladder import HeightSpec


class AccessoryFlags(BaseModel):
    """Accessory checkboxes; the chain walk-through -> P-returns -> gate is enforced downstream."""
    walk_through: bool = False
    p_returns: bool = False
    safety_gate: bool = False
    security_cover: bool = False

    @property
    def has_walk_through(self) -> bool:
        return self.walk_through

    @property
    def has_p_returns(self) -> bool:
        return self.walk_through and self.p_returns

    @property
    def has_safety_gate(self) -> bool:
        return self.walk_through and self.p_returns and self.safety_gate


class LadderParams(BaseModel):
    """User-adjustable parameters for a ladder configuration."""
    height_ft: int = Field(default=20, ge=0, le=1000)  # Height to the top rung, whole feet
    height_in: float = Field(default=0.0, ge=0, lt=12, allow_inf_nan=False)
    standoff_in: float = Field(default=12.0, allow_inf_nan=False)  # Requested wall offset to rung center
    use_feet: bool = False                             # Ground feet instead of a wall-only base
    accessories: AccessoryFlags = Field(default_factory=AccessoryFlags)
    # Parapet crossover only drives the drawing; it never reaches the BOM
    parapet_crossover: bool = False
    parapet_width_in: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    parapet_height_in: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    @property
    def total_inches(self) -> float:
        return self.height_ft * 12 + self.height_in

    def height_spec(self) -> HeightSpec:
        return HeightSpec(total_inches=self.total_inches)


class BomConfig(BaseModel):
    """Controls which BOM rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules


class ExportConfig(BaseModel):
    """Constant columns and file name for the ERP CSV export."""
    project_task: str = "06PROD"
    cost_code: str = "40-030"
    filename: str = "EZ-Ladder-BOM.csv"
