"""Abstract base class for all BOM rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each emits one family of BOM lines
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from configurator.models import BomContext, BomLine
from configurator.core.units import normalize_sku


class BomRule(ABC):
    """
    Base class for all BOM rules.

    Subclasses implement `applies()` and `generate()`, and `price()` when
    the lines they emit carry a cost. The generator queries the registry,
    filters by `applies()`, sorts by `priority`, and calls `generate()`
    and `price()` in order. Priority fixes the order of lines in the export.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'bom.splice_kits')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Splice Kits')."""
        ...

    @abstractmethod
    def applies(self, context: BomContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: BomContext) -> list[BomLine]:
        """Emit BOM lines for the given context."""
        ...

    def price(self, context: BomContext) -> float:
        """Price contribution of this rule. Hardware-only rules cost nothing."""
        return 0.0

    def line(self, sku: str, quantity: int | float | str) -> BomLine | None:
        """Build a line, or None when the quantity is zero or negative."""
        numeric = float(quantity)
        if numeric <= 0:
            return None
        display = quantity if isinstance(quantity, str) else str(quantity)
        return BomLine(inventory_id=normalize_sku(sku), quantity=display, rule_id=self.get_id())

    def lines(self, *items: tuple[str, int | float | str]) -> list[BomLine]:
        out: list[BomLine] = []
        for sku, quantity in items:
            ln = self.line(sku, quantity)
            if ln is not None:
                out.append(ln)
        return out
