"""Wall standoff resolution against the SO2/SO3 catalogs."""

from __future__ import annotations

from configurator.models import ResolvedStandoff
from configurator.core.catalog import WALL_STANDOFFS, wall_range
from configurator.core.units import near


def resolve_standoff(requested_inches: float) -> ResolvedStandoff:
    """Nearest catalog offset to the request; earlier family wins ties."""
    # min() keeps the first of equal keys, and the catalog lists SO2 before SO3
    best = min(WALL_STANDOFFS, key=lambda e: abs(e.value_inches - requested_inches))
    lo, hi = wall_range()
    return ResolvedStandoff(
        type=best.type,
        sku=best.sku,
        value_inches=best.value_inches,
        exact=near(best.value_inches, requested_inches),
        in_range=lo <= requested_inches <= hi,
    )
