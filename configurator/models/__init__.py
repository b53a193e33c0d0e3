from .standoff import StandoffType, StandoffCatalogEntry, FootCatalogEntry, ResolvedStandoff
from .ladder import HeightSpec, HeightPlan, RungAlignment, RungGrid, StandoffPlan
from .bom import BomLine, SupportLine, AccessoryLine, BomResult
from .parameters import AccessoryFlags, LadderParams, BomConfig, ExportConfig
from .context import BomContext
from .configuration import LadderConfiguration

__all__ = [
    "StandoffType", "StandoffCatalogEntry", "FootCatalogEntry", "ResolvedStandoff",
    "HeightSpec", "HeightPlan", "RungAlignment", "RungGrid", "StandoffPlan",
    "BomLine", "SupportLine", "AccessoryLine", "BomResult",
    "AccessoryFlags", "LadderParams", "BomConfig", "ExportConfig",
    "BomContext",
    "LadderConfiguration",
]
