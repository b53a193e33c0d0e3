"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from configurator.models import (
    LadderParams, BomConfig, LadderConfiguration,
    StandoffCatalogEntry, FootCatalogEntry,
)


class ConfigureRequest(BaseModel):
    """Request body for the /configure and /bom.csv endpoints."""
    params: LadderParams = LadderParams()
    config: BomConfig = BomConfig()


class ConfigureResponse(BaseModel):
    """Response from the /configure endpoint."""
    configuration: LadderConfiguration
    wall_pairs: int
    ladder_feet: int
    rule_count: int


class StandoffCatalogResponse(BaseModel):
    wall: list[StandoffCatalogEntry]
    feet: list[FootCatalogEntry]


class RuleInfo(BaseModel):
    id: str
    name: str
