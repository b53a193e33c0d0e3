"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from configurator.core.catalog import WALL_STANDOFFS, FOOT_OPTIONS
from configurator.services.ladder_service import LadderService
from configurator.api.schemas import (
    ConfigureRequest, ConfigureResponse, RuleInfo, StandoffCatalogResponse,
)

router = APIRouter()

# Shared service instance
_service = LadderService()


@router.post("/configure", response_model=ConfigureResponse)
async def configure_ladder(request: ConfigureRequest) -> ConfigureResponse:
    """Resolve a ladder build plan, BOM and price from user inputs."""
    configuration = _service.configure(request.params, request.config)

    return ConfigureResponse(
        configuration=configuration,
        wall_pairs=configuration.wall_pairs,
        ladder_feet=configuration.ladder_feet,
        rule_count=len(_service.list_rules()),
    )


@router.post("/bom.csv")
async def export_bom(request: ConfigureRequest) -> Response:
    """Download the BOM as an ERP import CSV."""
    configuration = _service.configure(request.params, request.config)
    filename = _service.export_config.filename
    return Response(
        content=_service.export_csv(configuration),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/catalog/standoffs", response_model=StandoffCatalogResponse)
async def standoff_catalog() -> StandoffCatalogResponse:
    """List the wall standoff and ground feet catalogs."""
    return StandoffCatalogResponse(wall=list(WALL_STANDOFFS), feet=list(FOOT_OPTIONS))


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all registered BOM rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
