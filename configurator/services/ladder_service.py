"""High-level ladder configuration service, facade for the API layer."""

from __future__ import annotations

from configurator.models import (
    LadderParams, LadderConfiguration, BomConfig, ExportConfig,
)
from configurator.core.generator import LadderGenerator
from configurator.core.registry import RuleRegistry, create_default_registry
from configurator.services.bom_export import bom_to_csv


class LadderService:
    """Delegates to the generator and renders exports."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        export_config: ExportConfig | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = LadderGenerator(self.registry)
        self.export_config = export_config or ExportConfig()

    def configure(
        self,
        params: LadderParams | None = None,
        config: BomConfig | None = None,
    ) -> LadderConfiguration:
        if params is None:
            params = LadderParams()
        if config is None:
            config = BomConfig()

        return self.generator.generate(params, config)

    def export_csv(self, configuration: LadderConfiguration) -> str:
        return bom_to_csv(configuration.bom, self.export_config)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
