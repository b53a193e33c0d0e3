"""Rule registry: stores and resolves BOM rules."""

from __future__ import annotations

from configurator.models import BomContext
from configurator.rules.base import BomRule


class RuleRegistry:
    """
    Central registry for all BOM rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, BomRule] = {}

    def register(self, rule: BomRule) -> None:
        """Register a BOM rule."""
        self._rules[rule.get_id()] = rule

    def list_rules(self) -> list[BomRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: BomContext) -> list[BomRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects BomConfig.enabled_rules and disabled_rules.
        """
        config = context.config
        candidates = list(self._rules.values())

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[BomRule]) -> list[BomRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[BomRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard BOM rules."""
    from configurator.rules.bom.ladder import LadderSectionRule, SpliceKitRule
    from configurator.rules.bom.supports import SupportRule, ClampPlateRule, HardwareKitRule
    from configurator.rules.bom.accessories import AccessoryRule

    registry = RuleRegistry()
    registry.register(LadderSectionRule())
    registry.register(SpliceKitRule())
    registry.register(SupportRule())
    registry.register(ClampPlateRule())
    registry.register(AccessoryRule())
    registry.register(HardwareKitRule())
    return registry
