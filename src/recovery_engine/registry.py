"""Rule registry: discovers insight rules and scopes them by category."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Iterable
from pathlib import Path

from recovery_engine.exceptions import DuplicateRuleError
from recovery_engine.models.enums import InsightCategory
from recovery_engine.rules.base import InsightRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Holds one InsightRule per ``rule_id``.

    ``discover_rules`` walks the rules/ package tree and registers every
    concrete InsightRule subclass defined there. Each class is registered
    from its defining module only, so a rule imported into another rule
    module is not picked up twice. Two different classes claiming the same
    ``rule_id`` is a configuration error.
    """

    def __init__(self) -> None:
        self._rules: dict[str, InsightRule] = {}

    def discover_rules(self) -> None:
        import recovery_engine.rules as rules_pkg

        rules_path = Path(rules_pkg.__file__).parent  # type: ignore[arg-type]
        before = len(self._rules)
        for module_name in self._iter_modules(rules_pkg.__name__, str(rules_path)):
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                logger.warning("Could not import rule module %s: %s", module_name, exc)
                continue
            for rule_cls in _rule_classes(module_name, vars(module).values()):
                self.register(rule_cls())
        logger.debug("Discovered %d insight rule(s)", len(self._rules) - before)

    @staticmethod
    def _iter_modules(package_name: str, package_path: str) -> Iterable[str]:
        for _importer, module_name, is_pkg in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            if not is_pkg:
                yield module_name

    def register(self, rule: InsightRule) -> None:
        """Register a rule instance by its rule_id.

        Registering another instance of the same class replaces the old one.

        Raises:
            DuplicateRuleError: a different rule class already owns the id.
        """
        existing = self._rules.get(rule.rule_id)
        if existing is not None and type(existing) is not type(rule):
            raise DuplicateRuleError(rule.rule_id, type(existing), type(rule))
        self._rules[rule.rule_id] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get(self, rule_id: str) -> InsightRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[InsightRule]:
        """Return all registered rules in a stable order (category, then id)."""
        return sorted(self._rules.values(), key=lambda r: (r.category.value, r.rule_id))

    def get_rules(
        self, categories: Iterable[InsightCategory] | None = None
    ) -> list[InsightRule]:
        """Rules in the given categories, in ``get_all_rules`` order. None means all."""
        if categories is None:
            return self.get_all_rules()
        wanted = set(categories)
        return [r for r in self.get_all_rules() if r.category in wanted]

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())


def _rule_classes(module_name: str, attrs: Iterable[object]) -> list[type[InsightRule]]:
    """Concrete InsightRule subclasses defined in ``module_name`` itself."""
    return [
        attr
        for attr in attrs
        if isinstance(attr, type)
        and issubclass(attr, InsightRule)
        and attr.__module__ == module_name
        and not getattr(attr, "__abstractmethods__", set())
    ]
