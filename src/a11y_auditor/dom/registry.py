# src/a11y_auditor/dom/registry.py
import importlib
import pkgutil
import logging
from typing import List, Set

from .core import RuleDefinition

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for the accessibility rule checks.

    Dynamically discovers the RuleDefinition modules in the 'a11y_auditor.rules'
    package and keeps them sorted by their execution order.
    """

    _definitions: List[RuleDefinition] = []
    _all_codes: Set[str] = set()
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Discovers and registers all rule definitions found in the 'a11y_auditor.rules' package.

        Each module is expected to expose a `DEFINITION` attribute (instance of
        `RuleDefinition`). Discovery runs once per process.
        """
        if cls._loaded:
            return

        try:
            # Import the rules package to iterate over its modules
            import a11y_auditor.rules as rules_pkg

            definitions = []
            for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
                full_name = f"a11y_auditor.rules.{name}"
                try:
                    module = importlib.import_module(full_name)
                    if hasattr(module, "DEFINITION") and isinstance(module.DEFINITION, RuleDefinition):
                        definitions.append(module.DEFINITION)
                        cls._all_codes.update(module.DEFINITION.codes)
                        logger.debug(f"Rule loaded: {module.DEFINITION.name}")
                except Exception as e:
                    logger.error(f"Error loading rule module {name}: {e}")

            cls._definitions = sorted(definitions, key=lambda d: d.order)
            cls._loaded = True
        except ImportError as e:
            logger.error(f"Could not find rules package: {e}")

    @classmethod
    def get_all_definitions(cls) -> List[RuleDefinition]:
        """Returns the rule definitions in execution order."""
        return list(cls._definitions)

    @classmethod
    def get_all_possible_codes(cls) -> List[str]:
        """Returns a sorted list of all unique issue codes the rules can emit."""
        return sorted(list(cls._all_codes))
