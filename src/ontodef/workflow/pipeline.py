"""Pipeline: thin orchestrator from declarations to a populated ontology.

Steps:
1. Symbolic checks over the whole batch (``run_declaration_checks``).
2. Registration, one declaration at a time, in textual order.
3. Optional hand-off to the external reasoner.

Everything runs synchronously on the calling thread.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from owlready2 import ThingClass, World

from ontodef.config import OntologyConfig
from ontodef.models.declaration import EntityDeclaration
from ontodef.reasoning import run_reasoner
from ontodef.registry import DeclarationRegistry
from ontodef.validation.rules import Violation, run_declaration_checks

logger = logging.getLogger(__name__)


class DeclarationValidationError(ValueError):
    """Raised when the symbolic checks report errors for a batch."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = violations
        lines = "\n".join(f"  - [{v.rule_name}] {v.message}" for v in violations)
        super().__init__(f"{len(violations)} declaration error(s):\n{lines}")


@dataclass
class BuildResult:
    """Result of one pipeline run."""

    classes: dict[str, ThingClass] = field(default_factory=dict)
    violations: list[Violation] = field(default_factory=list)
    reasoned: bool = False


class OntologyPipeline:
    """Main pipeline orchestrator.

    Args:
        config: Ontology configuration.
        world: owlready2 world to build in (default: owlready2's default world).
    """

    def __init__(self, config: OntologyConfig, world: World | None = None) -> None:
        self._config = config
        self._registry = DeclarationRegistry.from_config(config, world=world)

    @property
    def registry(self) -> DeclarationRegistry:
        return self._registry

    def run(
        self,
        declarations: Iterable[EntityDeclaration],
        reason: bool | None = None,
    ) -> BuildResult:
        """Check, register and (optionally) reason over *declarations*.

        Args:
            declarations: Declarations in registration order.
            reason: Run the reasoner afterwards.  ``None`` falls back to
                ``config.reason_after_build``.

        Raises:
            DeclarationValidationError: checks found errors and
                ``config.fail_on_violations`` is set.  Nothing is
                registered in that case.
        """
        batch = list(declarations)
        violations = run_declaration_checks(batch, known=self._registry.known_names())

        errors = [v for v in violations if v.severity == "error"]
        if errors:
            if self._config.fail_on_violations:
                raise DeclarationValidationError(errors)
            for v in errors:
                logger.warning("Declaration error ignored: %s", v.message)

        classes = self._registry.register_all(batch)
        result = BuildResult(
            classes={c.name: c for c in classes},
            violations=violations,
        )

        should_reason = self._config.reason_after_build if reason is None else reason
        if should_reason:
            run_reasoner(self._registry.ontology, self._config)
            result.reasoned = True

        logger.info(
            "Pipeline finished: %d classes, %d violations, reasoned=%s.",
            len(result.classes),
            len(violations),
            result.reasoned,
        )
        return result
