"""Validation rules: symbolic checks over a sequence of declarations.

These run before anything touches the ontology, so a batch can be
rejected as a whole instead of failing halfway through registration.
Each rule returns a list of ``Violation`` objects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ontodef.config import ROOT_TYPES
from ontodef.models.declaration import EntityDeclaration

logger = logging.getLogger(__name__)


@dataclass
class Violation:
    """A single constraint violation."""

    rule_name: str
    severity: str  # "error" | "warning"
    message: str
    subject: str  # declaration name
    context: dict[str, Any] = field(default_factory=dict)


def check_identifiers(declaration: EntityDeclaration) -> list[Violation]:
    """Name and parent must both be valid identifiers."""
    violations = []
    for role, value in (("name", declaration.name), ("parent", declaration.parent)):
        if not value.isidentifier():
            violations.append(Violation(
                rule_name="invalid_identifier",
                severity="error",
                message=f"Declaration {declaration.name!r}: {role} {value!r} is not a valid identifier.",
                subject=declaration.name,
                context={"role": role, "value": value},
            ))
    return violations


def check_self_parent(declaration: EntityDeclaration) -> list[Violation]:
    """A class cannot be its own parent."""
    if declaration.name == declaration.parent:
        return [Violation(
            rule_name="self_parent",
            severity="error",
            message=f"Class {declaration.name!r} names itself as parent.",
            subject=declaration.name,
        )]
    return []


def check_parent_declared(declaration: EntityDeclaration, known: set[str]) -> list[Violation]:
    """The parent must be a root or a class declared earlier."""
    if declaration.parent in known or declaration.parent == declaration.name:
        return []
    return [Violation(
        rule_name="parent_not_declared",
        severity="error",
        message=(
            f"Class {declaration.name!r}: parent {declaration.parent!r} "
            f"is not declared before it."
        ),
        subject=declaration.name,
        context={"parent": declaration.parent},
    )]


def check_equivalent_known(declaration: EntityDeclaration, known: set[str]) -> list[Violation]:
    """A by-name equivalence target must already be declared."""
    target = declaration.equivalent_to
    if isinstance(target, str) and target not in known:
        return [Violation(
            rule_name="unknown_equivalent",
            severity="error",
            message=f"Class {declaration.name!r}: equivalent class {target!r} is not declared.",
            subject=declaration.name,
            context={"equivalent_to": target},
        )]
    return []


def check_deprecated_flags(declaration: EntityDeclaration) -> list[Violation]:
    """``deprecated`` values should be booleans."""
    odd = [v for v in declaration.deprecated if not isinstance(v, bool)]
    if odd:
        return [Violation(
            rule_name="deprecated_not_boolean",
            severity="warning",
            message=f"Class {declaration.name!r} has non-boolean deprecated values: {odd!r}.",
            subject=declaration.name,
            context={"values": odd},
        )]
    return []


def check_has_label(declaration: EntityDeclaration) -> list[Violation]:
    """Flag classes with neither a label nor a comment."""
    if not declaration.label and not declaration.comment:
        return [Violation(
            rule_name="missing_label",
            severity="warning",
            message=f"Class {declaration.name!r} has no label or comment.",
            subject=declaration.name,
        )]
    return []


# ── Master runner ───────────────────────────────────────────────────

def run_declaration_checks(
    declarations: Sequence[EntityDeclaration],
    known: Iterable[str] = (),
) -> list[Violation]:
    """Run all rules over *declarations*, in order.

    Args:
        declarations: Declarations in the order they will be registered.
        known: Class names already available (e.g. registered earlier).
            Library roots are always known.

    Returns:
        Flat list of all violations found.
    """
    available: set[str] = set(ROOT_TYPES) | set(known)
    violations: list[Violation] = []

    for declaration in declarations:
        violations.extend(check_identifiers(declaration))
        violations.extend(check_self_parent(declaration))
        violations.extend(check_parent_declared(declaration, available))
        violations.extend(check_equivalent_known(declaration, available))
        violations.extend(check_deprecated_flags(declaration))
        violations.extend(check_has_label(declaration))

        if declaration.name in available:
            violations.append(Violation(
                rule_name="duplicate_name",
                severity="error",
                message=f"Class {declaration.name!r} is declared more than once.",
                subject=declaration.name,
            ))
        available.add(declaration.name)

    if violations:
        errors = sum(1 for v in violations if v.severity == "error")
        warnings = sum(1 for v in violations if v.severity == "warning")
        logger.info("Declaration checks: %d errors, %d warnings.", errors, warnings)

    return violations
