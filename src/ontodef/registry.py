"""Declaration registry: materialises declarations as owlready2 classes.

This is the seam where names become classes, so it is also where
resolution errors surface: an unknown parent, a duplicate name or an
invalid identifier is reported here, never by the expander.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any

import owlready2
from owlready2 import Ontology, ThingClass, World

from ontodef.config import ROOT_TYPES, OntologyConfig
from ontodef.expander import expand_entity
from ontodef.models.attributes import EntityAttributes
from ontodef.models.declaration import EntityDeclaration

logger = logging.getLogger(__name__)

_ROOTS: dict[str, ThingClass] = {name: getattr(owlready2, name) for name in ROOT_TYPES}


# =====================================================================
# Errors
# =====================================================================

class UnknownEntityError(LookupError):
    """A parent or equivalence target could not be resolved to a class."""

    def __init__(self, name: str, role: str = "parent") -> None:
        super().__init__(f"Unknown {role} class {name!r}.")
        self.name = name
        self.role = role


class DuplicateEntityError(ValueError):
    """A class with this name is already registered."""


class InvalidIdentifierError(ValueError):
    """A declaration name is not a valid identifier."""


# =====================================================================
# Registry
# =====================================================================

class DeclarationRegistry:
    """Registers ``EntityDeclaration`` values into one owlready2 ontology.

    Declarations are registered one at a time, in program order, and a
    parent must already be resolvable when its child is registered.

    Args:
        ontology: Target ontology.
    """

    def __init__(self, ontology: Ontology) -> None:
        self._ontology = ontology
        self._classes: dict[str, ThingClass] = {}
        self._declarations: list[EntityDeclaration] = []

    @classmethod
    def from_config(cls, config: OntologyConfig, world: World | None = None) -> DeclarationRegistry:
        """Open ``config.ontology_iri`` in *world* (default: owlready2's default world)."""
        world = world if world is not None else owlready2.default_world
        return cls(world.get_ontology(config.ontology_iri))

    # ── Accessors ───────────────────────────────────────────────────
    @property
    def ontology(self) -> Ontology:
        return self._ontology

    @property
    def declarations(self) -> list[EntityDeclaration]:
        """Registered declarations, in registration order."""
        return list(self._declarations)

    @property
    def classes(self) -> dict[str, ThingClass]:
        return dict(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    # ── Resolution ──────────────────────────────────────────────────
    def resolve(self, name: str, role: str = "parent") -> ThingClass:
        """Resolve a class name: roots first, then registered, then the ontology."""
        if name in _ROOTS:
            return _ROOTS[name]
        if name in self._classes:
            return self._classes[name]
        found = self._ontology[name]
        if isinstance(found, ThingClass):
            return found
        raise UnknownEntityError(name, role=role)

    def known_names(self) -> set[str]:
        """Names ``resolve`` accepts: registered classes and classes already in the ontology."""
        return set(self._classes) | {c.name for c in self._ontology.classes()}

    def _resolve_expression(self, expression: Any) -> Any:
        if isinstance(expression, str):
            return self.resolve(expression, role="equivalent")
        return expression

    # ── Registration ────────────────────────────────────────────────
    def register(self, declaration: EntityDeclaration) -> ThingClass:
        """Create the owlready2 class described by *declaration*.

        Raises:
            InvalidIdentifierError: ``name`` is not a valid identifier.
            DuplicateEntityError: ``name`` is already registered or
                already exists in the ontology.
            UnknownEntityError: parent or equivalence target is unknown.
        """
        name = declaration.name
        if not name.isidentifier():
            raise InvalidIdentifierError(f"{name!r} is not a valid class identifier.")
        if name in self._classes or name in _ROOTS or self._ontology[name] is not None:
            raise DuplicateEntityError(f"Class {name!r} is already declared.")

        parent = self.resolve(declaration.parent)
        equivalent = (
            self._resolve_expression(declaration.equivalent_to)
            if declaration.equivalent_to is not None
            else None
        )

        with self._ontology:
            cls = types.new_class(name, (parent,))
            try:
                for annotation, values in declaration.annotations().items():
                    if values:
                        setattr(cls, annotation, values)
                if equivalent is not None:
                    cls.equivalent_to.append(equivalent)
            except Exception:
                owlready2.destroy_entity(cls)
                raise

        self._classes[name] = cls
        self._declarations.append(declaration)
        logger.debug(
            "Registered %s%s.",
            declaration,
            " (no annotations)" if declaration.is_bare() else "",
        )
        return cls

    def register_all(self, declarations: list[EntityDeclaration]) -> list[ThingClass]:
        """Register *declarations* in order; stops at the first failure."""
        classes = [self.register(d) for d in declarations]
        logger.info("Registered %d classes in %s.", len(classes), self._ontology.base_iri)
        return classes

    def declare(
        self,
        name: str,
        parent_name: str,
        attributes: EntityAttributes | Mapping[str, Any] | None = None,
    ) -> ThingClass:
        """Expand and register in one step."""
        return self.register(expand_entity(name, parent_name, attributes))
