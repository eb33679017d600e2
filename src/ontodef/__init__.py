"""Terse entity-class declarations for owlready2 ontologies."""

from ontodef.config import OntologyConfig, ReasonerKind
from ontodef.expander import expand_entities, expand_entity
from ontodef.models.attributes import EntityAttributes
from ontodef.models.declaration import EntityDeclaration
from ontodef.registry import (
    DeclarationRegistry,
    DuplicateEntityError,
    InvalidIdentifierError,
    UnknownEntityError,
)
from ontodef.utils.lookup import lookup

__all__ = [
    "DeclarationRegistry",
    "DuplicateEntityError",
    "EntityAttributes",
    "EntityDeclaration",
    "InvalidIdentifierError",
    "OntologyConfig",
    "ReasonerKind",
    "UnknownEntityError",
    "expand_entities",
    "expand_entity",
    "lookup",
]
