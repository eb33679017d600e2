"""Ontology configuration: single entry point for build settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReasonerKind(str, Enum):
    """Reasoners that owlready2 can drive."""

    HERMIT = "hermit"
    PELLET = "pellet"


# Library-provided root classes a declaration may name as its parent.
ROOT_TYPES: tuple[str, ...] = ("Thing",)


@dataclass(frozen=True)
class OntologyConfig:
    """Settings for building an ontology from entity declarations.

    Attributes:
        ontology_iri: IRI of the ontology declarations are registered in.
        reasoner: Which external reasoner ``run_reasoner`` hands off to.
        infer_property_values: Forwarded to the reasoner.
        reasoner_debug: Reasoner verbosity level, forwarded as ``debug``.
        fail_on_violations: Abort a pipeline run before registering
            anything when the symbolic checks report errors.
        reason_after_build: Run the reasoner at the end of a pipeline run
            unless the caller says otherwise.
    """

    ontology_iri: str = "http://example.org/ontodef.owl"

    # Reasoning
    reasoner: ReasonerKind = ReasonerKind.HERMIT
    infer_property_values: bool = False
    reasoner_debug: int = 1

    # Pipeline behaviour
    fail_on_violations: bool = True
    reason_after_build: bool = False
