"""Reasoner hand-off.

Inference itself is owlready2's business (it drives HermiT or Pellet
through Java).  This module only picks the entry point from the config
and forwards the options.
"""

from __future__ import annotations

import logging

import owlready2
from owlready2 import Ontology

from ontodef.config import OntologyConfig, ReasonerKind

logger = logging.getLogger(__name__)

_ENTRY_POINTS: dict[ReasonerKind, str] = {
    ReasonerKind.HERMIT: "sync_reasoner_hermit",
    ReasonerKind.PELLET: "sync_reasoner_pellet",
}


def run_reasoner(ontology: Ontology, config: OntologyConfig) -> None:
    """Run the configured reasoner over *ontology*.

    Inferred facts are written back into the ontology's world.
    ``owlready2.OwlReadyInconsistentOntologyError`` propagates as-is.
    """
    kind = ReasonerKind(config.reasoner)
    entry_point = getattr(owlready2, _ENTRY_POINTS[kind])

    logger.info("Running %s reasoner on %s.", kind.value, ontology.base_iri)
    with ontology:
        entry_point(
            ontology,
            infer_property_values=config.infer_property_values,
            debug=config.reasoner_debug,
        )
    logger.info("Reasoning finished on %s.", ontology.base_iri)
