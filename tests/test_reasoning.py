"""Tests for reasoner dispatch (the reasoners themselves are not run)."""

import owlready2
import pytest

from ontodef.config import OntologyConfig, ReasonerKind
from ontodef.reasoning import run_reasoner


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake(name):
        def _run(target, **kwargs):
            recorded.append((name, target, kwargs))
        return _run

    monkeypatch.setattr(owlready2, "sync_reasoner_hermit", fake("hermit"))
    monkeypatch.setattr(owlready2, "sync_reasoner_pellet", fake("pellet"))
    return recorded


class TestRunReasoner:

    def test_hermit_is_default(self, registry, calls):
        run_reasoner(registry.ontology, OntologyConfig())
        assert [c[0] for c in calls] == ["hermit"]
        assert calls[0][1] is registry.ontology

    def test_pellet_selected(self, registry, calls):
        config = OntologyConfig(reasoner=ReasonerKind.PELLET, infer_property_values=True, reasoner_debug=0)
        run_reasoner(registry.ontology, config)
        name, _, kwargs = calls[0]
        assert name == "pellet"
        assert kwargs == {"infer_property_values": True, "debug": 0}

    def test_reasoner_kind_from_string(self, registry, calls):
        run_reasoner(registry.ontology, OntologyConfig(reasoner="pellet"))
        assert calls[0][0] == "pellet"

    def test_errors_propagate(self, registry, monkeypatch):
        def boom(target, **kwargs):
            raise owlready2.OwlReadyInconsistentOntologyError()

        monkeypatch.setattr(owlready2, "sync_reasoner_hermit", boom)
        with pytest.raises(owlready2.OwlReadyInconsistentOntologyError):
            run_reasoner(registry.ontology, OntologyConfig())
