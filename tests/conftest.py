"""Shared fixtures: every test builds into its own owlready2 world."""

import pytest
from owlready2 import World

from ontodef.config import OntologyConfig
from ontodef.registry import DeclarationRegistry


@pytest.fixture
def config():
    return OntologyConfig(ontology_iri="http://example.org/drums.owl")


@pytest.fixture
def world():
    w = World()
    yield w
    w.close()


@pytest.fixture
def registry(config, world):
    return DeclarationRegistry.from_config(config, world=world)
