"""Tests for the attribute struct and the field table."""

from collections.abc import Hashable

import pytest
from pydantic import ValidationError

from ontodef.models.attributes import (
    ANNOTATION_FIELDS,
    ATTRIBUTE_KEYS,
    EntityAttributes,
    as_value_list,
)


class TestFieldTable:
    """The fixed set of nine recognised keys."""

    def test_nine_keys(self):
        assert len(ATTRIBUTE_KEYS) == 9
        assert len(ANNOTATION_FIELDS) == 8
        assert ATTRIBUTE_KEYS[0] == "equivalent_to"

    def test_owl_annotation_names(self):
        names = {f.key: f.annotation for f in ANNOTATION_FIELDS}
        assert names["comments"] == "comment"
        assert names["version_info"] == "versionInfo"
        assert names["see_also"] == "seeAlso"
        assert names["defined_by"] == "isDefinedBy"


class TestAsValueList:

    def test_none_is_empty(self):
        assert as_value_list(None) == []

    def test_string_is_wrapped(self):
        assert as_value_list("Drum") == ["Drum"]

    def test_scalar_is_wrapped(self):
        assert as_value_list(True) == [True]

    def test_tuple_is_listed(self):
        assert as_value_list(("a", "b")) == ["a", "b"]


class TestEntityAttributes:

    def test_defaults(self):
        attrs = EntityAttributes()
        assert attrs.equivalent_to is None
        assert attrs.comments == []
        assert attrs.supplied() == {}

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            EntityAttributes(colour=["red"])

    def test_scalar_coerced_to_list(self):
        attrs = EntityAttributes(label="Drumhead", deprecated=False)
        assert attrs.label == ["Drumhead"]
        assert attrs.deprecated == [False]

    def test_supplied_only_reports_set_keys(self):
        attrs = EntityAttributes(comments=["c"], version_info=["0.1"])
        assert attrs.supplied() == {"comments": ["c"], "version_info": ["0.1"]}

    def test_explicit_empty_value_is_supplied(self):
        attrs = EntityAttributes(label=[])
        assert attrs.supplied() == {"label": []}

    def test_not_hashable(self):
        assert not isinstance(EntityAttributes(label=["x"]), Hashable)

    def test_coerce_none(self):
        assert EntityAttributes.coerce(None) == EntityAttributes()

    def test_coerce_mapping(self):
        attrs = EntityAttributes.coerce({"comments": "Generic drumhead class"})
        assert attrs.comments == ["Generic drumhead class"]

    def test_coerce_instance_passthrough(self):
        attrs = EntityAttributes(label=["x"])
        assert EntityAttributes.coerce(attrs) is attrs

    def test_coerce_rejects_other_types(self):
        with pytest.raises(TypeError):
            EntityAttributes.coerce(["label", "x"])
