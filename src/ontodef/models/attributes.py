"""Attribute mapping accepted when declaring an entity.

The nine recognised keys are fixed.  ``equivalent_to`` carries a single
optional class expression; the other eight carry sequences of annotation
values.  ``ANNOTATION_FIELDS`` is the single table tying each attribute
key to its declaration field and its OWL annotation property.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =====================================================================
# Field table
# =====================================================================

EQUIVALENCE_KEY = "equivalent_to"


@dataclass(frozen=True)
class AnnotationField:
    """One annotation slot of an entity declaration."""

    key: str  # attribute-mapping key
    field: str  # EntityDeclaration field
    annotation: str  # owlready2 annotation property


ANNOTATION_FIELDS: tuple[AnnotationField, ...] = (
    AnnotationField(key="label", field="label", annotation="label"),
    AnnotationField(key="comments", field="comment", annotation="comment"),
    AnnotationField(key="see_also", field="see_also", annotation="seeAlso"),
    AnnotationField(key="version_info", field="version_info", annotation="versionInfo"),
    AnnotationField(key="deprecated", field="deprecated", annotation="deprecated"),
    AnnotationField(key="incompatible_with", field="incompatible_with", annotation="incompatibleWith"),
    AnnotationField(
        key="backward_compatible_with",
        field="backward_compatible_with",
        annotation="backwardCompatibleWith",
    ),
    AnnotationField(key="defined_by", field="is_defined_by", annotation="isDefinedBy"),
)

ATTRIBUTE_KEYS: tuple[str, ...] = (EQUIVALENCE_KEY, *(f.key for f in ANNOTATION_FIELDS))


def as_value_list(value: Any) -> list[Any]:
    """Normalise an annotation value to a list.

    ``None`` gives an empty list, strings and other scalars are wrapped,
    and any other iterable is materialised.
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return [value]
    return list(value)


# =====================================================================
# Attribute struct
# =====================================================================

class EntityAttributes(BaseModel):
    """Optional annotation values supplied when declaring an entity.

    Unknown keys are rejected at construction.  Keys the caller leaves
    out are *absent*, not empty: ``supplied()`` only reports what was
    actually given, which is what the expander looks values up in.
    """

    model_config = ConfigDict(extra="forbid")

    equivalent_to: Any | None = Field(
        default=None,
        description="Class expression (or name of a declared class) the entity is equivalent to.",
    )
    label: list[Any] = Field(default_factory=list, description="rdfs:label values.")
    comments: list[Any] = Field(default_factory=list, description="rdfs:comment values.")
    see_also: list[Any] = Field(default_factory=list, description="rdfs:seeAlso references.")
    version_info: list[Any] = Field(default_factory=list, description="owl:versionInfo values.")
    deprecated: list[Any] = Field(default_factory=list, description="owl:deprecated flags.")
    incompatible_with: list[Any] = Field(
        default_factory=list,
        description="owl:incompatibleWith references.",
    )
    backward_compatible_with: list[Any] = Field(
        default_factory=list,
        description="owl:backwardCompatibleWith references.",
    )
    defined_by: list[Any] = Field(default_factory=list, description="rdfs:isDefinedBy references.")

    # ── Validators ──────────────────────────────────────────────────
    @field_validator(*(f.key for f in ANNOTATION_FIELDS), mode="before")
    @classmethod
    def _as_list(cls, v: Any) -> list[Any]:
        return as_value_list(v)

    # ── Accessors ───────────────────────────────────────────────────
    def supplied(self) -> dict[str, Any]:
        """Only the keys explicitly set by the caller."""
        return {key: getattr(self, key) for key in ATTRIBUTE_KEYS if key in self.model_fields_set}

    @classmethod
    def coerce(cls, value: EntityAttributes | Mapping[str, Any] | None) -> EntityAttributes:
        """Build an ``EntityAttributes`` from ``None``, a mapping, or an instance."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"Expected a mapping or EntityAttributes, got {type(value).__name__}")
