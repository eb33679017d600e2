"""Entity declaration: the value produced by the expander.

A declaration names a new class, its single parent, and the nine
annotation-level fields.  It carries no instance data.  Declarations are
plain unfrozen, unhashable values that nothing in the package mutates
once built; registering it with an ontology is a separate step
(see ``registry.py``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ontodef.models.attributes import ANNOTATION_FIELDS


class EntityDeclaration(BaseModel):
    """A named class declaration with its parent and annotations.

    Field aliases are the OWL annotation names (``versionInfo``,
    ``seeAlso``, …); both spellings are accepted on construction.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., description="Name of the new class.")
    parent: str = Field(..., description="Name of the single parent class.")
    equivalent_to: Any | None = Field(default=None, description="Equivalent class expression.")

    label: list[Any] = Field(default_factory=list, alias="label")
    comment: list[Any] = Field(default_factory=list, alias="comment")
    see_also: list[Any] = Field(default_factory=list, alias="seeAlso")
    version_info: list[Any] = Field(default_factory=list, alias="versionInfo")
    deprecated: list[Any] = Field(default_factory=list, alias="deprecated")
    incompatible_with: list[Any] = Field(default_factory=list, alias="incompatibleWith")
    backward_compatible_with: list[Any] = Field(default_factory=list, alias="backwardCompatibleWith")
    is_defined_by: list[Any] = Field(default_factory=list, alias="isDefinedBy")

    def annotations(self) -> dict[str, list[Any]]:
        """Annotation values keyed by OWL annotation property name."""
        return {f.annotation: list(getattr(self, f.field)) for f in ANNOTATION_FIELDS}

    def is_bare(self) -> bool:
        """True when every annotation field is empty and no equivalence is set."""
        return self.equivalent_to is None and not any(self.annotations().values())

    def __str__(self) -> str:
        return f"{self.name} ⊑ {self.parent}"
