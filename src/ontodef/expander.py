"""Entity-declaration expander.

Gives a terse, uniform surface for declaring many similarly-shaped
classes: callers pass only the annotation fields they care about and
get back a fully defaulted ``EntityDeclaration``.

The expander is a pure function and validates nothing.  Bad names and
unknown parents are reported by the registry when the declaration is
registered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ontodef.models.attributes import ANNOTATION_FIELDS, EQUIVALENCE_KEY, EntityAttributes
from ontodef.models.declaration import EntityDeclaration
from ontodef.utils.lookup import lookup

logger = logging.getLogger(__name__)

AttributesLike = EntityAttributes | Mapping[str, Any] | None


def expand_entity(
    name: str,
    parent_name: str,
    attributes: AttributesLike = None,
) -> EntityDeclaration:
    """Expand *name*, *parent_name* and optional attributes into a declaration.

    Args:
        name: Name of the new class.
        parent_name: Name of its single parent class.
        attributes: Optional attribute mapping (or ``EntityAttributes``).
            Unknown keys raise ``pydantic.ValidationError``.

    Returns:
        An ``EntityDeclaration`` whose unsupplied fields hold their
        defaults (``None`` for ``equivalent_to``, ``[]`` otherwise).
    """
    supplied = EntityAttributes.coerce(attributes).supplied()

    fields: dict[str, Any] = {
        "equivalent_to": lookup(supplied, EQUIVALENCE_KEY, None),
    }
    for spec in ANNOTATION_FIELDS:
        fields[spec.field] = lookup(supplied, spec.key, [])

    logger.debug("Expanded %s (parent %s, %d supplied fields).", name, parent_name, len(supplied))
    return EntityDeclaration(name=name, parent=parent_name, **fields)


def expand_entities(
    entries: Iterable[tuple[str, str] | tuple[str, str, AttributesLike]],
) -> list[EntityDeclaration]:
    """Expand ``(name, parent_name[, attributes])`` tuples in the given order."""
    declarations = [expand_entity(*entry) for entry in entries]
    logger.info("Expanded %d entity declarations.", len(declarations))
    return declarations
