"""Default lookup over plain mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def lookup(mapping: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Return ``mapping[key]`` if the key is present, else *default*.

    A missing key is the common case and is never an error.  The default
    is returned as-is (same object, no copy), and a key bound to ``None``
    counts as present.

    Args:
        mapping: Any read-only mapping.
        key: Key to look up.
        default: Fallback value for an absent key.

    Returns:
        The bound value, or *default*.
    """
    if key in mapping:
        return mapping[key]
    return default
