"""
Field Presence Gate

Per-field rules deciding whether a block of the page renders at all. Each rule is
applied to one field in isolation; a missing field never hides its siblings.
"""

import math
from typing import Any, Optional, Sized


def is_present(value: Any) -> bool:
    """
    Scalar gate: not None, not a blank string, and not NaN.

    Examples:
        >>> is_present("Bogotá")
        True
        >>> is_present("   ")
        False
        >>> is_present(float("nan"))
        False
        >>> is_present(0)
        True
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def is_flag_set(value: Optional[bool]) -> bool:
    """Boolean gate: only an explicit True renders (e.g., the remote work badge)."""
    return value is True


def has_items(collection: Optional[Sized]) -> bool:
    """Collection gate: not None and at least one element."""
    return collection is not None and len(collection) > 0
