"""
Comparison helpers for resolved values.

Equality here is structural and type-aware: booleans never equal
numbers, strings only equal strings, and mappings compare by key set
regardless of insertion order.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from ..paths import ABSENT
from .models import format_value, is_number


def deep_equal(left: Any, right: Any) -> bool:
    """Structurally compare two values."""
    if left is ABSENT or right is ABSENT:
        return left is right

    if left is None or right is None:
        return left is right

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if is_number(left) or is_number(right):
        return is_number(left) and is_number(right) and left == right

    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if set(left.keys()) != set(right.keys()):
            return False
        return all(deep_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, (Mapping, list, tuple)) or isinstance(right, (Mapping, list, tuple)):
        return False

    return left == right


def is_truthy(value: Any) -> bool:
    """
    Truthiness for JSON values.

    Falsy: False, zero, NaN, the empty string, None and ABSENT.
    Empty arrays and objects are truthy.
    """
    if value is ABSENT or value is None:
        return False
    if isinstance(value, bool):
        return value
    if is_number(value):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_display_string(value: Any) -> str:
    """Coerce a value to the string used for substring checks."""
    if value is ABSENT:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if is_number(value):
        return str(value)
    return format_value(value, max_length=10_000)


def strings_equal_ignoring_case(left: str, right: str) -> bool:
    """Compare two strings with locale-independent case folding."""
    return left.casefold() == right.casefold()
