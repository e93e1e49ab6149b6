"""
Assertion models.

This module defines the value kinds understood by type checks, the
check identifiers carried by failures, the engine configuration, and
the value formatting used in failure messages.
"""

from __future__ import annotations

import json
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..paths import ABSENT


class ValueKind(str, Enum):
    """Kind of a resolved value, as reported by ``classify``."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"
    UNDEFINED = "undefined"


class CheckKind(str, Enum):
    """Identifies which check produced a failure."""
    HAVE_KEY = "to_have_key"
    BE_TYPE = "to_be_type"
    BE_DEFINED = "to_be_defined"
    BE_NULL = "to_be_null"
    BE_TRUTHY = "to_be_truthy"
    BE_FALSY = "to_be_falsy"
    MATCH_VALUE = "to_match_value"
    CONTAIN_VALUE = "to_contain_value"
    BE_GREATER_THAN = "to_be_greater_than"
    BE_LESS_THAN = "to_be_less_than"
    BE_ONE_OF = "to_be_one_of"
    SATISFY = "to_satisfy"


@dataclass(frozen=True)
class AssertionOptions:
    """
    Configuration for an assertion session.

    Attributes:
        soft: Record failures instead of raising on the first one
        max_errors: Soft mode only. Number of failures to record before
            the next failure raises MaxErrorsExceeded. None means unlimited.
    """
    soft: bool = False
    max_errors: int | None = None

    def __post_init__(self) -> None:
        if self.max_errors is None:
            return
        if isinstance(self.max_errors, bool) or not isinstance(self.max_errors, int):
            raise ValueError(
                f"max_errors must be a positive integer, got {type(self.max_errors).__name__}"
            )
        if self.max_errors < 1:
            raise ValueError(f"max_errors must be a positive integer, got {self.max_errors}")


def is_number(value: Any) -> bool:
    """True for real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def classify(value: Any) -> ValueKind:
    """Classify a resolved value into a ValueKind."""
    if value is ABSENT:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if is_number(value):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OBJECT


def format_value(value: Any, max_length: int = 200) -> str:
    """Format a value for a failure message, truncating if too long."""
    if value is ABSENT:
        return "undefined"

    try:
        formatted = json.dumps(_jsonable(value), ensure_ascii=False, default=repr)
    except (TypeError, ValueError):
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def _jsonable(value: Any) -> Any:
    """Replace ABSENT and enum members nested in composites before dumping."""
    if value is ABSENT:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value
