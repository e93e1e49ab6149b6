"""
Assertion engine for JSON-like documents.

This package provides fluent, chainable checks against nested data
addressed by dot/bracket paths.

Supported checks:
    - to_have_key / to_be_defined: the path resolves to a value
    - to_be_type: the value is a string, number, boolean, object, array, null or undefined
    - to_be_null, to_be_truthy, to_be_falsy
    - to_match_value: deep equality, optionally case-insensitive for strings
    - to_contain_value: array element or substring
    - to_be_greater_than / to_be_less_than: numeric comparison
    - to_be_one_of: deep equality against a list of candidates
    - to_satisfy: custom predicate

Usage:
    from jsonassert.assertions import assert_json, assert_json_soft

    data = {"arr": [{"id": 1}, {"id": 2}]}

    # Strict mode raises AssertionFailure on the first failing check
    assert_json(data).to_have_key("arr[1].id").to_match_value("arr[0].id", 1)
    assert_json(data).not_.to_have_key("arr[2].id")

    # Soft mode records failures
    soft = assert_json_soft(data, max_errors=5)
    soft.to_be_type("arr", "object")
    for failure in soft.get_errors():
        print(failure)
"""

# Models
from .models import AssertionOptions, CheckKind, ValueKind, classify, format_value

# Comparison
from .compare import deep_equal, is_truthy

# Errors
from .errors import (
    AssertionFailure,
    JsonAssertionError,
    MaxErrorsExceeded,
    SoftAssertionErrors,
)

# Engine
from .engine import JsonAssertion, assert_json, assert_json_soft

__all__ = [
    # Models
    "AssertionOptions",
    "CheckKind",
    "ValueKind",
    "classify",
    "format_value",
    # Comparison
    "deep_equal",
    "is_truthy",
    # Errors
    "AssertionFailure",
    "JsonAssertionError",
    "MaxErrorsExceeded",
    "SoftAssertionErrors",
    # Engine
    "JsonAssertion",
    "assert_json",
    "assert_json_soft",
]
