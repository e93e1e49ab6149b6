"""
jsonassert - Fluent assertions for JSON-like data

This package provides chainable checks against nested documents
addressed by simple dot/bracket paths, for use in automated tests.

Subpackages:
    - assertions: Assertion engine, models and exceptions
    - reporting: Reports for soft assertion sessions

Usage:
    from jsonassert import assert_json, assert_json_soft, SoftAssertionReport

    data = {"user": {"name": "Alice", "age": 30}}

    assert_json(data).to_have_key("user.name").to_be_type("user.age", "number")
    assert_json(data).not_.to_have_key("user.password")

    assertion = assert_json_soft(data, max_errors=10)
    assertion.to_match_value("user.name", "alice")
    assertion.to_be_greater_than("user.age", 40)

    report = SoftAssertionReport.from_assertion(assertion)
    print(report.summary())
"""

__version__ = "0.1.0"

# Re-export path resolution for convenience
from .paths import ABSENT, resolve, split_path

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionOptions,
    CheckKind,
    ValueKind,
    classify,
    # Comparison
    deep_equal,
    is_truthy,
    # Errors
    AssertionFailure,
    JsonAssertionError,
    MaxErrorsExceeded,
    SoftAssertionErrors,
    # Engine
    JsonAssertion,
    assert_json,
    assert_json_soft,
)

# Re-export reporting for convenience
from .reporting import SoftAssertionReport

__all__ = [
    # Package info
    "__version__",
    # Paths
    "ABSENT",
    "resolve",
    "split_path",
    # Assertions - Models
    "AssertionOptions",
    "CheckKind",
    "ValueKind",
    "classify",
    # Assertions - Comparison
    "deep_equal",
    "is_truthy",
    # Assertions - Errors
    "AssertionFailure",
    "JsonAssertionError",
    "MaxErrorsExceeded",
    "SoftAssertionErrors",
    # Assertions - Engine
    "JsonAssertion",
    "assert_json",
    "assert_json_soft",
    # Reporting
    "SoftAssertionReport",
]
