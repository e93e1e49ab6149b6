"""
Tests for value models and comparison helpers.

These tests verify:
- Kind classification of resolved values
- Structural, type-aware deep equality
- JSON truthiness
- String coercion and message formatting
- AssertionOptions validation
"""

import math

import pytest

from jsonassert.assertions.compare import deep_equal, is_truthy, to_display_string
from jsonassert.assertions.models import AssertionOptions, ValueKind, classify, format_value
from jsonassert.paths import ABSENT

# =============================================================================
# classify
# =============================================================================


class TestClassify:
    """Test the kind mapping used by to_be_type."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            ("abc", ValueKind.STRING),
            (123, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            ({}, ValueKind.OBJECT),
            ([], ValueKind.ARRAY),
            ((1, 2), ValueKind.ARRAY),
            (None, ValueKind.NULL),
            (ABSENT, ValueKind.UNDEFINED),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) == kind

    def test_bool_is_not_number(self):
        assert classify(False) == "boolean"

    def test_kinds_compare_equal_to_strings(self):
        assert ValueKind.ARRAY == "array"


# =============================================================================
# deep_equal
# =============================================================================


class TestDeepEqual:
    """Test structural equality."""

    def test_primitives(self):
        assert deep_equal(1, 1)
        assert deep_equal("a", "a")
        assert not deep_equal("a", "b")

    def test_int_and_float_compare_by_value(self):
        assert deep_equal(1, 1.0)

    def test_bool_never_equals_number(self):
        assert not deep_equal(True, 1)
        assert not deep_equal(0, False)

    def test_string_never_equals_number(self):
        assert not deep_equal("1", 1)

    def test_none(self):
        assert deep_equal(None, None)
        assert not deep_equal(None, 0)
        assert not deep_equal(None, ABSENT)

    def test_absent(self):
        assert deep_equal(ABSENT, ABSENT)
        assert not deep_equal(ABSENT, None)

    def test_sequences_are_order_sensitive(self):
        assert deep_equal([1, 2, 3], [1, 2, 3])
        assert not deep_equal([1, 2, 3], [3, 2, 1])
        assert not deep_equal([1, 2], [1, 2, 3])

    def test_list_and_tuple_are_interchangeable(self):
        assert deep_equal([1, [2]], (1, (2,)))

    def test_mapping_key_order_is_irrelevant(self):
        assert deep_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_mapping_keys_must_match(self):
        assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
        assert not deep_equal({"a": 1}, {"b": 1})

    def test_nested(self):
        left = {"user": {"tags": ["x", {"y": True}]}}
        right = {"user": {"tags": ["x", {"y": True}]}}
        assert deep_equal(left, right)
        right["user"]["tags"][1]["y"] = 1
        assert not deep_equal(left, right)

    def test_mapping_vs_sequence(self):
        assert not deep_equal({}, [])


# =============================================================================
# is_truthy
# =============================================================================


class TestIsTruthy:
    """Test JSON truthiness."""

    @pytest.mark.parametrize("value", [False, 0, 0.0, "", None, ABSENT, math.nan])
    def test_falsy(self, value):
        assert not is_truthy(value)

    @pytest.mark.parametrize("value", [True, 1, -1, 0.5, "x", "0", [], {}, [0]])
    def test_truthy(self, value):
        assert is_truthy(value)


# =============================================================================
# Formatting
# =============================================================================


class TestFormatting:
    """Test value formatting and string coercion."""

    def test_format_json(self):
        assert format_value({"x": 1}) == '{"x": 1}'
        assert format_value("hi") == '"hi"'
        assert format_value(None) == "null"
        assert format_value(True) == "true"

    def test_format_absent(self):
        assert format_value(ABSENT) == "undefined"
        assert format_value([ABSENT]) == "[null]"

    def test_format_unknown_object_uses_repr(self):
        class Thing:
            def __repr__(self):
                return "<Thing>"

        assert format_value(Thing()) == '"<Thing>"'

    def test_format_truncates(self):
        formatted = format_value("x" * 500)
        assert len(formatted) == 200
        assert formatted.endswith("...")

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("abc", "abc"),
            (123, "123"),
            (2.0, "2"),
            (1.5, "1.5"),
            (True, "true"),
            (None, "null"),
            (ABSENT, "undefined"),
        ],
    )
    def test_display_string(self, value, expected):
        assert to_display_string(value) == expected


# =============================================================================
# AssertionOptions
# =============================================================================


class TestAssertionOptions:
    """Test configuration validation."""

    def test_defaults(self):
        options = AssertionOptions()
        assert options.soft is False
        assert options.max_errors is None

    def test_valid_max_errors(self):
        assert AssertionOptions(soft=True, max_errors=3).max_errors == 3

    @pytest.mark.parametrize("max_errors", [0, -1])
    def test_non_positive_max_errors(self, max_errors):
        with pytest.raises(ValueError, match="positive integer"):
            AssertionOptions(soft=True, max_errors=max_errors)

    @pytest.mark.parametrize("max_errors", [True, 2.5, "3"])
    def test_non_integer_max_errors(self, max_errors):
        with pytest.raises(ValueError, match="positive integer"):
            AssertionOptions(soft=True, max_errors=max_errors)

    def test_is_frozen(self):
        options = AssertionOptions()
        with pytest.raises(AttributeError):
            options.soft = True
