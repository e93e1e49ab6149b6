"""
Assertion engine for evaluating checks on JSON data.

This module provides the fluent JsonAssertion class. Every check
resolves a path, evaluates a predicate on the resolved value, applies
the negation flag, and either returns a view for chaining or reports a
failure (raising in strict mode, recording in soft mode).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from ..paths import ABSENT, resolve
from .compare import deep_equal, is_truthy, strings_equal_ignoring_case, to_display_string
from .errors import AssertionFailure, MaxErrorsExceeded
from .models import AssertionOptions, CheckKind, ValueKind, classify, format_value, is_number

logger = logging.getLogger(__name__)


@dataclass
class _Session:
    """State shared by an assertion and every view derived from it."""
    document: Any
    options: AssertionOptions
    errors: list[AssertionFailure] = field(default_factory=list)


class JsonAssertion:
    """
    Fluent assertions over a JSON-like document.

    Checks return an assertion so they can be chained. ``not_`` negates
    the next check only.

    Example:
        data = {"user": {"name": "Alice", "age": 30}}

        assert_json(data).to_have_key("user.name").to_be_type("user.age", "number")
        assert_json(data).not_.to_have_key("user.password")

        soft = assert_json_soft(data)
        soft.to_be_type("user.age", "string").to_match_value("user.name", "Bob")
        soft.get_errors()  # two AssertionFailure records
    """

    def __init__(
        self,
        data: Any,
        options: AssertionOptions | None = None,
    ):
        """
        Initialize a strict or soft assertion session.

        Use assert_json() or assert_json_soft() for the typical case.
        """
        self._session = _Session(document=data, options=options or AssertionOptions())
        self._negated = False
        self._origin: JsonAssertion = self

    @classmethod
    def _view(cls, session: _Session, negated: bool, origin: JsonAssertion) -> JsonAssertion:
        view = cls.__new__(cls)
        view._session = session
        view._negated = negated
        view._origin = origin
        return view

    # ─────────────────────────────────────────────────────────────────────
    # Session state
    # ─────────────────────────────────────────────────────────────────────

    @property
    def not_(self) -> JsonAssertion:
        """
        A view over the same session with the next check negated.

        Checks run on the view return the un-negated assertion, so the
        negation does not carry over to the next chained check.
        """
        return self._view(self._session, not self._negated, self._origin)

    @property
    def negated(self) -> bool:
        return self._negated

    @property
    def is_soft(self) -> bool:
        return self._session.options.soft

    @property
    def max_errors(self) -> int | None:
        """Configured capacity, or None when unlimited or in strict mode."""
        if not self.is_soft:
            return None
        return self._session.options.max_errors

    @property
    def document(self) -> Any:
        return self._session.document

    @property
    def error_count(self) -> int:
        return len(self._session.errors)

    def get_errors(self) -> list[AssertionFailure]:
        """Return a copy of the recorded failures, oldest first."""
        return list(self._session.errors)

    @property
    def errors(self) -> list[AssertionFailure]:
        return self.get_errors()

    # ─────────────────────────────────────────────────────────────────────
    # Presence checks
    # ─────────────────────────────────────────────────────────────────────

    def to_have_key(self, path: str) -> JsonAssertion:
        """Assert that the path resolves to a value (None counts)."""
        return self._check(
            CheckKind.HAVE_KEY,
            path,
            lambda value: value is not ABSENT,
            lambda value, neg: f"Expected key '{path}' {neg}to exist",
        )

    def to_be_defined(self, path: str) -> JsonAssertion:
        return self._check(
            CheckKind.BE_DEFINED,
            path,
            lambda value: value is not ABSENT,
            lambda value, neg: f"Expected '{path}' {neg}to be defined",
        )

    def to_be_null(self, path: str) -> JsonAssertion:
        return self._check(
            CheckKind.BE_NULL,
            path,
            lambda value: value is None,
            lambda value, neg: f"Expected '{path}' {neg}to be null",
        )

    # ─────────────────────────────────────────────────────────────────────
    # Type and truthiness checks
    # ─────────────────────────────────────────────────────────────────────

    def to_be_type(self, path: str, kind: ValueKind | str) -> JsonAssertion:
        """
        Assert the kind of the value at a path.

        Args:
            path: Dot/bracket path
            kind: One of "string", "number", "boolean", "object",
                "array", "null", "undefined"
        """
        expected = kind.value if isinstance(kind, ValueKind) else str(kind)
        return self._check(
            CheckKind.BE_TYPE,
            path,
            lambda value: classify(value).value == expected,
            lambda value, neg: (
                f"Expected '{path}' {neg}to be type '{expected}', "
                f"but got '{classify(value).value}'"
            ),
            expected=expected,
        )

    def to_be_truthy(self, path: str) -> JsonAssertion:
        return self._check(
            CheckKind.BE_TRUTHY,
            path,
            is_truthy,
            lambda value, neg: f"Expected '{path}' {neg}to be truthy",
        )

    def to_be_falsy(self, path: str) -> JsonAssertion:
        return self._check(
            CheckKind.BE_FALSY,
            path,
            lambda value: not is_truthy(value),
            lambda value, neg: f"Expected '{path}' {neg}to be falsy",
        )

    # ─────────────────────────────────────────────────────────────────────
    # Value checks
    # ─────────────────────────────────────────────────────────────────────

    def to_match_value(
        self,
        path: str,
        expected: Any,
        case_insensitive: bool = False,
    ) -> JsonAssertion:
        """
        Assert that the value at a path deep-equals an expected value.

        Args:
            path: Dot/bracket path
            expected: The expected value
            case_insensitive: Compare case-folded when both sides are strings
        """
        def matches(value: Any) -> bool:
            if case_insensitive and isinstance(value, str) and isinstance(expected, str):
                return strings_equal_ignoring_case(value, expected)
            return deep_equal(value, expected)

        suffix = " (case insensitive)" if case_insensitive else ""
        return self._check(
            CheckKind.MATCH_VALUE,
            path,
            matches,
            lambda value, neg: (
                f"Expected value at '{path}' {neg}to equal {format_value(expected)}{suffix}, "
                f"but got {format_value(value)}"
            ),
            expected=expected,
        )

    def to_contain_value(self, path: str, expected: Any) -> JsonAssertion:
        """
        Assert that an array contains an element, or a string a substring.

        Any other resolved value fails the check.
        """
        def contains(value: Any) -> bool:
            if isinstance(value, (list, tuple)):
                return any(deep_equal(item, expected) for item in value)
            if isinstance(value, str):
                return to_display_string(expected) in value
            return False

        return self._check(
            CheckKind.CONTAIN_VALUE,
            path,
            contains,
            lambda value, neg: (
                f"Expected value at '{path}' {neg}to contain {format_value(expected)}, "
                f"but got {format_value(value)}"
            ),
            expected=expected,
        )

    def to_be_greater_than(self, path: str, number: float) -> JsonAssertion:
        """Assert that a numeric value is strictly greater than a number."""
        return self._check(
            CheckKind.BE_GREATER_THAN,
            path,
            lambda value: is_number(value) and value > number,
            lambda value, neg: (
                f"Expected value at '{path}' {neg}to be greater than {format_value(number)}, "
                f"but got {format_value(value)}"
            ),
            expected=number,
        )

    def to_be_less_than(self, path: str, number: float) -> JsonAssertion:
        """Assert that a numeric value is strictly less than a number."""
        return self._check(
            CheckKind.BE_LESS_THAN,
            path,
            lambda value: is_number(value) and value < number,
            lambda value, neg: (
                f"Expected value at '{path}' {neg}to be less than {format_value(number)}, "
                f"but got {format_value(value)}"
            ),
            expected=number,
        )

    def to_be_one_of(self, path: str, candidates: Iterable[Any]) -> JsonAssertion:
        """Assert that the value deep-equals at least one candidate."""
        candidates = list(candidates)
        return self._check(
            CheckKind.BE_ONE_OF,
            path,
            lambda value: any(deep_equal(value, candidate) for candidate in candidates),
            lambda value, neg: (
                f"Expected value at '{path}' {neg}to be one of {format_value(candidates)}, "
                f"but got {format_value(value)}"
            ),
            expected=candidates,
        )

    def to_satisfy(self, path: str, predicate: Callable[[Any], Any]) -> JsonAssertion:
        """
        Assert that a caller-supplied predicate holds for the value.

        The predicate receives the resolved value (ABSENT if the path does
        not resolve). Exceptions raised by the predicate propagate as-is,
        in soft mode too, and are never recorded.
        """
        return self._check(
            CheckKind.SATISFY,
            path,
            lambda value: bool(predicate(value)),
            lambda value, neg: f"Expected '{path}' {neg}to satisfy predicate.",
        )

    # ─────────────────────────────────────────────────────────────────────
    # Evaluation
    # ─────────────────────────────────────────────────────────────────────

    def _check(
        self,
        check: CheckKind,
        path: str,
        predicate: Callable[[Any], bool],
        describe: Callable[[Any, str], str],
        expected: Any = None,
    ) -> JsonAssertion:
        """Resolve, evaluate, negate and report a single check."""
        value = resolve(self._session.document, path)
        passed = predicate(value)

        if passed != self._negated:
            return self._origin

        failure = AssertionFailure(
            describe(value, "not " if self._negated else ""),
            path=path,
            check=check,
            expected=expected,
            actual=value,
            negated=self._negated,
        )
        return self._report(failure)

    def _report(self, failure: AssertionFailure) -> JsonAssertion:
        """Raise or record a failure according to the session mode."""
        if not self.is_soft:
            logger.debug(f"Assertion failed: {failure.message}")
            raise failure

        errors = self._session.errors
        max_errors = self.max_errors
        if max_errors is not None and len(errors) >= max_errors:
            logger.warning(f"Soft assertion limit of {max_errors} reached: {failure.message}")
            raise MaxErrorsExceeded(max_errors, failure)

        errors.append(failure)
        logger.debug(f"Recorded soft failure {len(errors)}: {failure.message}")
        return self._origin


def assert_json(
    data: Any,
    soft: bool = False,
    max_errors: int | None = None,
    *,
    options: AssertionOptions | None = None,
) -> JsonAssertion:
    """
    Start an assertion session on a document.

    Args:
        data: The JSON-like document to check
        soft: Record failures instead of raising immediately
        max_errors: Soft mode capacity; None means unlimited
        options: Ready-made options; overrides soft and max_errors

    Returns:
        JsonAssertion for chaining checks
    """
    if options is None:
        options = AssertionOptions(soft=soft, max_errors=max_errors)
    return JsonAssertion(data, options)


def assert_json_soft(data: Any, max_errors: int | None = None) -> JsonAssertion:
    """Start a soft-mode assertion session on a document."""
    return JsonAssertion(data, AssertionOptions(soft=True, max_errors=max_errors))
