"""
Assertion exceptions.

Every exception raised by the engine derives from JsonAssertionError,
which is itself an AssertionError so test runners report it as a test
failure rather than an error.
"""

from __future__ import annotations

from typing import Any

from ..paths import ABSENT
from .models import CheckKind, format_value


class JsonAssertionError(AssertionError):
    """Base class for jsonassert exceptions."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AssertionFailure(JsonAssertionError):
    """
    A single failed check.

    Raised immediately in strict mode and recorded in soft mode.

    Attributes:
        message: Human-readable description of the failure
        path: The path that was checked
        check: Which check failed
        expected: What was expected, if the check takes an operand
        actual: The resolved value (ABSENT if the path did not resolve)
        negated: Whether the check was negated
    """

    def __init__(
        self,
        message: str,
        path: str,
        check: CheckKind,
        expected: Any = None,
        actual: Any = ABSENT,
        negated: bool = False,
    ):
        super().__init__(message)
        self.path = path
        self.check = check
        self.expected = expected
        self.actual = actual
        self.negated = negated

    def __repr__(self) -> str:
        return f"AssertionFailure({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "check": self.check.value,
            "path": self.path,
            "negated": self.negated,
            "message": self.message,
            "expected": format_value(self.expected),
            "actual": format_value(self.actual),
        }


class MaxErrorsExceeded(JsonAssertionError):
    """
    Raised in soft mode when a failure arrives after max_errors were recorded.

    The triggering failure is attached but not recorded.
    """

    def __init__(self, max_errors: int, failure: AssertionFailure):
        super().__init__(
            f"Maximum number of errors ({max_errors}) reached in soft mode. "
            "Further assertions throw immediately."
        )
        self.max_errors = max_errors
        self.failure = failure


class SoftAssertionErrors(JsonAssertionError):
    """Raised when a soft-mode report is asked to fail on recorded failures."""

    def __init__(self, failures: list[AssertionFailure]):
        lines = [f"{len(failures)} soft assertion(s) failed:"]
        lines.extend(f"  {i}. {failure.message}" for i, failure in enumerate(failures, 1))
        super().__init__("\n".join(lines))
        self.failures = list(failures)
