"""
Reports for soft assertion sessions.

A SoftAssertionReport is a snapshot of the failures recorded by a
soft-mode JsonAssertion, with plain-text, dict and rich table output.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..assertions.errors import AssertionFailure, SoftAssertionErrors

if TYPE_CHECKING:
    from ..assertions.engine import JsonAssertion


@dataclass
class SoftAssertionReport:
    """
    Snapshot of the failures recorded by an assertion session.

    Example:
        assertion = assert_json_soft(data)
        assertion.to_have_key("user.id").to_be_type("user.age", "number")

        report = SoftAssertionReport.from_assertion(assertion)
        print(report.summary())
        report.raise_if_failed()
    """
    failures: list[AssertionFailure] = field(default_factory=list)
    soft: bool = True
    max_errors: int | None = None

    @classmethod
    def from_assertion(cls, assertion: JsonAssertion) -> SoftAssertionReport:
        """Create a report from the current state of an assertion session."""
        return cls(
            failures=assertion.get_errors(),
            soft=assertion.is_soft,
            max_errors=assertion.max_errors,
        )

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    def summary(self) -> str:
        """Get a human-readable summary of the recorded failures."""
        if self.passed:
            return "✅ All soft assertions passed"

        header = f"❌ {self.failed_count} soft assertion(s) failed"
        if self.max_errors is not None:
            header += f" (limit {self.max_errors})"
        lines = [header]
        for i, failure in enumerate(self.failures, 1):
            lines.append(f"   {i}. [{failure.check.value}] {failure.message}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "soft": self.soft,
            "max_errors": self.max_errors,
            "passed": self.passed,
            "failed_count": self.failed_count,
            "failures": [failure.to_dict() for failure in self.failures],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def print(self, console: Console | None = None) -> None:
        """Render the failures as a table."""
        console = console or Console()

        if self.passed:
            console.print("[green]✅ All soft assertions passed[/green]")
            return

        table = Table(title=f"{self.failed_count} soft assertion(s) failed")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Check", style="cyan")
        table.add_column("Path")
        table.add_column("Message", style="red")

        for i, failure in enumerate(self.failures, 1):
            check = failure.check.value
            if failure.negated:
                check = f"not {check}"
            table.add_row(str(i), check, escape(failure.path), escape(failure.message))

        console.print(table)

    def raise_if_failed(self) -> None:
        """Raise SoftAssertionErrors if any failure was recorded."""
        if self.failures:
            raise SoftAssertionErrors(self.failures)
