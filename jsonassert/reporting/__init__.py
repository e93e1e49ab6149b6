"""
Reporting for soft assertion sessions.

Usage:
    from jsonassert import assert_json_soft
    from jsonassert.reporting import SoftAssertionReport

    assertion = assert_json_soft({"foo": 1})
    assertion.to_be_type("foo", "string")

    report = SoftAssertionReport.from_assertion(assertion)
    report.print()
    report.raise_if_failed()
"""

from .reporter import SoftAssertionReport

__all__ = [
    "SoftAssertionReport",
]
