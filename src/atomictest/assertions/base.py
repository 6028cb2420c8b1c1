"""Shared compare-and-report primitive for the assertion system."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import typer

from atomictest.config import get_config
from atomictest.formatter import render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of a single soft assertion.

    Attributes:
        actual: Rendered actual value, as echoed to the console.
        expected: Rendered expected value.
        relation: Operator printed on failure: "!=" for eq, "==" for neq.
        passed: Whether the predicate held.
        error_tag: Prefix of the diagnostic line.
        failure_text: Replaces the "<actual> <relation> <expected>" part of
            the diagnostic for checks that report in their own format.
    """

    actual: str
    expected: str
    relation: str
    passed: bool
    error_tag: str
    failure_text: str | None = None

    @property
    def diagnostic(self) -> str | None:
        """The error-tagged failure line, or None when the check passed."""
        if self.passed:
            return None
        if self.failure_text is not None:
            return f"{self.error_tag}{self.failure_text}"
        return f"{self.error_tag}{self.actual} {self.relation} {self.expected}"

    def __bool__(self) -> bool:
        return self.passed


def report(
    actual: Any,
    expected: Any,
    passed: bool,
    *,
    check_equals: bool = True,
) -> ComparisonResult:
    """Echo *actual* and print a diagnostic unless *passed*.

    Never raises on mismatch; the returned result carries the outcome.
    """
    config = get_config()
    actual_text = render(actual)
    if config.echo:
        typer.echo(actual_text)

    result = ComparisonResult(
        actual=actual_text,
        expected=render(expected),
        relation="!=" if check_equals else "==",
        passed=bool(passed),
        error_tag=config.error_tag,
    )
    if result.passed:
        logger.debug(f"{'eq' if check_equals else 'neq'} passed: {actual_text!r}")
    else:
        logger.debug(f"Assertion failed: {result.diagnostic}")
        typer.echo(result.diagnostic)
    return result
