"""Equality and inequality soft assertions."""

from __future__ import annotations

from numbers import Real
from typing import Any

from atomictest.assertions.base import ComparisonResult, report
from atomictest.config import get_config
from atomictest.formatter import render, trim_indent


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _compares_as_float(actual: Any, expected: Any) -> bool:
    if not (isinstance(actual, float) or isinstance(expected, float)):
        return False
    return _is_number(actual) and _is_number(expected)


def eq(actual: Any, expected: Any) -> ComparisonResult:
    r"""Check that *actual* equals *expected*.

    A ``str`` expected value is compared against the rendered actual value,
    with surrounding whitespace stripped from the actual text and common
    indentation trimmed from the expected block. When either side is a
    float, numbers are equal if they are identical or differ by less than
    the configured tolerance, so infinities compare equal to themselves.

    Text comparison is not reflexive for indented multi-line strings: the
    actual text is only stripped at its ends while the expected block loses
    its common indentation, so ``eq("  x\n  y", "  x\n  y")`` fails.
    """
    if isinstance(expected, str):
        passed = render(actual).strip() == trim_indent(expected)
    elif _compares_as_float(actual, expected):
        passed = actual == expected or abs(actual - expected) < get_config().float_tolerance
    else:
        passed = actual == expected

    return report(actual, expected, passed)


def neq(actual: Any, expected: Any) -> ComparisonResult:
    """Check that *actual* differs from *expected*; reports ``==`` on failure."""
    return report(actual, expected, actual != expected, check_equals=False)
