"""Soft assertions that report mismatches on the console instead of raising."""

from atomictest.assertions.base import ComparisonResult, report
from atomictest.assertions.capture import CapturedException, capture
from atomictest.assertions.comparator import eq, neq
from atomictest.assertions.tracing import Trace, trace

__all__ = [
    "CapturedException",
    "ComparisonResult",
    "Trace",
    "capture",
    "eq",
    "neq",
    "report",
    "trace",
]
