"""Turn a raised exception (or the lack of one) into a comparable value."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

import typer

from atomictest.assertions.base import ComparisonResult
from atomictest.assertions.comparator import eq
from atomictest.config import get_config

logger = logging.getLogger(__name__)

NO_EXCEPTION_MESSAGE = "Expected an exception"


@dataclass(frozen=True)
class CapturedException:
    """Outcome of :func:`capture`.

    Attributes:
        kind: Simple class name of the raised exception, or None when the
            operation returned normally.
        detail_message: ``": <message>"`` for an exception with a message,
            ``""`` for one without, or the error-tagged sentinel text when
            nothing was raised.
    """

    kind: str | None
    detail_message: str

    @property
    def raised(self) -> bool:
        return self.kind is not None

    def __str__(self) -> str:
        return (self.kind or "") + self.detail_message

    def eq(self, expected: str) -> ComparisonResult:
        return eq(str(self), expected)

    def contains(self, parts: list[str]) -> ComparisonResult:
        """Check that every string in *parts* occurs in the rendered exception.

        Silent on success. On failure prints the actual message and the
        required parts.
        """
        if isinstance(parts, str):
            raise TypeError("contains() expects a list of strings, not a str")

        config = get_config()
        message = str(self)
        parts = list(parts)
        result = ComparisonResult(
            actual=message,
            expected=str(parts),
            relation="contains",
            passed=all(part in message for part in parts),
            error_tag=config.error_tag,
            failure_text=f"Actual message: {message}\nExpected parts: {parts}",
        )
        if not result.passed:
            logger.debug(f"contains failed: {message!r} missing one of {parts}")
            typer.echo(result.diagnostic)
        return result


def capture(operation: Callable[[], Any]) -> CapturedException:
    """Run *operation* and describe what it raised.

    Every exception is caught, ``BaseException`` included, and none is
    re-raised. There is no timeout.
    """
    try:
        operation()
    except BaseException as e:
        message = str(e)
        captured = CapturedException(
            kind=type(e).__name__,
            detail_message=f": {message}" if message else "",
        )
        logger.debug(f"Captured {captured}")
        return captured

    logger.debug("Operation completed without raising")
    return CapturedException(
        kind=None,
        detail_message=f"{get_config().error_tag}{NO_EXCEPTION_MESSAGE}",
    )
