"""Process-wide ordered output log compared as a single block."""

from __future__ import annotations

import logging
import threading
from typing import Any

from atomictest.assertions.base import ComparisonResult, report
from atomictest.formatter import collapse_lines, render, trim_indent

logger = logging.getLogger(__name__)


class Trace:
    """Ordered log of rendered values.

    Call the instance to append; :meth:`eq` compares the whole log against an
    expected block and then empties it, whether or not the comparison passed.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._lock = threading.Lock()

    def __call__(self, value: Any) -> None:
        with self._lock:
            self._entries.append(render(value))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def content(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _drain(self) -> list[str]:
        with self._lock:
            entries, self._entries = self._entries, []
        return entries

    def eq(self, expected: str) -> ComparisonResult:
        entries = self._drain()
        logger.debug(f"Comparing {len(entries)} trace entries")

        actual = collapse_lines("\n".join(entries))
        wanted = collapse_lines(trim_indent(expected))
        return report(actual, wanted, actual == wanted)


trace = Trace()
