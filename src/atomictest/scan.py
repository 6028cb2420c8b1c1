"""Find error-tagged diagnostic lines in captured console output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from atomictest.config import ERROR_TAG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A failed assertion found in console output.

    Attributes:
        line_number: 1-based line number in the scanned output.
        text: The line with the error tag (and anything before it) removed.
    """

    line_number: int
    text: str


def scan_lines(lines: Iterable[str], error_tag: str = ERROR_TAG) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for number, line in enumerate(lines, start=1):
        _, tag, rest = line.rstrip("\r\n").partition(error_tag)
        if tag:
            logger.debug(f"Failed assertion on line {number}: {rest}")
            diagnostics.append(Diagnostic(line_number=number, text=rest))
    return diagnostics


def scan_file(path: Path, error_tag: str = ERROR_TAG) -> list[Diagnostic]:
    logger.info(f"Scanning {path} for '{error_tag}'")
    with open(path, encoding="utf-8", errors="replace") as f:
        return scan_lines(f, error_tag)
