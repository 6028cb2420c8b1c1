"""Canonical string rendering for comparison and console echo."""

from __future__ import annotations

from typing import Any


def render(value: Any) -> str:
    return str(value)


def trim_indent(text: str) -> str:
    """Strip a blank first/last line and the common leading indentation.

    Indentation is counted in whitespace characters; tabs are not expanded,
    so a block mixing tabs and spaces is only dedented by the shared width.
    """
    lines = text.split("\n")
    if lines and not lines[0].strip():
        lines = lines[1:]
    if lines and not lines[-1].strip():
        lines = lines[:-1]

    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    margin = min(indents) if indents else 0
    return "\n".join(line[margin:] for line in lines)


def collapse_lines(text: str) -> str:
    return text.replace("\n", " ")
