"""Offset to line/column conversion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A 0-indexed (line, column) location in a source text."""

    line: int
    column: int


def resolve_position(text: str, offset: int) -> Position:
    """Convert a character offset into ``text`` to a 0-indexed position.

    ``offset`` may range from 0 to ``len(text)`` inclusive; the latter is the
    end-of-document position. Only ``\\n`` counts as a line break, so a
    ``\\r`` before it stays part of the previous line's columns.
    """
    line = text.count("\n", 0, offset)
    column = offset - text.rfind("\n", 0, offset) - 1
    return Position(line=line, column=column)
