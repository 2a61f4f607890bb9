"""Structured diagnostic models with JSON source position tracking."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

LogicalPath = tuple[str | int, ...]


class EvntRepoError(Exception):
    """Base class for errors raised by evntrepo itself."""


class RepositoryConfigError(EvntRepoError):
    """Raised when the repository coordinates cannot be determined."""


class SourceSpan(BaseModel):
    """Points to an exact range in a JSON source file (1-indexed)."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class Diagnostic(BaseModel):
    """A located or file-level message surfaced to the operator."""

    message: str
    file: str | None = None
    span: SourceSpan | None = None

    @property
    def is_located(self) -> bool:
        return self.span is not None


@dataclass(frozen=True)
class SchemaIssue:
    """One schema violation: where in the logical document, and what is wrong."""

    path: LogicalPath
    message: str


def format_path(path: LogicalPath) -> str:
    """Render a logical path the way it would be written in JavaScript, e.g. ``tags[2].name``."""
    out = ""
    for step in path:
        if isinstance(step, int):
            out += f"[{step}]"
        else:
            out += f".{step}" if out else step
    return out or "<root>"
