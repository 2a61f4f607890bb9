"""Per-file outcomes of the validation pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from evntrepo.models.errors import SchemaIssue
from evntrepo.models.event import EventData


@dataclass(frozen=True)
class Validated:
    """The file parsed and passed schema validation."""

    path: str
    rel_path: str
    data: EventData


@dataclass(frozen=True)
class ParseFailed:
    path: str
    rel_path: str
    text: str


@dataclass(frozen=True)
class SchemaFailed:
    path: str
    rel_path: str
    text: str
    issues: tuple[SchemaIssue, ...]


@dataclass(frozen=True)
class Skipped:
    """Hidden file, excluded before any I/O."""

    path: str
    rel_path: str


@dataclass(frozen=True)
class UnexpectedFailure:
    path: str
    rel_path: str
    message: str


Outcome = Validated | ParseFailed | SchemaFailed | Skipped | UnexpectedFailure

# A validated event is the success outcome; the index is built from these.
ValidatedEvent = Validated


def is_failure(outcome: Outcome) -> bool:
    return isinstance(outcome, ParseFailed | SchemaFailed | UnexpectedFailure)
