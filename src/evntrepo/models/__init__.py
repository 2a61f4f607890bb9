"""Pydantic domain models for evntrepo."""

from evntrepo.models.errors import Diagnostic, SchemaIssue, SourceSpan
from evntrepo.models.event import EventData, EventInstance, EventLink, EventStatus, Venue
from evntrepo.models.index import EventIndex, IndexEntry, Repository

__all__ = [
    "Diagnostic",
    "EventData",
    "EventIndex",
    "EventInstance",
    "EventLink",
    "EventStatus",
    "IndexEntry",
    "Repository",
    "SchemaIssue",
    "SourceSpan",
    "Venue",
]
