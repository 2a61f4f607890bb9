"""Index artifacts: the ``.index.json`` manifest and per-directory ``.ls`` listings."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from evntrepo.models.index import EventIndex, IndexEntry
from evntrepo.models.outcome import ValidatedEvent

logger = logging.getLogger("evntrepo.index")

EVENTS_PREFIX = "events"


def event_url(pages_url: str, rel_path: str) -> str:
    """Public URL of an event file published under ``<pages_url>/events/``."""
    return f"{pages_url.rstrip('/')}/{EVENTS_PREFIX}/{rel_path}"


def build_index(repository: str, pages_url: str, events: Iterable[ValidatedEvent]) -> EventIndex:
    entries = [
        IndexEntry(path=event.rel_path, url=event_url(pages_url, event.rel_path))
        for event in sorted(events, key=lambda e: e.rel_path)
    ]
    return EventIndex(repository=repository, events=entries)


def write_index(index: EventIndex, path: Path) -> None:
    path.write_text(index.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Wrote index with %d event(s) to %s", len(index.events), path)


def list_directory(directory: Path) -> list[str]:
    """Names of the non-hidden immediate children of ``directory``."""
    return sorted(child.name for child in directory.iterdir() if not child.name.startswith("."))


def write_listings(root: Path, directories: Iterable[str], listing_file: str = ".ls") -> list[Path]:
    """Write a listing snapshot into each directory; return the directories listed."""
    written: list[Path] = []
    for rel_dir in directories:
        directory = root / rel_dir
        names = list_directory(directory)
        (directory / listing_file).write_text(json.dumps(names, indent=2), encoding="utf-8")
        written.append(directory)
    return written
