"""Shared test fixtures for evntrepo."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from evntrepo.reporting.sink import RecordingSink
from evntrepo.settings import Settings

VALID_EVENT_JSON = """\
{
  "v": 1,
  "name": "Spring Meetup",
  "description": "Talks and pizza.",
  "venues": [
    {"id": "hq", "name": "Headquarters", "address": "1 Main St"}
  ],
  "instances": [
    {"start": "2026-04-01T18:00:00Z", "end": "2026-04-01T21:00:00Z", "venueId": "hq"}
  ],
  "tags": ["community", "talks"]
}
"""

# Missing "name" and a non-string third tag.
INVALID_EVENT_JSON = """\
{
  "instances": [
    {"start": "2026-04-01T18:00:00Z"}
  ],
  "tags": ["a", "b", 3]
}
"""

MALFORMED_JSON = '{"a": }'


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def events_root(tmp_path: Path) -> Path:
    """An events tree with two valid events, one schema failure and one parse failure."""
    root = tmp_path / "events"
    (root / "2026" / "spring").mkdir(parents=True)
    (root / "2026" / "spring" / "meetup.json").write_text(VALID_EVENT_JSON)
    (root / "2026" / "summer.json").write_text(
        json.dumps({"name": "Summer Party", "instances": [{"start": "2026-07-01T12:00:00Z"}]})
    )
    (root / "2026" / "broken.json").write_text(INVALID_EVENT_JSON)
    (root / "garbage.json").write_text(MALFORMED_JSON)
    (root / ".draft.json").write_text(MALFORMED_JSON)
    (root / "README.md").write_text("not an event")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "package.json").write_text("{}")
    return root


@pytest.fixture
def settings(events_root: Path, tmp_path: Path) -> Settings:
    return Settings(
        events_path=str(events_root),
        github_repository="owner/repo",
        index_file=str(tmp_path / ".index.json"),
    )
