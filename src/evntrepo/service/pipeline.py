"""Concurrent validation of event files: read, parse, validate, annotate."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from evntrepo.models.errors import Diagnostic
from evntrepo.models.outcome import (
    Outcome,
    ParseFailed,
    SchemaFailed,
    Skipped,
    UnexpectedFailure,
    Validated,
    is_failure,
)
from evntrepo.parser.validator import EventValidator, ValidationFailure
from evntrepo.reporting.annotator import ErrorAnnotator
from evntrepo.reporting.sink import AnnotationSink

logger = logging.getLogger("evntrepo.pipeline")


@dataclass
class ValidationSummary:
    """Reduced result of a pipeline run over all files."""

    outcomes: list[Outcome] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def events(self) -> list[Validated]:
        return [o for o in self.outcomes if isinstance(o, Validated)]

    @property
    def failure_count(self) -> int:
        return sum(1 for o in self.outcomes if is_failure(o))

    @property
    def passed(self) -> bool:
        return self.failure_count == 0


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8") as handle:
        return handle.read()


class ValidationPipeline:
    """Runs every file through read → parse → validate concurrently.

    File tasks never raise: each one returns an :data:`Outcome`. Outcomes
    are reported to the sink once all tasks have settled, in input order.
    """

    def __init__(self, sink: AnnotationSink, validator: EventValidator | None = None) -> None:
        self._sink = sink
        self._validator = validator or EventValidator()
        self._annotator = ErrorAnnotator(sink)

    async def check_file(self, root: Path, rel_path: str) -> Outcome:
        path = (root / rel_path).as_posix()
        if PurePosixPath(rel_path).name.startswith("."):
            return Skipped(path, rel_path)
        try:
            text = await asyncio.to_thread(_read_text, root / rel_path)
            try:
                data = json.loads(text)
            except (ValueError, RecursionError):
                # Nesting too deep for the reader counts as unparseable.
                return ParseFailed(path, rel_path, text)
            result = self._validator.validate(data)
            if isinstance(result, ValidationFailure):
                return SchemaFailed(path, rel_path, text, result.issues)
            return Validated(path, rel_path, result.data)
        except Exception as exc:
            logger.debug("Unexpected failure while checking %s", path, exc_info=True)
            return UnexpectedFailure(path, rel_path, str(exc) or type(exc).__name__)

    async def run(self, root: Path, files: Sequence[str]) -> ValidationSummary:
        outcomes = await asyncio.gather(*(self.check_file(root, f) for f in files))
        summary = ValidationSummary(outcomes=list(outcomes))
        for outcome in summary.outcomes:
            summary.diagnostics.extend(self._report(outcome))
        logger.info(
            "Checked %d file(s): %d validated, %d failed",
            len(files), len(summary.events), summary.failure_count,
        )
        return summary

    def _report(self, outcome: Outcome) -> list[Diagnostic]:
        match outcome:
            case Validated(path=path):
                self._sink.info(f"Validated event: {path}")
                return []
            case ParseFailed(path=path):
                return [self._annotator.annotate_parse_failure(path)]
            case SchemaFailed(path=path, text=text, issues=issues):
                return self._annotator.annotate_issues(path, text, issues)
            case UnexpectedFailure(path=path, message=message):
                return [self._annotator.annotate_unexpected(path, message)]
            case Skipped(path=path):
                logger.debug("Skipped hidden file %s", path)
                return []
