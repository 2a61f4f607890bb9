"""Annotation sinks: where diagnostics and progress messages end up."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from evntrepo.models.errors import Diagnostic


class AnnotationSink(Protocol):
    """Reporting channel that renders diagnostics inline in a CI context."""

    def info(self, message: str) -> None: ...

    def error(self, diagnostic: Diagnostic) -> None: ...

    def set_failed(self, message: str) -> None: ...


# ---------------------------------------------------------------------------
# GitHub Actions workflow commands
# ---------------------------------------------------------------------------


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str, properties: dict[str, object] | None = None) -> str:
    """Format a ``::command key=value,...::message`` line.

    Properties whose value is ``None`` are left out.
    """
    props = ",".join(
        f"{key}={escape_property(str(value))}"
        for key, value in (properties or {}).items()
        if value is not None
    )
    head = f"::{command} {props}" if props else f"::{command}"
    return f"{head}::{escape_data(message)}"


def annotation_properties(diagnostic: Diagnostic) -> dict[str, object]:
    span = diagnostic.span
    return {
        "file": diagnostic.file,
        "line": span.line if span else None,
        "endLine": span.end_line if span else None,
        "col": span.column if span else None,
        "endColumn": span.end_column if span else None,
    }


class GitHubActionsSink:
    """Writes workflow commands to stdout and tracks the process exit code."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.exit_code = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def info(self, message: str) -> None:
        self._write(message)

    def error(self, diagnostic: Diagnostic) -> None:
        self._write(format_command("error", diagnostic.message, annotation_properties(diagnostic)))

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self._write(format_command("error", message))


@dataclass
class RecordingSink:
    """In-memory sink; keeps everything it is given."""

    infos: list[str] = field(default_factory=list)
    errors: list[Diagnostic] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, diagnostic: Diagnostic) -> None:
        self.errors.append(diagnostic)

    def set_failed(self, message: str) -> None:
        self.failures.append(message)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        return 1 if self.failures else 0
