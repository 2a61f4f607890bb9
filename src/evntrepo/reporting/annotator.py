"""Turns validation and parse failures into located diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from evntrepo.models.errors import Diagnostic, SchemaIssue, SourceSpan, format_path
from evntrepo.parser.position import resolve_position
from evntrepo.parser.tree import SyntaxNode, find_node, parse_tree
from evntrepo.reporting.sink import AnnotationSink

logger = logging.getLogger("evntrepo.annotator")

INVALID_JSON_MESSAGE = "Invalid JSON file!"


def node_span(file: str, text: str, node: SyntaxNode) -> SourceSpan:
    """Return the 1-indexed span covered by ``node`` in ``text``."""
    start = resolve_position(text, node.offset)
    end = resolve_position(text, node.end)
    return SourceSpan(
        file=file,
        line=start.line + 1,
        column=start.column + 1,
        end_line=end.line + 1,
        end_column=end.column + 1,
    )


class ErrorAnnotator:
    """Builds diagnostics for one file and hands each to the sink."""

    def __init__(self, sink: AnnotationSink) -> None:
        self._sink = sink

    def annotate_issues(
        self, file: str, text: str, issues: Sequence[SchemaIssue]
    ) -> list[Diagnostic]:
        """Emit one diagnostic per schema issue, located where possible.

        Issues whose path does not resolve against the document still
        produce a diagnostic, attached to the file without a span.
        """
        root = parse_tree(text)
        if root is None:
            logger.debug("No syntax tree for %s; reporting issues without spans", file)

        diagnostics: list[Diagnostic] = []
        for issue in issues:
            node = find_node(root, issue.path) if root is not None else None
            span: SourceSpan | None = None
            if node is not None:
                span = node_span(file, text, node)
            else:
                logger.debug("Could not locate %s in %s", format_path(issue.path), file)
            diagnostic = Diagnostic(message=issue.message, file=file, span=span)
            self._sink.error(diagnostic)
            diagnostics.append(diagnostic)
        return diagnostics

    def annotate_parse_failure(self, file: str) -> Diagnostic:
        diagnostic = Diagnostic(message=INVALID_JSON_MESSAGE, file=file)
        self._sink.error(diagnostic)
        return diagnostic

    def annotate_unexpected(self, file: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(message=f"Unexpected error: {message}", file=file)
        self._sink.error(diagnostic)
        return diagnostic
