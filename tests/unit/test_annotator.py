"""Tests for building located diagnostics from schema and parse failures."""

from __future__ import annotations

import json

from evntrepo.models.errors import SchemaIssue, SourceSpan
from evntrepo.parser.validator import EventValidator, ValidationFailure
from evntrepo.reporting.annotator import INVALID_JSON_MESSAGE, ErrorAnnotator
from evntrepo.reporting.sink import RecordingSink
from tests.conftest import INVALID_EVENT_JSON


class TestAnnotateIssues:
    def test_located_issue_gets_one_indexed_span(self, sink: RecordingSink) -> None:
        text = '{\n  "tags": ["a", 3]\n}'
        issues = [SchemaIssue(path=("tags", 1), message="Input should be a valid string")]
        [diagnostic] = ErrorAnnotator(sink).annotate_issues("events/x.json", text, issues)
        assert diagnostic.span == SourceSpan(
            file="events/x.json", line=2, column=17, end_line=2, end_column=18
        )
        assert diagnostic.message == "Input should be a valid string"
        assert sink.errors == [diagnostic]

    def test_multiline_span(self, sink: RecordingSink) -> None:
        text = '{"venue": {\n  "id": 1\n}}'
        issues = [SchemaIssue(path=("venue",), message="bad venue")]
        [diagnostic] = ErrorAnnotator(sink).annotate_issues("f.json", text, issues)
        assert diagnostic.span is not None
        assert (diagnostic.span.line, diagnostic.span.column) == (1, 11)
        assert (diagnostic.span.end_line, diagnostic.span.end_column) == (3, 2)

    def test_root_issue_spans_whole_document(self, sink: RecordingSink) -> None:
        text = "[1, 2]"
        [diagnostic] = ErrorAnnotator(sink).annotate_issues(
            "f.json", text, [SchemaIssue(path=(), message="Input should be an object")]
        )
        assert diagnostic.span == SourceSpan(
            file="f.json", line=1, column=1, end_line=1, end_column=7
        )

    def test_unresolvable_path_degrades_to_file_level(self, sink: RecordingSink) -> None:
        text = '{"tags": []}'
        issues = [
            SchemaIssue(path=("name",), message="Field required"),
            SchemaIssue(path=("tags", 5), message="out of range"),
            SchemaIssue(path=("tags",), message="too short"),
        ]
        diagnostics = ErrorAnnotator(sink).annotate_issues("f.json", text, issues)
        assert [d.is_located for d in diagnostics] == [False, False, True]
        assert all(d.file == "f.json" for d in diagnostics)
        assert len(sink.errors) == 3

    def test_unparseable_text_gives_file_level_diagnostics(self, sink: RecordingSink) -> None:
        issues = [SchemaIssue(path=("a",), message="boom")]
        [diagnostic] = ErrorAnnotator(sink).annotate_issues("f.json", "{", issues)
        assert diagnostic.span is None
        assert diagnostic.message == "boom"

    def test_real_schema_issues_are_located(self, sink: RecordingSink) -> None:
        result = EventValidator().validate(json.loads(INVALID_EVENT_JSON))
        assert isinstance(result, ValidationFailure)
        diagnostics = ErrorAnnotator(sink).annotate_issues(
            "events/bad.json", INVALID_EVENT_JSON, result.issues
        )
        by_message = {d.message: d for d in diagnostics}
        assert len(diagnostics) == 2
        assert by_message["Field required"].span is None
        tag_span = by_message["Input should be a valid string"].span
        assert tag_span is not None
        assert (tag_span.line, tag_span.column, tag_span.end_column) == (5, 22, 23)


class TestAnnotateParseFailure:
    def test_single_file_level_diagnostic(self, sink: RecordingSink) -> None:
        diagnostic = ErrorAnnotator(sink).annotate_parse_failure("events/bad.json")
        assert diagnostic.message == INVALID_JSON_MESSAGE == "Invalid JSON file!"
        assert diagnostic.file == "events/bad.json"
        assert diagnostic.span is None
        assert sink.errors == [diagnostic]

    def test_unexpected_failure_message(self, sink: RecordingSink) -> None:
        diagnostic = ErrorAnnotator(sink).annotate_unexpected("f.json", "disk on fire")
        assert diagnostic.message == "Unexpected error: disk on fire"
        assert diagnostic.file == "f.json"
