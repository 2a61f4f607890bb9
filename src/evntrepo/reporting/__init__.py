"""Diagnostic reporting for evntrepo."""

from evntrepo.reporting.annotator import INVALID_JSON_MESSAGE, ErrorAnnotator, node_span
from evntrepo.reporting.sink import AnnotationSink, GitHubActionsSink, RecordingSink

__all__ = [
    "INVALID_JSON_MESSAGE",
    "AnnotationSink",
    "ErrorAnnotator",
    "GitHubActionsSink",
    "RecordingSink",
    "node_span",
]
