"""JSON parsing with source positions for evntrepo."""

from evntrepo.parser.position import Position, resolve_position
from evntrepo.parser.tree import NodeKind, SyntaxNode, find_node, parse_tree
from evntrepo.parser.validator import EventValidator, ValidationFailure, ValidationSuccess

__all__ = [
    "EventValidator",
    "NodeKind",
    "Position",
    "SyntaxNode",
    "ValidationFailure",
    "ValidationSuccess",
    "find_node",
    "parse_tree",
    "resolve_position",
]
