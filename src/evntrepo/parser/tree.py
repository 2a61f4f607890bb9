"""Position-aware JSON syntax tree for mapping logical paths back to source text."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum
from json.decoder import scanstring

from evntrepo.models.errors import LogicalPath

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DEPTH = 256

_WHITESPACE = " \t\n\r"
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][-+]?[0-9]+)?")


class NodeKind(StrEnum):
    OBJECT = "object"
    ARRAY = "array"
    PROPERTY = "property"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


# Keyword literals accepted by json.loads.
_LITERALS = (
    ("true", NodeKind.BOOLEAN, True),
    ("false", NodeKind.BOOLEAN, False),
    ("null", NodeKind.NULL, None),
    ("NaN", NodeKind.NUMBER, math.nan),
    ("Infinity", NodeKind.NUMBER, math.inf),
    ("-Infinity", NodeKind.NUMBER, -math.inf),
)


@dataclass(frozen=True)
class SyntaxNode:
    """A node of the syntax tree with its character span in the source.

    Objects hold ``PROPERTY`` children whose own children are
    ``(key, value)``; arrays hold their elements; scalars carry ``value``.
    """

    kind: NodeKind
    offset: int
    length: int
    children: tuple[SyntaxNode, ...] = ()
    value: object = None

    @property
    def end(self) -> int:
        return self.offset + self.length

    def source(self, text: str) -> str:
        return text[self.offset : self.end]


class JSONSyntaxError(ValueError):
    """Raised internally when the text is not valid JSON."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class _TreeParser:
    """Recursive-descent parser over the json.loads grammar."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse(self) -> SyntaxNode:
        self._skip_whitespace()
        node = self._parse_value(0)
        self._skip_whitespace()
        if self._pos != len(self._text):
            raise JSONSyntaxError("Extra data", self._pos)
        return node

    # -- helpers -------------------------------------------------------------

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_whitespace(self) -> None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise JSONSyntaxError(f"Expecting {char!r}", self._pos)
        self._pos += 1

    # -- grammar -------------------------------------------------------------

    def _parse_value(self, depth: int) -> SyntaxNode:
        if depth > _MAX_DEPTH:
            raise JSONSyntaxError("Maximum nesting depth exceeded", self._pos)
        char = self._peek()
        if char == "{":
            return self._parse_object(depth)
        if char == "[":
            return self._parse_array(depth)
        if char == '"':
            return self._parse_string()
        for word, kind, value in _LITERALS:
            if self._text.startswith(word, self._pos):
                start = self._pos
                self._pos += len(word)
                return SyntaxNode(kind, start, len(word), value=value)
        return self._parse_number()

    def _parse_object(self, depth: int) -> SyntaxNode:
        start = self._pos
        self._pos += 1
        children: list[SyntaxNode] = []
        self._skip_whitespace()
        if self._peek() == "}":
            self._pos += 1
            return SyntaxNode(NodeKind.OBJECT, start, self._pos - start)
        while True:
            self._skip_whitespace()
            if self._peek() != '"':
                raise JSONSyntaxError("Expecting property name enclosed in double quotes", self._pos)
            key = self._parse_string()
            self._skip_whitespace()
            self._expect(":")
            self._skip_whitespace()
            value = self._parse_value(depth + 1)
            children.append(
                SyntaxNode(
                    NodeKind.PROPERTY,
                    key.offset,
                    value.end - key.offset,
                    children=(key, value),
                )
            )
            self._skip_whitespace()
            if self._peek() == ",":
                self._pos += 1
                continue
            self._expect("}")
            return SyntaxNode(NodeKind.OBJECT, start, self._pos - start, children=tuple(children))

    def _parse_array(self, depth: int) -> SyntaxNode:
        start = self._pos
        self._pos += 1
        children: list[SyntaxNode] = []
        self._skip_whitespace()
        if self._peek() == "]":
            self._pos += 1
            return SyntaxNode(NodeKind.ARRAY, start, self._pos - start)
        while True:
            self._skip_whitespace()
            children.append(self._parse_value(depth + 1))
            self._skip_whitespace()
            if self._peek() == ",":
                self._pos += 1
                continue
            self._expect("]")
            return SyntaxNode(NodeKind.ARRAY, start, self._pos - start, children=tuple(children))

    def _parse_string(self) -> SyntaxNode:
        start = self._pos
        # scanstring raises JSONDecodeError (a ValueError) on bad escapes
        # and unterminated strings, same as json.loads would.
        value, end = scanstring(self._text, start + 1, True)
        self._pos = end
        return SyntaxNode(NodeKind.STRING, start, end - start, value=value)

    def _parse_number(self) -> SyntaxNode:
        match = _NUMBER_RE.match(self._text, self._pos)
        if match is None:
            raise JSONSyntaxError("Expecting value", self._pos)
        literal = match.group()
        value: int | float
        if match.group(1) or match.group(2):
            value = float(literal)
        else:
            value = int(literal)
        self._pos = match.end()
        return SyntaxNode(NodeKind.NUMBER, match.start(), len(literal), value=value)


def parse_tree(text: str) -> SyntaxNode | None:
    """Parse ``text`` into a syntax tree, or return ``None`` if it is not valid JSON."""
    try:
        return _TreeParser(text).parse()
    except ValueError:
        return None


def find_node(root: SyntaxNode, path: LogicalPath) -> SyntaxNode | None:
    """Descend ``root`` along ``path`` and return the value node found there.

    String steps select the first property with that key; integer steps
    select an array element. Any step that does not apply (missing key,
    index out of range, wrong container kind) yields ``None``.
    """
    node = root
    for step in path:
        if isinstance(step, str):
            if node.kind is not NodeKind.OBJECT:
                return None
            for prop in node.children:
                key, value = prop.children
                if key.value == step:
                    node = value
                    break
            else:
                return None
        elif isinstance(step, int) and not isinstance(step, bool):
            if node.kind is not NodeKind.ARRAY or not 0 <= step < len(node.children):
                return None
            node = node.children[step]
        else:
            return None
    return node
