"""A small YAML document tree built from parser events.

Only scalars, sequences and mappings are supported; aliases are rejected.
Every node records the line and column (both zero-based) where it starts.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO, ClassVar, Union

import yaml

StreamInput = Union[str, bytes, IO[str], IO[bytes]]


class YamlTreeError(ValueError):
    """Raised when a YAML stream cannot be turned into a tree."""


class NodeType(enum.Enum):
    """Kind of a tree node."""

    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class Position:
    """Zero-based location of a node in the source text."""

    line: int = 0
    column: int = 0


class YamlNode:
    """Base of all tree nodes."""

    type: ClassVar[NodeType]
    position: Position


@dataclass
class ScalarNode(YamlNode):
    """A plain value."""

    value: str
    position: Position = field(default_factory=Position)
    type: ClassVar[NodeType] = NodeType.SCALAR

    @property
    def length(self) -> int:
        """Length of the value in UTF-8 bytes."""
        return len(self.value.encode("utf-8"))


@dataclass
class SequenceNode(YamlNode):
    """An ordered list of nodes."""

    nodes: list[YamlNode] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    type: ClassVar[NodeType] = NodeType.SEQUENCE

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[YamlNode]:
        return iter(self.nodes)


@dataclass
class MappingNode(YamlNode):
    """An ordered list of key/value node pairs."""

    pairs: list[tuple[YamlNode, YamlNode]] = field(default_factory=list)
    position: Position = field(default_factory=Position)
    type: ClassVar[NodeType] = NodeType.MAPPING

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[YamlNode, YamlNode]]:
        return iter(self.pairs)


@dataclass
class YamlTree:
    """The documents of one YAML stream, each a root node."""

    docs: list[YamlNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.docs)

    def __iter__(self) -> Iterator[YamlNode]:
        return iter(self.docs)

    def __getitem__(self, index: int) -> YamlNode:
        return self.docs[index]


_EVENT_NAMES: dict[type, str] = {
    yaml.StreamStartEvent: "YAML_STREAM_START_EVENT",
    yaml.StreamEndEvent: "YAML_STREAM_END_EVENT",
    yaml.DocumentStartEvent: "YAML_DOCUMENT_START_EVENT",
    yaml.DocumentEndEvent: "YAML_DOCUMENT_END_EVENT",
    yaml.AliasEvent: "YAML_ALIAS_EVENT",
    yaml.ScalarEvent: "YAML_SCALAR_EVENT",
    yaml.SequenceStartEvent: "YAML_SEQUENCE_START_EVENT",
    yaml.SequenceEndEvent: "YAML_SEQUENCE_END_EVENT",
    yaml.MappingStartEvent: "YAML_MAPPING_START_EVENT",
    yaml.MappingEndEvent: "YAML_MAPPING_END_EVENT",
}


def _event_name(event: yaml.Event | None) -> str:
    if event is None:
        return "YAML_NO_EVENT"
    return _EVENT_NAMES.get(type(event), "UNKNOWN")


def _format_error(exc: yaml.YAMLError) -> str:
    if isinstance(exc, yaml.reader.ReaderError):
        character = exc.character
        code = character if isinstance(character, int) else ord(character)
        return (
            f"yaml: reader error: '{exc.reason}:#{code:X}' "
            f"at position {exc.position}."
        )
    if isinstance(exc, yaml.MarkedYAMLError):
        if isinstance(exc, yaml.scanner.ScannerError):
            kind = "scanner"
        elif isinstance(exc, yaml.composer.ComposerError):
            kind = "composer"
        else:
            kind = "parser"
        mark = exc.problem_mark
        if mark is None:
            return f"yaml: {kind} error: '{exc.problem}'."
        return (
            f"yaml: {kind} error: '{exc.problem}' "
            f"at line {mark.line}, column {mark.column}."
        )
    return f"yaml: {exc}"


def _position(event: yaml.Event) -> Position:
    mark = event.start_mark
    if mark is None:
        return Position()
    return Position(mark.line, mark.column)


class _TreeBuilder:
    """Walks parser events with one event of look-ahead."""

    def __init__(self, stream: StreamInput) -> None:
        self._events = iter(yaml.parse(stream, Loader=yaml.SafeLoader))
        self.event: yaml.Event | None = None
        self.next_event: yaml.Event | None = None
        self.advance()

    def advance(self) -> yaml.Event | None:
        self.event = self.next_event
        try:
            self.next_event = next(self._events)
        except StopIteration:
            self.next_event = None
        except yaml.YAMLError as exc:
            raise YamlTreeError(_format_error(exc)) from exc
        return self.event

    def _expect_more(self) -> None:
        if self.next_event is None:
            raise YamlTreeError("yamltree: unexpected end of the event stream.")

    def build(self) -> YamlTree:
        if not isinstance(self.next_event, yaml.StreamStartEvent):
            raise YamlTreeError(
                "yamltree: expecting YAML_STREAM_START_EVENT got "
                f"'{_event_name(self.next_event)}'."
            )
        self.advance()
        tree = YamlTree()
        while True:
            self._expect_more()
            if isinstance(self.next_event, yaml.StreamEndEvent):
                self.advance()
                break
            tree.docs.append(self._document())
        return tree

    def _document(self) -> YamlNode:
        event = self.advance()
        if not isinstance(event, yaml.DocumentStartEvent):
            raise YamlTreeError(
                "yamltree: expecting YAML_DOCUMENT_START_EVENT got "
                f"'{_event_name(event)}'."
            )
        root = self._node()
        event = self.advance()
        if not isinstance(event, yaml.DocumentEndEvent):
            raise YamlTreeError(
                "yamltree: expecting YAML_DOCUMENT_END_EVENT got "
                f"'{_event_name(event)}'."
            )
        return root

    def _node(self) -> YamlNode:
        event = self.advance()
        if isinstance(event, yaml.AliasEvent):
            raise YamlTreeError(
                "yamltree: there is no support for aliases implemented."
            )
        if isinstance(event, yaml.ScalarEvent):
            return ScalarNode(event.value, _position(event))
        if isinstance(event, yaml.SequenceStartEvent):
            return self._sequence(event)
        if isinstance(event, yaml.MappingStartEvent):
            return self._mapping(event)
        raise YamlTreeError(
            f"yamltree: expecting a node got '{_event_name(event)}'."
        )

    def _sequence(self, start: yaml.Event) -> SequenceNode:
        sequence = SequenceNode(position=_position(start))
        while True:
            self._expect_more()
            if isinstance(self.next_event, yaml.SequenceEndEvent):
                break
            sequence.nodes.append(self._node())
        self.advance()
        return sequence

    def _mapping(self, start: yaml.Event) -> MappingNode:
        mapping = MappingNode(position=_position(start))
        while True:
            self._expect_more()
            if isinstance(self.next_event, yaml.MappingEndEvent):
                break
            key = self._node()
            value = self._node()
            mapping.pairs.append((key, value))
        self.advance()
        return mapping


def parse_yaml_stream(stream: StreamInput) -> YamlTree:
    """Parse a YAML text or file object into a :class:`YamlTree`.

    Raises :class:`YamlTreeError` on malformed input or on aliases.
    """
    return _TreeBuilder(stream).build()


def node_type_str(node: YamlNode) -> str:
    """Return "mapping", "sequence" or "scalar" for ``node``."""
    if not isinstance(node, YamlNode):
        raise TypeError(f"not a YAML tree node: {node!r}")
    return node.type.value