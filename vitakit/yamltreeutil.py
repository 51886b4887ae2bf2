"""Helpers for reading typed values out of a YAML tree."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from vitakit.yamltree import MappingNode, ScalarNode, SequenceNode, YamlNode

_ULONG_MAX = 0xFFFFFFFFFFFFFFFF
_INTEGER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


class YamlValueError(ValueError):
    """Raised when a node does not hold the expected kind of value."""


def _scalar(node: YamlNode) -> ScalarNode:
    if not isinstance(node, ScalarNode):
        raise YamlValueError(f"expected a scalar, got a {node.type.value}")
    return node


def iterate_mapping(
    node: YamlNode, functor: Callable[[YamlNode, YamlNode], Any]
) -> None:
    """Call ``functor(key, value)`` for each pair of a mapping node."""
    if not isinstance(node, MappingNode):
        raise YamlValueError(f"expected a mapping, got a {node.type.value}")
    for key, value in node.pairs:
        functor(key, value)


def iterate_sequence(node: YamlNode, functor: Callable[[YamlNode], Any]) -> None:
    """Call ``functor(entry)`` for each entry of a sequence node."""
    if not isinstance(node, SequenceNode):
        raise YamlValueError(f"expected a sequence, got a {node.type.value}")
    for entry in node.nodes:
        functor(entry)


def process_32bit_integer(node: YamlNode) -> int:
    """Read an unsigned 32-bit integer in decimal, hex (0x) or octal (0) form.

    Negative values wrap around and out-of-range values saturate before
    being truncated to 32 bits.
    """
    text = _scalar(node).value
    match = _INTEGER.match(text)
    if match is None:
        if text:
            raise YamlValueError(f"'{text}' is not an integer")
        return 0
    if match.end() != len(text):
        raise YamlValueError(f"'{text}' is not an integer")
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        magnitude = int(digits[2:], 16)
    elif digits.startswith("0"):
        magnitude = int(digits, 8)
    else:
        magnitude = int(digits, 10)
    if magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    elif sign == "-":
        value = -magnitude & _ULONG_MAX
    else:
        value = magnitude
    return value & 0xFFFFFFFF


def process_boolean(node: YamlNode) -> int:
    """Read "true" or "false" as 1 or 0."""
    text = _scalar(node).value
    if text == "true":
        return 1
    if text == "false":
        return 0
    raise YamlValueError(f"'{text}' is not a boolean")


def process_bool(node: YamlNode) -> bool:
    """Read "true" or "false" as a bool."""
    return process_boolean(node) == 1


def process_string(node: YamlNode) -> str:
    """Read the text of a scalar node."""
    return _scalar(node).value


def is_scalar(node: YamlNode) -> bool:
    """Whether ``node`` is a scalar."""
    return isinstance(node, ScalarNode)


def is_mapping(node: YamlNode) -> bool:
    """Whether ``node`` is a mapping."""
    return isinstance(node, MappingNode)


def is_sequence(node: YamlNode) -> bool:
    """Whether ``node`` is a sequence."""
    return isinstance(node, SequenceNode)