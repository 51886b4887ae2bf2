"""Event-level writer for block-style YAML mappings."""

from __future__ import annotations

import io
from typing import IO, Any

import yaml

MAP_TAG = "tag:yaml.org,2002:map"


class YamlEmitter:
    """Writes YAML to ``stream`` one event at a time.

    Text streams receive ``str``; any other stream receives UTF-8 bytes.
    Out-of-order events raise :class:`yaml.emitter.EmitterError`.
    """

    def __init__(self, stream: IO[Any]) -> None:
        self.stream = stream
        self._encoding = None if isinstance(stream, io.TextIOBase) else "utf-8"
        self._emitter = yaml.emitter.Emitter(stream)

    def _emit(self, event: yaml.Event) -> None:
        self._emitter.emit(event)

    def _scalar(self, text: str) -> None:
        self._emit(yaml.ScalarEvent(None, None, (True, True), text))

    def stream_start(self) -> None:
        """Begin the stream."""
        self._emit(yaml.StreamStartEvent(encoding=self._encoding))

    def document_start(self) -> None:
        """Begin a document with no version or tag directives."""
        self._emit(yaml.DocumentStartEvent(explicit=False))

    def mapping_start(self) -> None:
        """Open a block mapping."""
        self._emit(yaml.MappingStartEvent(None, MAP_TAG, True, flow_style=False))

    def key(self, key: str) -> None:
        """Write a mapping key whose value follows as a separate node."""
        self.key_value(key, None)

    def key_value(self, key: str, value: str | None) -> None:
        """Write ``key`` and, when given, its scalar ``value``."""
        self._scalar(key)
        if value is not None:
            self._scalar(value)

    def mapping_end(self) -> None:
        """Close the innermost mapping."""
        self._emit(yaml.MappingEndEvent())

    def document_end(self) -> None:
        """End the document with an explicit end marker."""
        self._emit(yaml.DocumentEndEvent(explicit=True))

    def stream_end(self) -> None:
        """End the stream and flush all pending output."""
        self._emit(yaml.StreamEndEvent())