"""Data model for module export descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field

MODULE_NAME_MAX = 26  # 27-byte field including the terminating NUL


def _check_range(label: str, value: int, limit: int) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{label} must be between 0 and {limit:#x}, got {value!r}")


@dataclass
class ExportSymbol:
    """An exported function or variable and its NID."""

    name: str
    nid: int

    def __post_init__(self) -> None:
        _check_range("nid", self.nid, 0xFFFFFFFF)


@dataclass
class LibraryExport:
    """A library exported by a module."""

    name: str
    version: int = 1
    syscall: bool = False
    functions: list[ExportSymbol] = field(default_factory=list)
    variables: list[ExportSymbol] = field(default_factory=list)
    nid: int = 0

    def __post_init__(self) -> None:
        _check_range("version", self.version, 0xFFFFFFFF)
        _check_range("nid", self.nid, 0xFFFFFFFF)

    def function_count(self) -> int:
        """Number of exported functions."""
        return len(self.functions)

    def variable_count(self) -> int:
        """Number of exported variables."""
        return len(self.variables)


@dataclass
class VitaExport:
    """The export description of a whole module."""

    name: str
    is_default: bool = False
    ver_major: int = 1
    ver_minor: int = 1
    attributes: int = 0
    nid: int = 0
    is_process_image: bool = False
    is_image_module: bool = False
    bootstart: str | None = None
    start: str | None = None
    stop: str | None = None
    exit: str | None = None
    libs: list[LibraryExport] = field(default_factory=list)

    def __post_init__(self) -> None:
        encoded = self.name.encode("utf-8")
        if len(encoded) > MODULE_NAME_MAX:
            raise ValueError(
                f"module name '{self.name}' is longer than {MODULE_NAME_MAX} bytes"
            )
        _check_range("ver_major", self.ver_major, 0xFF)
        _check_range("ver_minor", self.ver_minor, 0xFF)
        _check_range("attributes", self.attributes, 0xFFFF)
        _check_range("nid", self.nid, 0xFFFFFFFF)

    def library_count(self) -> int:
        """Number of exported libraries."""
        return len(self.libs)