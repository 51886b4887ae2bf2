"""Byte-order helpers for fixed-width unsigned integers."""

from __future__ import annotations

import struct

_U16_LE = struct.Struct("<H")
_U32_LE = struct.Struct("<I")
_U16_BE = struct.Struct(">H")
_U32_BE = struct.Struct(">I")


def bswap16(value: int) -> int:
    """Reverse the byte order of a 16-bit value."""
    value &= 0xFFFF
    return ((value >> 8) | (value << 8)) & 0xFFFF


def bswap32(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    value &= 0xFFFFFFFF
    return int.from_bytes(value.to_bytes(4, "little"), "big")


def bswap64(value: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    value &= 0xFFFFFFFFFFFFFFFF
    return int.from_bytes(value.to_bytes(8, "little"), "big")


def lw_le(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a little-endian 32-bit word from ``buffer`` at ``offset``."""
    return _U32_LE.unpack_from(buffer, offset)[0]


def lh_le(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a little-endian 16-bit half-word from ``buffer`` at ``offset``."""
    return _U16_LE.unpack_from(buffer, offset)[0]


def lw_be(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a big-endian 32-bit word from ``buffer`` at ``offset``."""
    return _U32_BE.unpack_from(buffer, offset)[0]


def lh_be(buffer: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read a big-endian 16-bit half-word from ``buffer`` at ``offset``."""
    return _U16_BE.unpack_from(buffer, offset)[0]


def sw_le(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Store ``value`` as a little-endian 32-bit word into ``buffer``."""
    _U32_LE.pack_into(buffer, offset, value & 0xFFFFFFFF)


def sh_le(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Store ``value`` as a little-endian 16-bit half-word into ``buffer``."""
    _U16_LE.pack_into(buffer, offset, value & 0xFFFF)


def sw_be(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Store ``value`` as a big-endian 32-bit word into ``buffer``."""
    _U32_BE.pack_into(buffer, offset, value & 0xFFFFFFFF)


def sh_be(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Store ``value`` as a big-endian 16-bit half-word into ``buffer``."""
    _U16_BE.pack_into(buffer, offset, value & 0xFFFF)