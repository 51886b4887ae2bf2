"""Binary layouts of the signed executable container headers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from vitakit.sce_elf_defs import (
    SceStruct,
    _bytes,
    _nested,
    _u16,
    _u32,
    _u64,
)

HEADER_LEN = 0x1000
SCE_MAGIC = int.from_bytes(b"SCE\0", "little")


class Compression(enum.IntEnum):
    """Segment compression marker."""

    UNCOMPRESSED = 1
    COMPRESSED = 2


class Encryption(enum.IntEnum):
    """Segment encryption marker."""

    ENCRYPTED = 1
    PLAIN = 2


@dataclass
class SceHeader(SceStruct):
    """Top-level container header."""

    magic: int = _u32(SCE_MAGIC)
    version: int = _u32(3)
    sdk_type: int = _u16()
    header_type: int = _u16(1)
    metadata_offset: int = _u32()
    header_len: int = _u64()
    elf_filesize: int = _u64()
    self_filesize: int = _u64()
    unknown: int = _u64()
    self_offset: int = _u64()
    appinfo_offset: int = _u64()
    elf_offset: int = _u64()
    phdr_offset: int = _u64()
    shdr_offset: int = _u64()
    section_info_offset: int = _u64()
    sceversion_offset: int = _u64()
    controlinfo_offset: int = _u64()
    controlinfo_size: int = _u64()
    padding: int = _u64()


@dataclass
class AppInfo(SceStruct):
    """Application information block."""

    authid: int = _u64()
    vendor_id: int = _u32()
    self_type: int = _u32()
    version: int = _u64()
    padding: int = _u64()


@dataclass
class SceVersion(SceStruct):
    """Version block."""

    unk1: int = _u32()
    unk2: int = _u32()
    unk3: int = _u32()
    unk4: int = _u32()


@dataclass
class ControlInfo(SceStruct):
    """Common head of every control information block."""

    type: int = _u32()
    size: int = _u32()
    unk: int = _u32()
    pad: int = _u32()


def _common(kind: int, owner: str):
    def make() -> ControlInfo:
        return ControlInfo(type=kind, size=_CONTROL_INFO_TYPES[owner].size())

    return make


@dataclass
class ControlInfo4(SceStruct):
    """ELF digest and minimum firmware."""

    common: ControlInfo = _nested(ControlInfo, _common(4, "ControlInfo4"))
    constant: bytes = _bytes(0x14)
    elf_digest: bytes = _bytes(0x20)
    padding: int = _u32()
    min_required_fw: int = _u64()


@dataclass
class ControlInfo5(SceStruct):
    """NPDRM information."""

    common: ControlInfo = _nested(ControlInfo, _common(5, "ControlInfo5"))
    unk: bytes = _bytes(0x100)


@dataclass
class ControlInfo6(SceStruct):
    """Application settings and memory budget."""

    common: ControlInfo = _nested(ControlInfo, _common(6, "ControlInfo6"))
    is_used: int = _u32(1)
    attr: int = _u32()
    phycont_memsize: int = _u32()
    total_memsize: int = _u32()
    filehandles_limit: int = _u32()
    dir_max_level: int = _u32()
    encrypt_mount_max: int = _u32()
    redirect_mount_max: int = _u32()
    unk: bytes = _bytes(0xE0)


@dataclass
class ControlInfo7(SceStruct):
    """Shared secret."""

    common: ControlInfo = _nested(ControlInfo, _common(7, "ControlInfo7"))
    unk: bytes = _bytes(0x40)


_CONTROL_INFO_TYPES: dict[str, type[SceStruct]] = {
    "ControlInfo4": ControlInfo4,
    "ControlInfo5": ControlInfo5,
    "ControlInfo6": ControlInfo6,
    "ControlInfo7": ControlInfo7,
}


@dataclass
class SegmentInfo(SceStruct):
    """Location and encoding of one segment."""

    offset: int = _u64()
    length: int = _u64()
    compression: int = _u64(Compression.UNCOMPRESSED)
    encryption: int = _u64(Encryption.PLAIN)