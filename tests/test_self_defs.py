import pytest

from vitakit.self_defs import (
    HEADER_LEN,
    AppInfo,
    Compression,
    ControlInfo,
    ControlInfo4,
    ControlInfo5,
    ControlInfo6,
    ControlInfo7,
    Encryption,
    SceHeader,
    SceVersion,
    SegmentInfo,
)


def test_header_magic_bytes():
    data = SceHeader().pack()
    assert data[:4] == b"SCE\0"
    assert data[4:8] == b"\x03\x00\x00\x00"


def test_header_fits_in_header_area():
    assert SceHeader.size() < HEADER_LEN
    assert len(SceHeader().pack()) == SceHeader.size()


def test_header_roundtrip():
    header = SceHeader(header_len=HEADER_LEN, elf_filesize=12345,
                       self_filesize=67890, controlinfo_size=0x10)
    assert SceHeader.unpack(header.pack()) == header


def test_appinfo_roundtrip():
    info = AppInfo(authid=0x2F00000000000001, vendor_id=0, self_type=8,
                   version=0x1000000000000)
    assert AppInfo.unpack(info.pack()) == info


def test_version_roundtrip():
    version = SceVersion(unk1=1, unk2=0x10, unk3=0x10, unk4=0)
    assert SceVersion.unpack(version.pack()) == version


def test_control_info_sizes_compose():
    common = ControlInfo.size()
    assert ControlInfo4.size() == common + 0x14 + 0x20 + 4 + 8
    assert ControlInfo5.size() == common + 0x100
    assert ControlInfo6.size() == common + 8 * 4 + 0xE0
    assert ControlInfo7.size() == common + 0x40


@pytest.mark.parametrize(
    "cls, kind",
    [(ControlInfo4, 4), (ControlInfo5, 5), (ControlInfo6, 6), (ControlInfo7, 7)],
)
def test_control_info_default_common(cls, kind):
    block = cls()
    assert block.common.type == kind
    assert block.common.size == cls.size()


def test_control_info6_roundtrip():
    block = ControlInfo6(attr=0x80000, phycont_memsize=0x400000,
                         total_memsize=0x10000000, filehandles_limit=64)
    again = ControlInfo6.unpack(block.pack())
    assert again == block
    assert again.is_used == 1


def test_control_info4_digest_roundtrip():
    digest = bytes(range(32))
    block = ControlInfo4(elf_digest=digest, min_required_fw=0x3600000)
    again = ControlInfo4.unpack(block.pack())
    assert again.elf_digest == digest
    assert again.min_required_fw == 0x3600000


def test_control_info_digest_too_long():
    with pytest.raises(ValueError):
        ControlInfo4(elf_digest=bytes(33)).pack()


def test_segment_info_markers_roundtrip():
    seg = SegmentInfo(offset=0x1000, length=0x200,
                      compression=Compression.COMPRESSED,
                      encryption=Encryption.PLAIN)
    again = SegmentInfo.unpack(seg.pack())
    assert again.compression == Compression.COMPRESSED
    assert again.encryption == Encryption.PLAIN
    assert again.length == 0x200


def test_segment_info_default_markers():
    again = SegmentInfo.unpack(SegmentInfo().pack())
    assert Compression(again.compression) is Compression.UNCOMPRESSED
    assert Encryption(again.encryption) is Encryption.PLAIN


def test_short_header_data_raises():
    with pytest.raises(ValueError):
        SceHeader.unpack(b"SCE\0")