import pytest

from vitakit.sce_elf_defs import (
    PROCESS_PARAM_MAGIC,
    LibcParam,
    MallocForTlsReplace,
    MallocReplace,
    ModuleExports,
    ModuleImports,
    ModuleImportsShort,
    ModuleInfo,
    NewReplace,
    ProcessParamV5,
    ProcessParamV6,
)


@pytest.mark.parametrize(
    "cls, expected",
    [
        (ModuleInfo, 0x5C),
        (ModuleExports, 0x20),
        (ModuleImports, 0x34),
        (ModuleImportsShort, 0x24),
        (ProcessParamV5, 0x30),
        (ProcessParamV6, 0x34),
        (MallocReplace, 0x34),
        (NewReplace, 0x28),
        (MallocForTlsReplace, 0x18),
    ],
)
def test_sizes_match_layout(cls, expected):
    assert cls.size() == expected
    assert len(cls().pack()) == expected


def test_self_describing_size_fields_match():
    for cls in (ModuleExports, ModuleImports, ModuleImportsShort, ProcessParamV5,
                ProcessParamV6, MallocReplace, NewReplace, MallocForTlsReplace):
        assert cls().size == cls.size()


def test_libc_param_size_includes_nested_tables():
    expected = MallocReplace.size() + NewReplace.size() + MallocForTlsReplace.size() + 0x38 + 4
    assert LibcParam.size() == expected
    assert len(LibcParam().pack()) == expected


def test_module_info_roundtrip():
    info = ModuleInfo(attributes=7, name="SceTestModule", type=6,
                      module_nid=0xDEADBEEF, module_start=0x81000001)
    again = ModuleInfo.unpack(info.pack())
    assert again == info
    assert again.name == "SceTestModule"


def test_module_info_version_bytes():
    data = ModuleInfo().pack()
    assert data[2:4] == b"\x01\x01"


def test_module_info_name_offset_and_padding():
    data = ModuleInfo(name="abc").pack()
    assert data[4:7] == b"abc"
    assert data[7:31] == bytes(24)


def test_module_info_name_too_long():
    with pytest.raises(ValueError):
        ModuleInfo(name="x" * 28).pack()


def test_exports_pack_little_endian():
    data = ModuleExports(library_nid=0x11223344).pack()
    assert data[:2] == b"\x20\x00"
    assert data[16:20] == bytes([0x44, 0x33, 0x22, 0x11])


def test_imports_roundtrip():
    imports = ModuleImports(num_syms_funcs=3, library_nid=0xCAFEBABE,
                            func_nid_table=0x1000, tls_var_entry_table=0x2000)
    assert ModuleImports.unpack(imports.pack()) == imports


def test_imports_short_roundtrip():
    imports = ModuleImportsShort(num_syms_vars=2, var_entry_table=0x44)
    assert ModuleImportsShort.unpack(imports.pack()) == imports


def test_process_param_magic_bytes():
    data = ProcessParamV6().pack()
    assert data[4:8] == b"PSP2"
    assert ProcessParamV6.unpack(data).magic == PROCESS_PARAM_MAGIC


def test_process_param_signed_priority_roundtrip():
    param = ProcessParamV5(main_thread_priority=-5)
    assert ProcessParamV5.unpack(param.pack()).main_thread_priority == -5


def test_libc_param_roundtrip_with_nested():
    param = LibcParam(
        malloc_replace_table=MallocReplace(malloc=0x100, free=0x104),
        new_replace_table=NewReplace(operator_new=0x200),
        heap_size=0x300,
    )
    again = LibcParam.unpack(param.pack())
    assert again == param
    assert again.malloc_replace_table.free == 0x104


def test_libc_param_nested_first_in_layout():
    data = LibcParam().pack()
    assert MallocReplace.unpack(data) == MallocReplace()


def test_unpack_ignores_trailing_bytes():
    exports = ModuleExports(num_syms_funcs=4)
    assert ModuleExports.unpack(exports.pack() + b"\xff" * 8) == exports


def test_unpack_short_data_raises():
    with pytest.raises(ValueError):
        ModuleExports.unpack(bytes(ModuleExports.size() - 1))


def test_out_of_range_value_raises():
    with pytest.raises(ValueError):
        ModuleExports(num_syms_funcs=0x10000).pack()


def test_nested_wrong_type_raises():
    with pytest.raises(TypeError):
        LibcParam(new_replace_table=MallocReplace()).pack()