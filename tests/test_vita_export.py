import pytest

from vitakit.vita_export import ExportSymbol, LibraryExport, VitaExport


def _library():
    return LibraryExport(
        name="MyLib",
        functions=[ExportSymbol("f1", 1), ExportSymbol("f2", 2), ExportSymbol("f3", 3)],
        variables=[ExportSymbol("v1", 10)],
        nid=0x1234,
    )


def test_library_counts():
    lib = _library()
    assert lib.function_count() == 3
    assert lib.variable_count() == 1


def test_empty_library_counts():
    lib = LibraryExport(name="Empty")
    assert lib.function_count() == 0
    assert lib.variable_count() == 0
    assert lib.version == 1


def test_module_library_count():
    module = VitaExport(name="homebrew", libs=[_library(), LibraryExport(name="Other")])
    assert module.library_count() == 2
    assert [lib.name for lib in module.libs] == ["MyLib", "Other"]


def test_module_defaults():
    module = VitaExport(name="homebrew")
    assert module.library_count() == 0
    assert module.start is None
    assert module.is_default is False


def test_name_length_limit():
    assert VitaExport(name="a" * 26).name == "a" * 26
    with pytest.raises(ValueError):
        VitaExport(name="a" * 27)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"ver_major": 256},
        {"ver_minor": -1},
        {"attributes": 0x10000},
        {"nid": 1 << 32},
    ],
)
def test_module_field_ranges(kwargs):
    with pytest.raises(ValueError):
        VitaExport(name="m", **kwargs)


def test_symbol_nid_range():
    assert ExportSymbol("ok", 0xFFFFFFFF).nid == 0xFFFFFFFF
    with pytest.raises(ValueError):
        ExportSymbol("bad", 1 << 32)


def test_library_nid_range():
    with pytest.raises(ValueError):
        LibraryExport(name="bad", nid=-1)