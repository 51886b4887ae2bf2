"""Binary layouts of module info, export/import tables and process parameters.

Every structure is laid out little-endian with no padding, as the target sees it.
"""

from __future__ import annotations

import dataclasses
import functools
import struct
from dataclasses import dataclass, field
from typing import Any, TypeVar

PROCESS_PARAM_NEW_FORMAT_VERSION = 0x1692000
"""Firmware versions below this one use the v5 process parameter layout."""

PROCESS_PARAM_MAGIC = int.from_bytes(b"PSP2", "little")

_S = TypeVar("_S", bound="SceStruct")


def _int(fmt: str, default: int = 0) -> Any:
    return field(default=default, metadata={"kind": "int", "fmt": fmt})


def _u8(default: int = 0) -> Any:
    return _int("B", default)


def _u16(default: int = 0) -> Any:
    return _int("H", default)


def _u32(default: int = 0) -> Any:
    return _int("I", default)


def _s32(default: int = 0) -> Any:
    return _int("i", default)


def _u64(default: int = 0) -> Any:
    return _int("Q", default)


def _bytes(length: int) -> Any:
    return field(
        default_factory=lambda: bytes(length),
        metadata={"kind": "bytes", "fmt": f"{length}s", "length": length},
    )


def _text(length: int, default: str = "") -> Any:
    return field(
        default=default,
        metadata={"kind": "text", "fmt": f"{length}s", "length": length},
    )


def _nested(struct_cls: type, factory: Any = None) -> Any:
    return field(
        default_factory=factory or struct_cls,
        metadata={"kind": "struct", "type": struct_cls},
    )


@functools.cache
def _layout(cls: type) -> tuple[struct.Struct, tuple[tuple[str, str, Any], ...]]:
    fmt = ["<"]
    specs = []
    for f in dataclasses.fields(cls):
        kind = f.metadata.get("kind")
        if kind is None:
            raise TypeError(f"{cls.__name__}.{f.name} has no binary layout")
        if kind == "struct":
            nested = f.metadata["type"]
            fmt.append(f"{nested.size()}s")
            specs.append((f.name, kind, nested))
        else:
            fmt.append(f.metadata["fmt"])
            specs.append((f.name, kind, f.metadata.get("length")))
    return struct.Struct("".join(fmt)), tuple(specs)


class SceStruct:
    """Base for fixed-layout structures that pack to and from bytes."""

    def pack(self) -> bytes:
        """Serialise the structure to its binary form."""
        layout, specs = _layout(type(self))
        values = []
        for name, kind, arg in specs:
            value = getattr(self, name)
            if kind == "struct":
                if not isinstance(value, arg):
                    raise TypeError(f"{name} must be a {arg.__name__}")
                value = value.pack()
            elif kind == "text":
                value = value.encode("utf-8")
                if len(value) > arg:
                    raise ValueError(f"{name} is longer than {arg} bytes")
            elif kind == "bytes":
                value = bytes(value)
                if len(value) > arg:
                    raise ValueError(f"{name} is longer than {arg} bytes")
            values.append(value)
        try:
            return layout.pack(*values)
        except struct.error as exc:
            raise ValueError(f"cannot pack {type(self).__name__}: {exc}") from exc

    @classmethod
    def unpack(cls: type[_S], data: bytes | bytearray | memoryview) -> _S:
        """Build the structure from the start of ``data``."""
        layout, specs = _layout(cls)
        if len(data) < layout.size:
            raise ValueError(
                f"{cls.__name__} needs {layout.size} bytes, got {len(data)}"
            )
        kwargs = {}
        for (name, kind, arg), value in zip(specs, layout.unpack_from(data)):
            if kind == "struct":
                value = arg.unpack(value)
            elif kind == "text":
                value = value.split(b"\0", 1)[0].decode("utf-8")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def size(cls) -> int:
        """Size of the binary form in bytes."""
        return _layout(cls)[0].size


@dataclass
class ModuleInfo(SceStruct):
    """Module information block (0x5C bytes)."""

    attributes: int = _u16()
    version: int = _u16(0x0101)
    name: str = _text(27)
    type: int = _u8()
    gp_value: int = _u32()
    export_top: int = _u32()
    export_end: int = _u32()
    import_top: int = _u32()
    import_end: int = _u32()
    module_nid: int = _u32()
    tls_start: int = _u32()
    tls_filesz: int = _u32()
    tls_memsz: int = _u32()
    module_start: int = _u32()
    module_stop: int = _u32()
    exidx_top: int = _u32()
    exidx_end: int = _u32()
    extab_top: int = _u32()
    extab_end: int = _u32()


@dataclass
class ModuleExports(SceStruct):
    """Library export table entry (0x20 bytes)."""

    size: int = _u16(0x20)
    version: int = _u16(0x1)
    flags: int = _u16(0x1)
    num_syms_funcs: int = _u16()
    num_syms_vars: int = _u32()
    num_syms_tls_vars: int = _u32()
    library_nid: int = _u32()
    library_name: int = _u32()
    nid_table: int = _u32()
    entry_table: int = _u32()


@dataclass
class ModuleImports(SceStruct):
    """Library import table entry (0x34 bytes)."""

    size: int = _u16(0x34)
    version: int = _u16(0x1)
    flags: int = _u16()
    num_syms_funcs: int = _u16()
    num_syms_vars: int = _u16()
    num_syms_tls_vars: int = _u16()
    reserved1: int = _u32()
    library_nid: int = _u32()
    library_name: int = _u32()
    reserved2: int = _u32()
    func_nid_table: int = _u32()
    func_entry_table: int = _u32()
    var_nid_table: int = _u32()
    var_entry_table: int = _u32()
    tls_var_nid_table: int = _u32()
    tls_var_entry_table: int = _u32()


@dataclass
class ModuleImportsShort(SceStruct):
    """Short library import table entry (0x24 bytes)."""

    size: int = _u16(0x24)
    version: int = _u16(0x1)
    flags: int = _u16()
    num_syms_funcs: int = _u16()
    num_syms_vars: int = _u16()
    num_syms_tls_vars: int = _u16()
    library_nid: int = _u32()
    library_name: int = _u32()
    func_nid_table: int = _u32()
    func_entry_table: int = _u32()
    var_nid_table: int = _u32()
    var_entry_table: int = _u32()


@dataclass
class ProcessParamV5(SceStruct):
    """Process parameters for older firmware (0x30 bytes)."""

    size: int = _u32(0x30)
    magic: int = _u32(PROCESS_PARAM_MAGIC)
    version: int = _u32(5)
    fw_version: int = _u32()
    main_thread_name: int = _u32()
    main_thread_priority: int = _s32()
    main_thread_stacksize: int = _u32()
    main_thread_attribute: int = _u32()
    process_name: int = _u32()
    process_preload_disabled: int = _u32()
    main_thread_cpu_affinity_mask: int = _u32()
    sce_libc_param: int = _u32()


@dataclass
class ProcessParamV6(SceStruct):
    """Process parameters for newer firmware (0x34 bytes)."""

    size: int = _u32(0x34)
    magic: int = _u32(PROCESS_PARAM_MAGIC)
    version: int = _u32(6)
    fw_version: int = _u32()
    main_thread_name: int = _u32()
    main_thread_priority: int = _s32()
    main_thread_stacksize: int = _u32()
    main_thread_attribute: int = _u32()
    process_name: int = _u32()
    process_preload_disabled: int = _u32()
    main_thread_cpu_affinity_mask: int = _u32()
    sce_libc_param: int = _u32()
    unk: int = _u32()


@dataclass
class MallocReplace(SceStruct):
    """Replacement allocator entry points (0x34 bytes)."""

    size: int = _u32(0x34)
    unk_0x4: int = _u32(1)
    malloc_init: int = _u32()
    malloc_term: int = _u32()
    malloc: int = _u32()
    free: int = _u32()
    calloc: int = _u32()
    realloc: int = _u32()
    memalign: int = _u32()
    reallocalign: int = _u32()
    malloc_stats: int = _u32()
    malloc_stats_fast: int = _u32()
    malloc_usable_size: int = _u32()


@dataclass
class NewReplace(SceStruct):
    """Replacement new/delete operators (0x28 bytes)."""

    size: int = _u32(0x28)
    unk_0x4: int = _u32(1)
    operator_new: int = _u32()
    operator_new_nothrow: int = _u32()
    operator_new_arr: int = _u32()
    operator_new_arr_nothrow: int = _u32()
    operator_delete: int = _u32()
    operator_delete_nothrow: int = _u32()
    operator_delete_arr: int = _u32()
    operator_delete_arr_nothrow: int = _u32()


@dataclass
class MallocForTlsReplace(SceStruct):
    """Replacement TLS allocator entry points (0x18 bytes)."""

    size: int = _u32(0x18)
    unk_0x4: int = _u32(1)
    malloc_init_for_tls: int = _u32()
    malloc_term_for_tls: int = _u32()
    malloc_for_tls: int = _u32()
    free_for_tls: int = _u32()


@dataclass
class LibcParam(SceStruct):
    """C library parameters, preceded by the replacement tables."""

    malloc_replace_table: MallocReplace = _nested(MallocReplace)
    new_replace_table: NewReplace = _nested(NewReplace)
    malloc_for_tls_replace_table: MallocForTlsReplace = _nested(MallocForTlsReplace)
    size: int = _u32(0x38)
    unk_0x04: int = _u32()
    heap_size: int = _u32()
    default_heap_size: int = _u32()
    heap_extended_alloc: int = _u32()
    heap_delayed_alloc: int = _u32()
    fw_version: int = _u32()
    unk_0x1C: int = _u32(9)
    malloc_replace: int = _u32()
    new_replace: int = _u32()
    heap_initial_size: int = _u32()
    heap_unit_1mb: int = _u32()
    heap_detect_overrun: int = _u32()
    malloc_for_tls_replace: int = _u32()
    default_heap_size_value: int = _u32(0x40000)