# vitakit

Python building blocks for console homebrew build tooling: binary layouts of
module and executable-container structures, NID hashing, a small YAML tree
reader and writer, and a directory lister.

## Modules

- `vitakit.endian`: byte swapping (`bswap16`, `bswap32`, `bswap64`) and
  little/big-endian reads and writes of 16- and 32-bit words at an offset in a
  byte buffer (`lw_le`, `lh_le`, `lw_be`, `lh_be`, `sw_le`, `sh_le`, `sw_be`,
  `sh_be`). Stored values are masked to their width.
- `vitakit.sha256`: SHA-256 over a sequence of chunks (`sha256_vector`), of a
  file (`sha256_file`), and 32-bit NIDs taken from the first four digest bytes
  read big-endian (`sha256_32_vector`; `sha256_32_file` hashes the file's
  digest once more). `hmac_sha256` and `hmac_sha256_vector` compute standard
  HMAC-SHA256; the vector form accepts at most five chunks and raises
  `ValueError` beyond that.
- `vitakit.vita_export`: dataclasses describing a module's exports
  (`VitaExport`, `LibraryExport`, `ExportSymbol`), with range checks on NIDs,
  versions and attributes and a 26-byte limit on the module name.
- `vitakit.sce_elf_defs`: fixed-layout, little-endian, unpadded structures
  built on `SceStruct` (`pack()`, `unpack(data)`, `size()`): `ModuleInfo`,
  `ModuleExports`, `ModuleImports`, `ModuleImportsShort`, `ProcessParamV5`,
  `ProcessParamV6`, `MallocReplace`, `NewReplace`, `MallocForTlsReplace` and
  `LibcParam`.
- `vitakit.self_defs`: container header structures in the same style:
  `SceHeader`, `AppInfo`, `SceVersion`, `ControlInfo`, `ControlInfo4` to
  `ControlInfo7`, `SegmentInfo`, and the `Compression` and `Encryption` enums.
- `vitakit.varray`: `VArray`, a list-like container with optional
  init/destroy hooks and binary-search insertion and lookup driven by
  three-way comparators (`sorted_insert`, `sorted_search`,
  `sorted_search_or_insert`).
- `vitakit.yamltree`: `parse_yaml_stream` turns YAML text or a file object into
  a `YamlTree` of `ScalarNode`, `SequenceNode` and `MappingNode` objects, each
  with a zero-based `Position`. Aliases and malformed input raise
  `YamlTreeError`.
- `vitakit.yamltreeutil`: reading typed values from tree nodes
  (`process_32bit_integer`, `process_boolean`, `process_bool`,
  `process_string`), iterating mappings and sequences, and type tests. Wrong
  node kinds or bad values raise `YamlValueError`.
- `vitakit.yamlemitter`: `YamlEmitter`, an event-by-event writer for
  block-style mappings of plain scalars.
- `vitakit.fs_list`: `scan(path, depth)` lists a directory tree into
  `FSListEntry` objects (children ordered by name) and returns an `FSListing`
  with directory and file counts; entries can be walked in pre- or post-order
  and searched by name or relative path.

## Install

```
pip install vitakit
```

For running the tests:

```
pip install "vitakit[test]"
pytest
```

## Example

```python
from vitakit.sce_elf_defs import ModuleInfo
from vitakit.sha256 import sha256_32_vector
from vitakit.yamltree import parse_yaml_stream
from vitakit.yamltreeutil import process_32bit_integer

nid = sha256_32_vector([b"sceKernelGetThreadId"])

info = ModuleInfo(name="homebrew", module_nid=nid)
raw = info.pack()
assert len(raw) == ModuleInfo.size() == 0x5C
assert ModuleInfo.unpack(raw) == info

tree = parse_yaml_stream("nid: 0x1234\n")
key, value = tree[0].pairs[0]
assert process_32bit_integer(value) == 0x1234
```

## What it does not do

vitakit is a library only; it installs no commands. It describes structures
and reads and writes YAML, but it does not read or link ELF files, build or
sign executable containers, compress segments, generate stub libraries, write
parameter files or pack install archives. Export descriptions are plain
dataclasses; nothing here loads them from a YAML file.