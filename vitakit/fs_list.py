"""In-memory listing of a directory tree."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class FSListEntry:
    """A file or directory in a scanned tree.

    ``path_full`` joins the parent's path and ``name`` with "/". The root
    entry has no name.
    """

    path_full: str
    name: str | None = None
    is_dir: bool = False
    parent: FSListEntry | None = field(default=None, repr=False, compare=False)
    children: list[FSListEntry] = field(default_factory=list, repr=False)

    def walk_preorder(self) -> Iterator[FSListEntry]:
        """Yield this entry, then every descendant, parents before children."""
        stack = [self]
        while stack:
            entry = stack.pop()
            yield entry
            stack.extend(reversed(entry.children))

    def walk_postorder(self) -> Iterator[FSListEntry]:
        """Yield every descendant and then this entry, children before parents."""
        stack: list[tuple[FSListEntry, bool]] = [(self, False)]
        while stack:
            entry, expanded = stack.pop()
            if expanded:
                yield entry
                continue
            stack.append((entry, True))
            stack.extend((child, False) for child in reversed(entry.children))

    def child_by_name(self, name: str) -> FSListEntry | None:
        """The direct child called ``name``, or None."""
        return next((c for c in self.children if c.name == name), None)

    def find(self, path: str) -> FSListEntry | None:
        """The descendant at the "/"-separated relative ``path``, or None."""
        current: FSListEntry | None = self
        for part in path.split("/"):
            if current is None:
                return None
            current = current.child_by_name(part)
        return current


@dataclass
class FSListing:
    """Result of a scan: the root entry and counts of what was found."""

    root: FSListEntry
    dir_count: int = 0
    file_count: int = 0

    def __iter__(self) -> Iterator[FSListEntry]:
        return self.root.walk_preorder()


def scan(path: str | os.PathLike[str], depth: int | None = None) -> FSListing:
    """List the tree under ``path``.

    Subdirectories are descended into up to ``depth`` levels below the root
    (unlimited when None); deeper directories are listed and counted but left
    unopened. Children are ordered by name. Raises :class:`OSError` when the
    root cannot be opened or an entry cannot be examined.
    """
    root = FSListEntry(path_full=os.fspath(path), is_dir=True)
    listing = FSListing(root)
    _fill(root, listing, 0, depth, must_open=True)
    return listing


def _fill(
    entry: FSListEntry,
    listing: FSListing,
    level: int,
    depth: int | None,
    must_open: bool,
) -> None:
    try:
        with os.scandir(entry.path_full) as it:
            names = sorted(item.name for item in it)
    except OSError:
        if must_open:
            raise
        return
    for name in names:
        child = FSListEntry(path_full=f"{entry.path_full}/{name}", name=name, parent=entry)
        entry.children.append(child)
        mode = os.stat(child.path_full).st_mode
        if stat.S_ISDIR(mode):
            child.is_dir = True
            listing.dir_count += 1
            if depth is None or level + 1 <= depth:
                _fill(child, listing, level + 1, depth, must_open=False)
        elif stat.S_ISREG(mode):
            listing.file_count += 1