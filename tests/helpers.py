from __future__ import annotations

import hashlib
import stat
from collections.abc import Generator, Iterable, Mapping
from pathlib import Path

from treedigest.errors import DigestError, ReadError
from treedigest.io.reader import read_file
from treedigest.models import FileEntry

SCENARIO_FILES: dict[str, str] = {"a.txt": "hello", "b/b.txt": "world"}


def build_tree(root: Path, files: Mapping[str, str | bytes]) -> None:
    """Create ``files`` (relative path -> contents) under ``root``."""

    for relative, contents in files.items():
        dest = root / relative
        dest.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, bytes):
            dest.write_bytes(contents)
        else:
            dest.write_text(contents, encoding="utf-8")


def md5(data: str | bytes) -> bytes:
    raw = data.encode("utf-8") if isinstance(data, str) else data
    return hashlib.md5(raw).digest()


class FailingReader:
    """Reader that raises ``ReadError`` for files whose name is in ``unreadable``."""

    def __init__(self, unreadable: Iterable[str]) -> None:
        self.unreadable = set(unreadable)
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> bytes:
        self.calls.append(path)
        if path.name in self.unreadable:
            raise ReadError(f"read {path}: permission denied", path=path)
        return read_file(path)


class ScriptedWalker:
    """Walker yielding a fixed list of regular-file entries, optionally ending in an error.

    Records how many entries were handed out and whether the consumer closed
    the walk early.
    """

    def __init__(self, names: Iterable[str], *, error: DigestError | None = None) -> None:
        self.names = list(names)
        self.error = error
        self.visited = 0
        self.closed_early = False

    def __call__(self, root: Path) -> Generator[FileEntry, None, None]:
        try:
            for name in self.names:
                self.visited += 1
                yield FileEntry(path=root / name, mode=stat.S_IFREG | 0o644)
        except GeneratorExit:
            self.closed_early = True
            raise
        if self.error is not None:
            raise self.error


def build_deep_tree(root: Path, depth: int) -> Path:
    """Nest ``depth`` directories named ``a`` under ``root`` with one file at the bottom."""

    bottom = root
    for _ in range(depth):
        bottom = bottom / "a"
        bottom.mkdir()
    leaf = bottom / "leaf.txt"
    leaf.write_text("deep", encoding="utf-8")
    return leaf


def remove_deep_tree(root: Path, depth: int) -> None:
    """Undo :func:`build_deep_tree` bottom-up, without recursing per level."""

    bottom = root.joinpath(*(["a"] * depth))
    (bottom / "leaf.txt").unlink(missing_ok=True)
    for level in range(depth, 0, -1):
        root.joinpath(*(["a"] * level)).rmdir()
