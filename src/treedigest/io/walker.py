"""Depth-first directory walker producing ``FileEntry`` values lazily."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

from treedigest.errors import TraversalError
from treedigest.models import FileEntry


def walk(root: str | os.PathLike[str]) -> Generator[FileEntry, None, None]:
    """Yield ``root`` and everything below it, depth-first in lexical order.

    Symlinks are reported but never followed. Any entry that cannot be
    stat'ed or listed raises :class:`TraversalError`, ending the walk. The
    consumer may stop early by closing the generator. Pending paths live on
    an explicit stack, so tree depth is not bounded by the recursion limit.
    """

    pending = [Path(root)]
    while pending:
        path = pending.pop()
        entry = FileEntry(path=path, mode=_lstat(path))
        yield entry
        if entry.is_dir:
            # reversed so the lexically smallest child is popped first
            pending.extend(path / name for name in reversed(_listdir(path)))


def _listdir(path: Path) -> list[str]:
    try:
        return sorted(os.listdir(path))
    except OSError as exc:
        raise TraversalError(f"cannot list {path}: {exc.strerror or exc}", path=path) from exc


def _lstat(path: Path) -> int:
    try:
        return path.lstat().st_mode
    except OSError as exc:
        raise TraversalError(f"lstat {path}: {exc.strerror or exc}", path=path) from exc


__all__ = ["walk"]
