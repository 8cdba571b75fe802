"""Value objects passed between the walker, the hashing units and the collector."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Generator

from treedigest.errors import DigestError

DigestMap = Dict[str, bytes]
Hasher = Callable[[bytes], bytes]
Reader = Callable[[Path], bytes]
Walker = Callable[[Path], Generator["FileEntry", None, None]]


@dataclass(frozen=True)
class FileEntry:
    """A single entry yielded by the tree walker."""

    path: Path
    mode: int

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)


@dataclass(frozen=True)
class DigestResult:
    """Outcome of hashing one file.

    When ``error`` is set the ``digest`` is empty and must be ignored.
    """

    path: str
    digest: bytes
    error: DigestError | None = None


__all__ = ["DigestMap", "DigestResult", "FileEntry", "Hasher", "Reader", "Walker"]
