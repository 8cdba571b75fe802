"""File content reader used by both digesters."""

from __future__ import annotations

from pathlib import Path

from treedigest.errors import ReadError


def read_file(path: Path) -> bytes:
    """Return the full contents of ``path``."""
    try:
        with path.open("rb") as handle:
            return handle.read()
    except OSError as exc:
        raise ReadError(f"read {path}: {exc.strerror or exc}", path=path) from exc


__all__ = ["read_file"]
