"""Error taxonomy shared by the sequential and concurrent digesters."""

from __future__ import annotations

from pathlib import Path


class DigestError(RuntimeError):
    """Base class for failures that abort a digest run."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TraversalError(DigestError):
    """Raised when an entry of the tree cannot be accessed during the walk."""


class ReadError(DigestError):
    """Raised when a regular file is present but its contents cannot be read."""


class WalkCancelled(DigestError):
    """Raised inside the producer when the walk is aborted by the cancellation signal."""


__all__ = ["DigestError", "ReadError", "TraversalError", "WalkCancelled"]
