"""Compute content digests for every regular file under a directory tree."""

from .digest import digest_all_parallel, digest_all_serial
from .errors import DigestError, ReadError, TraversalError, WalkCancelled
from .models import DigestMap, DigestResult, FileEntry

__version__ = "0.1.0"

__all__ = [
    "DigestError",
    "DigestMap",
    "DigestResult",
    "FileEntry",
    "ReadError",
    "TraversalError",
    "WalkCancelled",
    "digest_all_parallel",
    "digest_all_serial",
]
