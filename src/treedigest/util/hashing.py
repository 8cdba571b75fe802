"""Pluggable digest functions mapping a byte buffer to a fixed-size digest."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping

from treedigest.models import Hasher


def md5_digest(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of ``data``."""
    return hashlib.md5(data).digest()


def sha1_digest(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


HASHERS: Mapping[str, Hasher] = {
    "md5": md5_digest,
    "sha1": sha1_digest,
    "sha256": sha256_digest,
}


def get_hasher(name: str) -> Hasher:
    """Look up a digest function by algorithm name (case-insensitive)."""
    try:
        return HASHERS[name.lower()]
    except KeyError as exc:
        known = ", ".join(sorted(HASHERS))
        raise ValueError(f"Unsupported digest algorithm {name!r}; expected one of: {known}") from exc


__all__ = ["HASHERS", "get_hasher", "md5_digest", "sha1_digest", "sha256_digest"]
