"""Presentation helpers for digest maps."""

from __future__ import annotations

from collections.abc import Mapping


def format_digest_lines(digests: Mapping[str, bytes]) -> list[str]:
    """Return ``"<hex digest> <path>"`` lines sorted by path."""
    return [f"{digests[path].hex()} {path}" for path in sorted(digests)]


def hex_digests(digests: Mapping[str, bytes]) -> dict[str, str]:
    return {path: digests[path].hex() for path in sorted(digests)}


__all__ = ["format_digest_lines", "hex_digests"]
