"""Single-threaded walk, read and hash; the reference result for the pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from treedigest.io.reader import read_file
from treedigest.io.walker import walk
from treedigest.models import DigestMap, Hasher, Reader, Walker
from treedigest.util.hashing import md5_digest

logger = logging.getLogger(__name__)


def digest_all_serial(
    root: str | os.PathLike[str],
    *,
    walker: Walker = walk,
    reader: Reader = read_file,
    hasher: Hasher = md5_digest,
) -> DigestMap:
    """Return a mapping from file path to digest for every regular file under ``root``.

    The first traversal or read error is raised and no partial map is returned.
    """

    digests: DigestMap = {}
    for entry in walker(Path(root)):
        if not entry.is_regular:
            continue
        digests[str(entry.path)] = hasher(reader(entry.path))

    logger.debug("Serial digest of %s complete files=%s", root, len(digests))
    return digests


__all__ = ["digest_all_serial"]
