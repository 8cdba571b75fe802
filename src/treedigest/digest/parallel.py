"""Concurrent fan-out digester.

One trio task walks the tree and starts a hashing task per regular file;
results flow to the collector over an unbuffered memory channel. The first
failed result raises the cancellation signal, which stops the walk and makes
every pending send give up, so the nursery can always unwind. A closer task
shuts the result channel once the walk and all hashing tasks are finished.
"""

from __future__ import annotations

import functools
import logging
import math
import os
from pathlib import Path
from typing import Callable, Optional

import trio

from treedigest.digest.signals import CancellationSignal, LivenessCounter
from treedigest.errors import DigestError, WalkCancelled
from treedigest.io.reader import read_file
from treedigest.io.walker import walk
from treedigest.models import DigestMap, DigestResult, Hasher, Reader, Walker
from treedigest.util.hashing import md5_digest

logger = logging.getLogger(__name__)

HashFile = Callable[[Path], DigestResult]

_WALK_DONE = object()


def digest_all_parallel(
    root: str | os.PathLike[str],
    *,
    walker: Walker = walk,
    reader: Reader = read_file,
    hasher: Hasher = md5_digest,
    liveness: LivenessCounter | None = None,
) -> DigestMap:
    """Synchronous entry point; see :func:`digest_all_parallel_async`."""

    return trio.run(
        functools.partial(
            digest_all_parallel_async,
            root,
            walker=walker,
            reader=reader,
            hasher=hasher,
            liveness=liveness,
        )
    )


async def digest_all_parallel_async(
    root: str | os.PathLike[str],
    *,
    walker: Walker = walk,
    reader: Reader = read_file,
    hasher: Hasher = md5_digest,
    liveness: LivenessCounter | None = None,
) -> DigestMap:
    """Digest every regular file under ``root`` concurrently.

    Returns the complete map, or raises the first error the collector
    observes; partial results are discarded. Every task started here has
    finished by the time this coroutine returns or raises. Pass ``liveness``
    to inspect the outstanding-work counter afterwards.
    """

    done = CancellationSignal()
    if liveness is None:
        liveness = LivenessCounter()

    async with trio.open_nursery() as nursery:
        try:
            results, errors = sum_files(
                nursery,
                done,
                Path(root),
                liveness=liveness,
                walker=walker,
                reader=reader,
                hasher=hasher,
            )
            digests, error = await _collect(results, errors, done)
        finally:
            done.cancel()

    if error is not None:
        logger.debug("Parallel digest of %s FAILED: %s", root, error)
        raise error
    logger.debug("Parallel digest of %s SUCCEEDED files=%s", root, len(digests))
    return digests


def sum_files(
    nursery: trio.Nursery,
    done: CancellationSignal,
    root: Path,
    *,
    liveness: LivenessCounter,
    walker: Walker,
    reader: Reader,
    hasher: Hasher,
) -> tuple[trio.MemoryReceiveChannel, trio.MemoryReceiveChannel]:
    """Start walking ``root`` in ``nursery``.

    Returns the channel of per-file results and a channel that receives
    exactly one walk outcome (``None`` or the error that ended the walk).
    """

    results_send, results_receive = trio.open_memory_channel(0)
    # capacity 1 so publishing the walk outcome never blocks
    errors_send, errors_receive = trio.open_memory_channel(1)
    hash_file = functools.partial(_hash_file, reader=reader, hasher=hasher)
    # one thread per pending read or walk step; no cap on the fan-out
    limiter = trio.CapacityLimiter(math.inf)

    nursery.start_soon(
        _produce, nursery, root, walker, hash_file, results_send, errors_send, done, liveness, limiter
    )
    return results_receive, errors_receive


async def _produce(
    nursery: trio.Nursery,
    root: Path,
    walker: Walker,
    hash_file: HashFile,
    results: trio.MemorySendChannel,
    errors: trio.MemorySendChannel,
    done: CancellationSignal,
    liveness: LivenessCounter,
    limiter: trio.CapacityLimiter,
) -> None:
    # the walk holds its own slot so the closer cannot fire before it returns
    liveness.add()
    nursery.start_soon(_close_when_idle, results, liveness)

    outcome: Optional[DigestError] = None
    entries = walker(root)
    try:
        while True:
            # directory listing blocks, so each step runs off the event loop
            entry = await trio.to_thread.run_sync(next, entries, _WALK_DONE, limiter=limiter)
            if entry is _WALK_DONE:
                break
            if entry.is_regular:
                liveness.add()
                nursery.start_soon(_sum_file, entry.path, hash_file, results, done, liveness, limiter)
            if done.cancelled:
                raise WalkCancelled(f"walk of {root} cancelled", path=root)
    except DigestError as exc:
        outcome = exc
    finally:
        entries.close()

    logger.debug("Walk of %s finished: %s", root, outcome or "ok")
    errors.send_nowait(outcome)
    liveness.done()


async def _sum_file(
    path: Path,
    hash_file: HashFile,
    results: trio.MemorySendChannel,
    done: CancellationSignal,
    liveness: LivenessCounter,
    limiter: trio.CapacityLimiter,
) -> None:
    try:
        # reads are not abandoned on cancellation; they finish and are dropped
        result = await trio.to_thread.run_sync(hash_file, path, limiter=limiter)
        with done.guard() as scope:
            await results.send(result)
        if scope.cancelled_caught:
            logger.debug("Dropped result for %s after cancellation", path)
    finally:
        liveness.done()


async def _close_when_idle(results: trio.MemorySendChannel, liveness: LivenessCounter) -> None:
    await liveness.wait()
    await results.aclose()


async def _collect(
    results: trio.MemoryReceiveChannel,
    errors: trio.MemoryReceiveChannel,
    done: CancellationSignal,
) -> tuple[DigestMap, Optional[DigestError]]:
    digests: DigestMap = {}
    async for result in results:
        if result.error is not None:
            done.cancel()
            return {}, result.error
        digests[result.path] = result.digest

    # the walk outcome is published before the closer can run
    return digests, errors.receive_nowait()


def _hash_file(path: Path, *, reader: Reader, hasher: Hasher) -> DigestResult:
    try:
        data = reader(path)
    except DigestError as exc:
        return DigestResult(path=str(path), digest=b"", error=exc)
    return DigestResult(path=str(path), digest=hasher(data))


__all__ = ["digest_all_parallel", "digest_all_parallel_async", "sum_files"]
