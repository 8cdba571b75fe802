"""Coordination primitives for the concurrent digest pipeline."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import trio


class CancellationSignal:
    """Write-once broadcast flag meaning "stop sending and stop starting work".

    Raising it is idempotent and it can never be cleared. Code that may block
    on a send wraps the send in :meth:`guard`, whose cancel scope is cancelled
    the moment the signal is raised.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._scopes: set[trio.CancelScope] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        for scope in list(self._scopes):
            scope.cancel()

    @contextmanager
    def guard(self) -> Iterator[trio.CancelScope]:
        """Run the block in a cancel scope tied to this signal."""
        scope = trio.CancelScope()
        if self._cancelled:
            scope.cancel()
        self._scopes.add(scope)
        try:
            with scope:
                yield scope
        finally:
            self._scopes.discard(scope)


class LivenessCounter:
    """Fan-in completion gate: counts outstanding work and wakes waiters at zero.

    The counter reaches zero exactly once; adding work afterwards is an error.
    """

    def __init__(self) -> None:
        self._count = 0
        self._idle = trio.Event()

    @property
    def count(self) -> int:
        return self._count

    def add(self, delta: int = 1) -> None:
        if self._idle.is_set():
            raise RuntimeError("LivenessCounter already reached zero")
        self._count += delta

    def done(self) -> None:
        if self._count <= 0:
            raise RuntimeError("LivenessCounter decremented below zero")
        self._count -= 1
        if self._count == 0:
            self._idle.set()

    async def wait(self) -> None:
        await self._idle.wait()


__all__ = ["CancellationSignal", "LivenessCounter"]
