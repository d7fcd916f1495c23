# comments in English
from __future__ import annotations

import asyncio
import threading
from enum import Enum
from typing import Optional, Set


class WaitResult(str, Enum):
    READY = "ready"
    TIMED_OUT = "timed-out"


class ReadinessLatch:
    """One-way latch: starts unset, becomes set on the first `signal()` and stays set.

    Waiters are parked on futures owned by their own event loop, so a signal
    coming from another thread (a sync view run in an executor) or another loop
    (Django's async_to_sync adapters) still wakes them. There is no `reset()`.
    """

    def __init__(self) -> None:
        self._set = False
        self._lock = threading.Lock()
        self._waiters: Set[asyncio.Future] = set()

    @property
    def is_set(self) -> bool:
        return self._set

    def signal(self) -> bool:
        """Set the latch and release every pending waiter.

        Returns False when the latch was already set (no-op).
        """
        with self._lock:
            if self._set:
                return False
            self._set = True
            waiters, self._waiters = self._waiters, set()

        try:
            current: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current = None

        for fut in waiters:
            loop = fut.get_loop()
            if loop is current:
                _release(fut)
            elif not loop.is_closed():
                loop.call_soon_threadsafe(_release, fut)
        return True

    async def wait(self, timeout: Optional[float] = None) -> WaitResult:
        """Suspend the calling task until the latch is set or `timeout` seconds elapse."""
        if self._set:
            return WaitResult.READY

        fut = asyncio.get_running_loop().create_future()
        with self._lock:
            if self._set:
                return WaitResult.READY
            self._waiters.add(fut)

        try:
            await asyncio.wait_for(fut, timeout)
        except asyncio.TimeoutError:
            return WaitResult.TIMED_OUT
        finally:
            with self._lock:
                self._waiters.discard(fut)
        return WaitResult.READY

    def __repr__(self) -> str:
        state = "set" if self._set else f"unset, {len(self._waiters)} waiting"
        return f"<ReadinessLatch {state}>"


def _release(fut: asyncio.Future) -> None:
    if not fut.done():
        fut.set_result(None)
