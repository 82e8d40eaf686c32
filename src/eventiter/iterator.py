#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asynchronous iteration over values pushed by an event emitter.

An ``EventIterator`` registers one listener on an emitter and buffers every
accepted value until the consumer pulls it with ``async for`` or ``next()``.
It stops when told to, when a limit of accepted values has been delivered, or
when no value has been accepted for the idle period.

Usage:
    async with EventIterator(emitter, "message", {"limit": 10, "idle": 5.0}) as messages:
        async for message in messages:
            handle(message)

Python's ``async for`` calls no cleanup hook on ``break``, so leaving the loop
early should go through ``async with`` (or ``contextlib.aclosing``) to detach
the listener.
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from eventiter.errors import ConcurrentNextError
from eventiter.listeners import ListenerCeiling
from eventiter.options import EventIteratorFilter, EventIteratorOptions
from eventiter.protocol import EventSource
from eventiter.types import DONE, EndReason, IteratorResult

V = TypeVar("V")

log: StructLogger = get_logger(__name__)


class EventIterator(Generic[V]):
    """Bridges listener callbacks from an emitter into an async iterator."""

    def __init__(
        self,
        emitter: EventSource,
        event: str,
        options: EventIteratorOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Attach to the emitter and start the idle timeout, if any.

        Args:
            emitter: Event source to listen to; only this iterator's own listener
                is ever added or removed
            event: Name of the event whose values are iterated
            options: ``EventIteratorOptions`` or a mapping of the same fields
        """
        opts = EventIteratorOptions.coerce(options)

        self.filter: EventIteratorFilter = opts.filter
        self._emitter = emitter
        self._event = event
        self._idle = opts.idle
        self._limit = opts.limit

        self._queue: deque[V] = deque()
        self._collected = 0
        self._ended = False
        self._exhausted = False
        self._end_reason: EndReason | None = None
        self._waiter: asyncio.Future[None] | None = None
        self._idle_handle: asyncio.TimerHandle | None = None

        self._log = log.bind(event=event)
        self._ceiling = ListenerCeiling(emitter, enabled=opts.track_max_listeners)
        self._listener = self._push
        self._attached = False

        # Needs a running loop when idle is set; fails before anything is attached.
        self._reset_idle_timer()
        try:
            self._emitter.on(self._event, self._listener)
            self._attached = True
            self._ceiling.raise_()
        except BaseException:
            self._detach()
            raise

        self._log.debug(
            "Event iterator attached",
            limit=self._limit,
            idle=self._idle,
            ceiling_raised=self._ceiling.raised,
        )

    def __repr__(self) -> str:
        state = f"ended:{self._end_reason.name.lower()}" if self._end_reason else "active"
        return f"<EventIterator event={self._event!r} {state} collected={self._collected} pending={len(self._queue)}>"

    @property
    def emitter(self) -> EventSource:
        return self._emitter

    @property
    def event(self) -> str:
        return self._event

    @property
    def limit(self) -> int | None:
        return self._limit

    @property
    def idle(self) -> float | None:
        return self._idle

    @property
    def ended(self) -> bool:
        """Whether the iterator has ended. Once True it never resets."""
        return self._ended

    @property
    def end_reason(self) -> EndReason | None:
        """Why the iterator ended, or None while it is still active."""
        return self._end_reason

    @property
    def collected(self) -> int:
        """Number of values accepted by the filter so far."""
        return self._collected

    @property
    def pending(self) -> int:
        """Number of accepted values not yet taken by the consumer."""
        return len(self._queue)

    def end(self) -> None:
        """End the iterator, discarding any values not yet consumed.

        Calling this more than once, or after the iterator ended on its own,
        does nothing.
        """
        self._finish(EndReason.EXPLICIT)

    async def next(self) -> IteratorResult[V]:
        """Return the next accepted value, waiting for one if necessary.

        Returns:
            ``IteratorResult(done=False, value=...)`` for each value, then
            ``IteratorResult(done=True)`` on every call once the iterator ended

        Raises:
            ConcurrentNextError: If another call is already waiting
        """
        while True:
            if self._queue:
                value = self._queue.popleft()
                if self._exhausted and not self._queue:
                    self._finish(EndReason.LIMIT)
                return IteratorResult(done=False, value=value)
            if self._ended:
                return DONE
            await self._wait()

    async def aclose(self) -> IteratorResult[V]:
        """End the iterator when the consumer stops early."""
        self._finish(EndReason.CLOSED)
        return DONE

    async def athrow(self, *exc_info: Any) -> IteratorResult[V]:
        """End the iterator when the consumer's loop raised.

        The exception is not re-raised here; it keeps propagating in the caller.
        """
        self._finish(EndReason.CLOSED)
        return DONE

    async def collect(self) -> list[V]:
        """Consume every remaining value until the iterator ends."""
        return [value async for value in self]

    def __aiter__(self) -> EventIterator[V]:
        return self

    async def __anext__(self) -> V:
        result = await self.next()
        if result.done:
            raise StopAsyncIteration
        return result.value  # type: ignore[return-value]

    async def __aenter__(self) -> EventIterator[V]:
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self._finish(EndReason.CLOSED)

    def _push(self, *args: Any) -> None:
        """Listener registered on the emitter."""
        if self._ended or self._exhausted:
            return

        if len(args) == 1:
            value = args[0]
        elif args:
            value = args
        else:
            value = None

        # Raising filters propagate into the emitter's dispatch.
        if not self.filter(value, list(self._queue)):
            return

        # The filter may have ended the iterator.
        if self._ended:
            return

        if self._limit is not None and self._collected >= self._limit:
            self._finish(EndReason.LIMIT)
            return

        self._collected += 1
        self._reset_idle_timer()
        self._queue.append(value)

        if self._limit is not None and self._collected >= self._limit:
            # Stop listening now; the iterator ends once the queue is drained.
            self._exhausted = True
            self._detach()
            self._log.debug("Event iterator limit reached", limit=self._limit, pending=len(self._queue))

        self._wake()

    async def _wait(self) -> None:
        if self._waiter is not None and not self._waiter.done():
            raise ConcurrentNextError(self._event)

        self._waiter = asyncio.get_running_loop().create_future()
        try:
            await self._waiter
        finally:
            self._waiter = None

    def _wake(self) -> None:
        if self._waiter is not None and not self._waiter.done():
            self._waiter.set_result(None)

    def _reset_idle_timer(self) -> None:
        if not self._idle:
            return
        self._cancel_idle_timer()
        loop = asyncio.get_running_loop()
        self._idle_handle = loop.call_later(self._idle, self._on_idle)

    def _cancel_idle_timer(self) -> None:
        if self._idle_handle is not None:
            self._idle_handle.cancel()
            self._idle_handle = None

    def _on_idle(self) -> None:
        self._idle_handle = None
        self._log.debug("Event iterator idle timeout", idle=self._idle, collected=self._collected)
        self._finish(EndReason.IDLE)

    def _detach(self) -> None:
        self._cancel_idle_timer()
        if not self._attached:
            return
        self._attached = False
        self._emitter.off(self._event, self._listener)
        self._ceiling.restore()

    def _finish(self, reason: EndReason) -> None:
        if self._ended:
            return

        self._ended = True
        self._end_reason = reason
        self._detach()

        dropped = len(self._queue)
        self._queue.clear()
        self._wake()

        self._log.debug(
            "Event iterator ended",
            reason=reason.name,
            collected=self._collected,
            dropped=dropped,
        )


def iterate(
    emitter: EventSource,
    event: str,
    *,
    filter: EventIteratorFilter | None = None,
    idle: float | None = None,
    limit: int | None = None,
    track_max_listeners: bool = True,
) -> EventIterator[Any]:
    """Create an ``EventIterator`` from keyword arguments."""
    options = EventIteratorOptions(
        filter=filter,
        idle=idle,
        limit=limit,
        track_max_listeners=track_max_listeners,
    )
    return EventIterator(emitter, event, options)


# 🔼⚙️🔚
