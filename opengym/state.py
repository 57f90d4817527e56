"""Observable holder for a single immutable snapshot."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class _Subscription(Generic[T]):
    """Keeps only the newest undelivered snapshot."""

    def __init__(self, initial: T) -> None:
        self._latest = initial
        self._pending = asyncio.Event()
        self._pending.set()

    def offer(self, value: T) -> None:
        self._latest = value
        self._pending.set()

    async def next(self) -> T:
        await self._pending.wait()
        self._pending.clear()
        return self._latest


class StateFlow(Generic[T]):
    """Single-writer, multi-reader state container.

    Writers go through ``update`` so the read-modify-write happens without
    yielding to the event loop. Subscribers are conflated: a slow reader
    skips intermediate snapshots and only sees the latest one.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: set[_Subscription[T]] = set()

    @property
    def value(self) -> T:
        return self._value

    def update(self, transform: Callable[[T], T]) -> T:
        new_value = transform(self._value)
        if new_value == self._value:
            return self._value
        self._value = new_value
        for subscriber in self._subscribers:
            subscriber.offer(new_value)
        return new_value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def subscribe(self) -> AsyncIterator[T]:
        subscription = _Subscription(self._value)
        self._subscribers.add(subscription)
        try:
            while True:
                yield await subscription.next()
        finally:
            self._subscribers.discard(subscription)


__all__ = ["StateFlow"]
