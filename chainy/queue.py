from __future__ import annotations

import logging
from collections import deque
from .types import *
from .enumerable import Enumerable

logger = logging.getLogger(__name__)


class EnumerableQueue(Enumerable[T]):
    """
    a fifo queue that starts out as a view over a seed sequence.

    the seed is read through a single cursor, never re-driven. seed items that
    have been read but not yet removed wait in a look-ahead deque, and appended
    items go to a separate buffer behind them. once the seed cursor is exhausted
    and its look-ahead drained, the seed is dropped for good and the queue is a
    plain deque.

    iterating the queue shows its current content without removing anything.
    """

    def __init__(self, seed: Optional[Iterable[T]] = None):
        from .factories import from_iterable
        self._seed: Optional[Enumerable[T]] = from_iterable(seed)
        self._seed_cursor: Optional[Iterator[T]] = None
        self._seed_exhausted = False
        self._pending: deque = deque()
        self._removed = 0
        self._items: deque = deque()
        super().__init__(self._queue_data)

    @property
    def has_seed(self) -> bool:
        """false once the seed has been used up and dropped"""
        return self._seed is not None

    def _read_seed(self) -> bool:
        """moves one item from the seed cursor into the look-ahead"""
        if self._seed_exhausted:
            return False
        if self._seed_cursor is None:
            self._seed_cursor = iter(self._seed)
        item = next(self._seed_cursor, NOTHING)
        if item is NOTHING:
            self._seed_cursor = None
            self._seed_exhausted = True
            return False
        self._pending.append(item)
        return True

    def _drop_seed_if_drained(self) -> bool:
        if self._seed is None:
            return True
        if self._pending or self._read_seed():
            return False
        self._seed = None
        logger.debug("queue seed drained after %d items", self._removed)
        return True

    def remove_first(self) -> T:
        """removes and returns the head of the queue. raises IndexError when empty."""
        if not self._drop_seed_if_drained():
            self._removed += 1
            return self._pending.popleft()
        if not self._items:
            raise IndexError("remove_first from an empty queue")
        return self._items.popleft()

    def with_last(self, *items: T) -> 'EnumerableQueue[T]':
        """appends the items at the tail"""
        self._items.extend(items)
        return self

    def with_last_all(self, items: Optional[Iterable[T]]) -> 'EnumerableQueue[T]':
        if items is not None:
            self._items.extend(items)
        return self

    def _queue_data(self) -> Iterator[T]:
        if self._drop_seed_if_drained():
            yield from tuple(self._items)
            return
        yield from self._combined_view()

    def _combined_view(self) -> Iterator[T]:
        # position counts seed items from the very start, so removals made while
        # this cursor is paused shift the look-ahead without skipping anything
        position = self._removed
        while True:
            position = max(position, self._removed)
            index = position - self._removed
            if index < len(self._pending):
                item = self._pending[index]
            elif self._read_seed():
                continue
            else:
                break
            position += 1
            yield item
        yield from tuple(self._items)

    def _buffer(self) -> Optional[deque]:
        return self._items if self._seed is None else None

    def __repr__(self) -> str:
        state = "seeded" if self._seed is not None else f"{len(self._items)} items"
        return f"EnumerableQueue({state})"
