from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence as _SizedSequence
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.window import _WindowOperations
from .extensions.generation import _GenerationOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.match import MatchAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.tree import TreeAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _cursor(self) -> Iterator[T]:
        """produce a fresh, independent iterator over the items"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: CursorFactory[T], buffer: Optional[_SizedSequence] = None):
        """init with a function that returns a new iterable each time it is called"""
        self._data_func = data_func
        self._fixed_buffer = buffer

    def _cursor(self) -> Iterator[T]:
        return iter(self._data_func())

    def _buffer(self) -> Optional[_SizedSequence]:
        """the fixed-size materialized data backing this sequence, if there is one"""
        return self._fixed_buffer

    def _memoized(self) -> 'MemoizedEnumerable[T]':
        return MemoizedEnumerable(self)

    def __iter__(self) -> Iterator[T]:
        return self._cursor()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T],
    _WindowOperations[T],
    _GenerationOperations[T]
):
    """
    a lazy, replayable sequence. nothing is evaluated until it is iterated,
    and every iteration starts over from the source.
    """
    def __init__(self, data_func: CursorFactory[T], buffer: Optional[_SizedSequence] = None):
        super().__init__(data_func, buffer)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.match = MatchAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
        self.tree = TreeAccessor(self)

# --- ordered enumerable class ---

class OrderedEnumerable(Enumerable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: Enumerable[T], sort_keys: List[Tuple[Callable, bool]]):
        self._source = source
        self._sort_keys = sort_keys
        super().__init__(self._sorted_data)

    def _sorted_data(self) -> List[T]:
        """materializes the source and applies all sorts at once using stable sort."""
        data = list(self._source)
        # python's sort is stable, so we sort from the last key to the first
        for key_selector, is_descending in reversed(self._sort_keys):
            data.sort(key=key_selector, reverse=is_descending)
        return data

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort ascending"""
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedEnumerable[T]':
        """secondary sort descending"""
        return OrderedEnumerable(self._source, self._sort_keys + [(key_selector, True)])

# --- memoized enumerable class ---

class MemoizedEnumerable(Enumerable[T]):
    """
    caches a sequence after its first complete traversal.

    until then, every cursor drives the source and records what it sees in a
    private list. the first cursor to exhaust the source publishes its list as
    the permanent buffer; later finishers discard theirs. a partial traversal
    never publishes. cursors created after publication only read the buffer.
    """

    def __init__(self, source: Enumerable[T]):
        self._source = source
        self._published: Optional[Tuple[T, ...]] = None
        self._publish_lock = threading.Lock()
        super().__init__(self._memo_data)

    @property
    def is_cached(self) -> bool:
        return self._published is not None

    def _memo_data(self) -> Iterator[T]:
        published = self._published
        if published is not None:
            return iter(published)
        return self._recording_cursor()

    def _recording_cursor(self) -> Iterator[T]:
        recorded = []
        for item in self._source:
            recorded.append(item)
            yield item
        self._publish(recorded)

    def _publish(self, recorded: List[T]) -> bool:
        """publish-once: only the first completed traversal becomes the buffer"""
        with self._publish_lock:
            if self._published is not None:
                return False
            self._published = tuple(recorded)
        logger.debug("memoized %d items", len(recorded))
        return True

    def _buffer(self) -> Optional[Tuple[T, ...]]:
        return self._published

    def _memoized(self) -> 'MemoizedEnumerable[T]':
        return self
