from __future__ import annotations
import typing
from collections import deque
from itertools import zip_longest
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class MatchAccessor(Generic[T]):
    """compares the sequence with other sequences, item by item"""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def starts_with(self, prefix: Iterable[T]) -> bool:
        """reads no further than the length of the prefix"""
        cursor = iter(self._enumerable)
        for expected in prefix:
            actual = next(cursor, NOTHING)
            if actual is NOTHING or actual != expected:
                return False
        return True

    def starts_with_either(self, *prefixes: Iterable[T]) -> bool:
        return any(self.starts_with(prefix) for prefix in prefixes if prefix is not None)

    def ends_with(self, suffix: Iterable[T]) -> bool:
        return self.ends_with_either(suffix)

    def ends_with_either(self, *suffixes: Iterable[T]) -> bool:
        """materializes the sequence once, then checks each suffix against its tail"""
        data = self._enumerable.to.list()
        for suffix in suffixes:
            if suffix is None:
                continue
            expected = list(suffix)
            if len(expected) <= len(data) and data[len(data) - len(expected):] == expected:
                return True
        return False

    def equals(self, other: Optional[Iterable[T]]) -> bool:
        """same items in the same order, and the same length"""
        if other is None:
            return False
        if other is self._enumerable:
            return True
        # NOTHING never occurs as an item, so it marks the end of the shorter side
        for mine, theirs in zip_longest(self._enumerable, other, fillvalue=NOTHING):
            if mine is NOTHING or theirs is NOTHING or mine != theirs:
                return False
        return True

    def equals_either(self, *others: Optional[Iterable[T]]) -> bool:
        return any(self.equals(other) for other in others)

    def contains_subarray(self, subarray: Optional[Iterable[T]]) -> bool:
        """
        true when the items of subarray occur contiguously, in order.
        slides a window as wide as the subarray, stopping at the first match.
        """
        expected = list(subarray) if subarray is not None else []
        if not expected:
            return True
        window = deque(maxlen=len(expected))
        for item in self._enumerable:
            window.append(item)
            if len(window) == len(expected) and list(window) == expected:
                return True
        return False

    def iterative_contains(self, item: T) -> 'Enumerable[bool]':
        """
        a running membership check: False for every element that is not the item,
        then True at the first match, where it stops. an empty sequence yields a single False.
        the last value is the answer, the length tells how far the search went.
        """
        from ..enumerable import Enumerable
        def iterative_contains_data():
            visited_any = False
            for candidate in self._enumerable:
                visited_any = True
                if candidate == item:
                    yield True
                    return
                yield False
            if not visited_any:
                yield False
        return Enumerable(iterative_contains_data)
