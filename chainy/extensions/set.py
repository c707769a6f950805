from __future__ import annotations
import typing
from collections import deque
from itertools import chain
from ..types import *
from ..types import _SeenSet

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    provides distinctness, interleaving and membership checks.
    unhashable items are supported everywhere, at the cost of linear lookups.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. the first item seen for each key survives, in order."""
        from ..enumerable import Enumerable
        def distinct_data():
            seen = _SeenSet()
            # keys such as id() are only unique while their item is alive
            kept = []
            for item in self._enumerable:
                if seen.add(item if key_selector is None else key_selector(item)):
                    if key_selector is not None:
                        kept.append(item)
                    yield item
        return Enumerable(distinct_data)

    def interleave(self, *others: Optional[Iterable[T]]) -> 'Enumerable[T]':
        """
        round-robin across this sequence and the others, one item from each in turn.
        exhausted sources drop out without stalling the rest; None sources are skipped.
        """
        from ..enumerable import Enumerable
        def interleave_data():
            sources = chain([self._enumerable], others)
            cursors = deque(iter(source) for source in sources if source is not None)
            while cursors:
                cursor = cursors.popleft()
                item = next(cursor, NOTHING)
                if item is NOTHING:
                    continue
                cursors.append(cursor)
                yield item
        return Enumerable(interleave_data)

    # --- membership ---

    def contains(self, item: T) -> bool:
        """stops at the first match"""
        buffer = self._enumerable._buffer()
        if buffer is not None:
            return item in buffer
        return any(candidate == item for candidate in self._enumerable)

    def contains_all(self, *items: T) -> bool:
        """true when every one of the items occurs. stops as soon as all were found."""
        remaining = list(items)
        if not remaining:
            return True
        for candidate in self._enumerable:
            remaining = [item for item in remaining if item != candidate]
            if not remaining:
                return True
        return False

    def contains_any(self, *items: T) -> bool:
        """true when at least one of the items occurs"""
        if not items:
            return False
        return any(candidate in items for candidate in self._enumerable)

    def contains_only(self, *items: T) -> bool:
        """true when every element is one of the items. an empty sequence contains only anything."""
        return all(candidate in items for candidate in self._enumerable)
