from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _GenerationOperations(Generic[T]):
    """
    extends a sequence past its own items by repeatedly deriving the next item
    from what was produced last. generation stops the first time the callback
    returns NOTHING, and the callback receives NOTHING in place of any item
    that does not exist yet. None is an ordinary item.
    these sequences are infinite unless the callback eventually returns NOTHING.
    """

    def chain(self: 'Enumerable[T]', next_item: Optional[Callable[[T], T]]) -> 'Enumerable[T]':
        """
        the items of this sequence, then next_item(last), next_item(of that), ...
        example: from_items(1).chain(lambda i: i + 1) -> 1, 2, 3, ...
        """
        from ..enumerable import Enumerable
        if next_item is None:
            return self

        def chain_data():
            last = NOTHING
            for last in self:
                yield last
            while True:
                last = next_item(last)
                if last is NOTHING:
                    return
                yield last
        return Enumerable(chain_data)

    def chain_indexed(self: 'Enumerable[T]', next_item: Optional[Callable[[T, int], T]]) -> 'Enumerable[T]':
        """like chain(), but next_item also receives the zero-based index of the item being generated"""
        from ..enumerable import Enumerable
        if next_item is None:
            return self

        def chain_indexed_data():
            last = NOTHING
            index = 0
            for last in self:
                yield last
                index += 1
            while True:
                last = next_item(last, index)
                if last is NOTHING:
                    return
                yield last
                index += 1
        return Enumerable(chain_indexed_data)

    def chain_pairs(self: 'Enumerable[T]', next_item: Optional[Callable[[T, T], T]]) -> 'Enumerable[T]':
        """
        like chain(), but next_item receives the two most recent items (previous, last).
        example: from_items(0, 1).chain_pairs(lambda a, b: a + b) -> fibonacci
        """
        from ..enumerable import Enumerable
        if next_item is None:
            return self

        def chain_pairs_data():
            previous, last = NOTHING, NOTHING
            for item in self:
                previous, last = last, item
                yield item
            while True:
                item = next_item(previous, last)
                if item is NOTHING:
                    return
                previous, last = last, item
                yield item
        return Enumerable(chain_pairs_data)

    def chain_if(self: 'Enumerable[T]',
                 condition: Optional[Predicate[T]],
                 next_item: Optional[Callable[[T], T]]) -> 'Enumerable[T]':
        """
        like chain(), but only keeps generating while condition(last) holds.
        a None condition always holds.
        """
        from ..enumerable import Enumerable
        if next_item is None:
            return self

        def chain_if_data():
            last = NOTHING
            for last in self:
                yield last
            while condition is None or condition(last):
                last = next_item(last)
                if last is NOTHING:
                    return
                yield last
        return Enumerable(chain_if_data)
