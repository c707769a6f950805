from __future__ import annotations
import typing
import numbers
from functools import cmp_to_key
from itertools import chain, islice
import numpy as np
from ..types import *
from ..factories import empty

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, OrderedEnumerable


def _auto_sort_key(sample: Any) -> Callable[[Any], Any]:
    """numbers compare numerically, anything else by its string form"""
    if isinstance(sample, (numbers.Number, np.number)):
        return lambda item: item
    return str


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        if predicate is None:
            return self

        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return Enumerable(filter_data)

    def where_either(self: 'Enumerable[T]', *predicates: Predicate[T]) -> 'Enumerable[T]':
        """keep elements satisfying at least one of the predicates"""
        from ..enumerable import Enumerable
        if not predicates:
            return self

        def filter_data():
            for item in self:
                if any(predicate(item) for predicate in predicates):
                    yield item
        return Enumerable(filter_data)

    def not_where(self: 'Enumerable[T]', predicate: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """filter out elements satisfying the predicate"""
        if predicate is None:
            return self
        return self.where(lambda item: not predicate(item))

    def without_none(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """drops None items"""
        return self.where(lambda item: item is not None)

    def of_type(self: 'Enumerable[T]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        # the type hint Type[U] ensures the user passes a class/type, not an instance
        return self.where(lambda item: isinstance(item, type_filter))

    def select(self: 'Enumerable[T]', selector: Optional[Selector[T, U]]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        if selector is None:
            return empty()

        def map_data():
            for item in self:
                yield selector(item)
        return Enumerable(map_data)

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        if selector is None:
            return empty()

        def map_with_index_data():
            for index, item in enumerate(self):
                yield selector(item, index)
        return Enumerable(map_with_index_data)

    def select_many(self: 'Enumerable[T]', selector: Optional[Selector[T, Optional[Iterable[U]]]]) -> 'Enumerable[U]':
        """project and flatten sequences. a None projection contributes nothing."""
        from ..enumerable import Enumerable
        if selector is None:
            return empty()

        def flat_map_data():
            for item in self:
                results = selector(item)
                if results is not None:
                    yield from results
        return Enumerable(flat_map_data)

    def replace(self: 'Enumerable[T]', replacer: Selector[T, Optional[Iterable[T]]]) -> 'Enumerable[T]':
        """replaces each item with the items the replacer returns for it, dropping None results"""
        return self.select_many(replacer).without_none()

    def cast(self: 'Enumerable[T]', target_type: Type[U]) -> 'Enumerable[U]':
        """converts every item by calling target_type on it"""
        return self.select(target_type)

    def concat(self: 'Enumerable[T]', *iterables: Optional[Iterable[T]]) -> 'Enumerable[T]':
        """concatenate with other sequences, preserving all elements and order. None is treated as empty."""
        from ..enumerable import Enumerable
        others = [iterable for iterable in iterables if iterable is not None]
        if not others:
            return self
        # itertools.chain hands over from one source to the next without buffering anything
        return Enumerable(lambda: chain(self, *others))

    def concat_each(self: 'Enumerable[T]', lister: Optional[Selector[T, Optional[Iterable[T]]]]) -> 'Enumerable[T]':
        """emits each item followed by the items lister returns for it"""
        from ..enumerable import Enumerable
        if lister is None:
            return self

        def concat_each_data():
            for item in self:
                yield item
                extras = lister(item)
                if extras is not None:
                    yield from extras
        return Enumerable(concat_each_data)

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        return self.concat((element,))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain((element,), self))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements. safe on infinite sequences."""
        from ..enumerable import Enumerable
        if count <= 0:
            return empty()
        return Enumerable(lambda: islice(self, count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        if count <= 0:
            return self
        return Enumerable(lambda: islice(self, count, None))

    def after_first(self: 'Enumerable[T]', count: int = 1) -> 'Enumerable[T]':
        """everything after the first 'count' elements"""
        return self.skip(count)

    first_n = take

    def last_n(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """
        the last 'count' elements, or nothing when the sequence is shorter than that.
        materializes the sequence on first advance, so it never ends on infinite input.
        """
        from ..enumerable import Enumerable

        def last_data():
            data = list(self)
            if 0 < count <= len(data):
                yield from data[len(data) - count:]
        return Enumerable(last_data)

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """
        inverts the order of the elements in a sequence.
        materializes the sequence on first advance, so it never ends on infinite input.
        """
        from ..enumerable import Enumerable

        def reverse_data():
            buffer = self._buffer()
            return reversed(buffer) if buffer is not None else reversed(list(self))
        return Enumerable(reverse_data)

    # --- sorting ---

    def _sorted(self: 'Enumerable[T]', key: Optional[KeySelector[T, K]], descending: bool) -> 'Enumerable[T]':
        from ..enumerable import Enumerable

        def sorted_data():
            data = list(self)
            if not data:
                return data
            sort_key = key if key is not None else _auto_sort_key(data[0])
            # reverse=True keeps equal items in their original order, so both directions are stable
            return sorted(data, key=sort_key, reverse=descending)
        return Enumerable(sorted_data)

    def ascending(self: 'Enumerable[T]', key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """
        stable ascending sort. without a key, numbers sort numerically and anything
        else by str(). materializes the sequence on first advance.
        """
        return self._sorted(key, False)

    def descending(self: 'Enumerable[T]', key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """stable descending counterpart of ascending()"""
        return self._sorted(key, True)

    def sorted_by(self: 'Enumerable[T]', comparator: Optional[Comparer[T]], descending: bool = False) -> 'Enumerable[T]':
        """stable sort with an explicit three-way comparator"""
        if comparator is None:
            return self
        return self._sorted(cmp_to_key(comparator), descending)

    def order_by(self: 'Enumerable[T]', key_selector: Callable[[T], K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, [(key_selector, False)])

    def order_by_descending(self: 'Enumerable[T]', key_selector: Callable[[T], K]) -> 'OrderedEnumerable[T]':
        """sort elements by a key in descending order"""
        from ..enumerable import OrderedEnumerable
        return OrderedEnumerable(self, [(key_selector, True)])
