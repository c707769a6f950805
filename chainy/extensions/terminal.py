from __future__ import annotations
import typing
from functools import reduce
from itertools import islice
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    """
    operations that iterate the sequence and return a plain value.
    conversions, count(), last() and the aggregates drive the sequence to its
    end and therefore never return on an infinite sequence; the lookups and
    any()/all() stop as soon as the answer is known.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._enumerable)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later items overwrite earlier ones with the same key."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- size ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None:
            buffer = self._enumerable._buffer()
            if buffer is not None:
                return len(buffer)
            return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def is_empty(self) -> bool:
        buffer = self._enumerable._buffer()
        if buffer is not None:
            return len(buffer) == 0
        return next(iter(self._enumerable), NOTHING) is NOTHING

    def is_count_at_least(self, minimum: int) -> bool:
        """reads at most 'minimum' items"""
        if minimum <= 0:
            return True
        return sum(1 for _ in islice(self._enumerable, minimum)) == minimum

    def is_count_at_most(self, maximum: int) -> bool:
        """reads at most 'maximum' + 1 items"""
        if maximum < 0:
            return False
        return sum(1 for _ in islice(self._enumerable, maximum + 1)) <= maximum

    def is_count_exactly(self, number: int) -> bool:
        """reads at most 'number' + 1 items"""
        if number < 0:
            return False
        buffer = self._enumerable._buffer()
        if buffer is not None:
            return len(buffer) == number
        return sum(1 for _ in islice(self._enumerable, number + 1)) == number

    # --- predicates ---

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None: return not self.is_empty()
        return any(predicate(x) for x in self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable)

    def none(self, predicate: Predicate[T]) -> bool:
        """check that no element satisfies condition"""
        return not self.any(predicate)

    def any_either(self, *predicates: Predicate[T]) -> bool:
        return any(any(p(x) for p in predicates) for x in self._enumerable)

    def all_either(self, *predicates: Predicate[T]) -> bool:
        """every element satisfies at least one of the predicates"""
        return all(any(p(x) for p in predicates) for x in self._enumerable)

    def none_either(self, *predicates: Predicate[T]) -> bool:
        return not self.any_either(*predicates)

    # --- element access ---

    def first(self, default: Optional[T] = None) -> Optional[T]:
        """get first element, or the default when there is none"""
        item = next(iter(self._enumerable), NOTHING)
        return default if item is NOTHING else item

    def first_where(self, predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """get the first element satisfying the predicate, or the default"""
        for item in self._enumerable:
            if predicate(item): return item
        return default

    def first_where_either(self, *predicates: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        for item in self._enumerable:
            if any(p(item) for p in predicates): return item
        return default

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """
        the element at a zero-based position, or the default when out of range.
        uses the backing buffer when there is one, else walks the sequence.
        """
        if index < 0:
            return default
        buffer = self._enumerable._buffer()
        if buffer is not None:
            return buffer[index] if index < len(buffer) else default
        item = next(islice(self._enumerable, index, None), NOTHING)
        return default if item is NOTHING else item

    def last(self, default: Optional[T] = None) -> Optional[T]:
        """get last element, or the default when there is none"""
        buffer = self._enumerable._buffer()
        if buffer is not None:
            return buffer[-1] if len(buffer) > 0 else default
        item = NOTHING
        for item in self._enumerable:
            pass
        return default if item is NOTHING else item

    # --- aggregates ---

    def join(self, delimiter: str = DEFAULT_JOIN_DELIMITER) -> str:
        """concatenate the string forms of the elements, skipping None items"""
        return delimiter.join(str(item) for item in self._enumerable if item is not None)

    def sum(self, selector: Optional[Selector[T, Any]] = None) -> Any:
        """sum of the elements, or of selector(element). None values are skipped."""
        values = self._enumerable if selector is None else (selector(x) for x in self._enumerable)
        return sum(v for v in values if v is not None)

    def max_by(self, selector: Selector[T, Any]) -> Optional[T]:
        """the element with the largest selector value. the first one wins ties."""
        best, best_value = None, NOTHING
        for item in self._enumerable:
            value = selector(item)
            if best_value is NOTHING or value > best_value:
                best, best_value = item, value
        return best

    def min_by(self, selector: Selector[T, Any]) -> Optional[T]:
        """the element with the smallest selector value. the first one wins ties."""
        best, best_value = None, NOTHING
        for item in self._enumerable:
            value = selector(item)
            if best_value is NOTHING or value < best_value:
                best, best_value = item, value
        return best

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        data = self.list()
        if not data and seed is None: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, data, seed) if seed is not None else reduce(accumulator, data)

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(reduce(accumulator, self._enumerable, seed))
