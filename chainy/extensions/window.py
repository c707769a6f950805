from __future__ import annotations
import typing
from itertools import takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _WindowOperations(Generic[T]):
    """
    single-pass windows over one upstream cursor. once a window's stopping
    condition fires, it never resumes emitting.
    a None condition leaves the sequence unchanged.
    """

    def before(self: 'Enumerable[T]', condition: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """items up to, but not including, the first one satisfying the condition"""
        from ..enumerable import Enumerable
        if condition is None:
            return self
        return Enumerable(lambda: takewhile(lambda item: not condition(item), self))

    def not_before(self: 'Enumerable[T]', condition: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """items starting with the first one satisfying the condition"""
        from ..enumerable import Enumerable
        if condition is None:
            return self
        return Enumerable(lambda: dropwhile(lambda item: not condition(item), self))

    def not_after(self: 'Enumerable[T]', condition: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """items up to and including the first one satisfying the condition"""
        from ..enumerable import Enumerable
        if condition is None:
            return self

        def not_after_data():
            for item in self:
                yield item
                if condition(item):
                    return
        return Enumerable(not_after_data)

    def as_long_as(self: 'Enumerable[T]', condition: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """items while the condition holds"""
        if condition is None:
            return self
        return self.before(lambda item: not condition(item))

    def not_as_long_as(self: 'Enumerable[T]', condition: Optional[Predicate[T]]) -> 'Enumerable[T]':
        """skips items while the condition holds, then emits everything else"""
        if condition is None:
            return self
        return self.not_before(lambda item: not condition(item))

    take_while = as_long_as
    skip_while = not_as_long_as

    # --- value forms ---

    def before_value(self: 'Enumerable[T]', value: T) -> 'Enumerable[T]':
        return self.before(lambda item: item == value)

    def not_before_value(self: 'Enumerable[T]', value: T) -> 'Enumerable[T]':
        return self.not_before(lambda item: item == value)

    def as_long_as_value(self: 'Enumerable[T]', value: T) -> 'Enumerable[T]':
        return self.as_long_as(lambda item: item == value)

    def not_as_long_as_value(self: 'Enumerable[T]', value: T) -> 'Enumerable[T]':
        return self.not_as_long_as(lambda item: item == value)
