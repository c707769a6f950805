from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable, MemoizedEnumerable
    from ..queue import EnumerableQueue

logger = logging.getLogger(__name__)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def memoize(self) -> 'MemoizedEnumerable[T]':
        """
        a view that caches the items after the first complete traversal.
        memoizing an already memoized sequence returns it unchanged.
        """
        return self._enumerable._memoized()

    def to_queue(self) -> 'EnumerableQueue[T]':
        """a fifo queue seeded with this sequence, read lazily"""
        from ..queue import EnumerableQueue
        return EnumerableQueue(self._enumerable)

    def apply(self, action: Optional[Callable[[T], Any]] = None) -> 'Enumerable[T]':
        """
        runs the action on every item immediately and returns the items it saw
        as a fixed sequence. an exception from the action propagates.
        with no action, it only materializes.
        """
        from ..enumerable import Enumerable
        items = []
        for item in self._enumerable:
            if action is not None:
                action(item)
            items.append(item)
        snapshot = tuple(items)
        return Enumerable(lambda: snapshot, snapshot)

    def try_apply(self, action: Callable[[T], Any]) -> ApplyResult[T]:
        """
        like apply(), but an item whose action raises is recorded as a failure
        and the remaining items still run.
        """
        items = []
        failures = []
        for item in self._enumerable:
            items.append(item)
            try:
                action(item)
            except Exception as e:
                logger.warning("apply failed for %r: %s", item, e)
                failures.append((item, e))
        return ApplyResult(items, failures)

    def apply_as_you_go(self, action: Optional[Callable[[T], Any]]) -> 'Enumerable[T]':
        """runs the action on each item lazily, as it passes through"""
        from ..enumerable import Enumerable
        if action is None:
            return self._enumerable

        def side_effect_data():
            for item in self._enumerable:
                action(item)
                yield item
        return Enumerable(side_effect_data)

    side_effect = apply_as_you_go

    def collect_into(self, target: Any) -> 'Enumerable[T]':
        """
        lazily adds each passing item to target, using its append() or add().
        """
        if target is None:
            return self._enumerable
        add = getattr(target, 'append', None) or getattr(target, 'add', None)
        if add is None:
            raise TypeError(f"cannot collect into {type(target).__name__}: no append() or add()")
        return self.apply_as_you_go(add)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """apply function to enumerable for custom operations"""
        return func(self._enumerable, *args, **kwargs)
