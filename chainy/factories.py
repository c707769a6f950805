import threading
import typing
from itertools import repeat as itertools_repeat
from collections import deque
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable
    from .queue import EnumerableQueue

def from_iterable(data: Optional[Iterable[T]]) -> 'Enumerable[T]':
    """
    create enumerable from iterable.
    None gives an empty sequence and an enumerable comes back unchanged.
    lists, tuples and ranges back the sequence directly, so size and index
    queries need no traversal. one-shot iterators are made replayable.
    """
    from .enumerable import Enumerable
    if data is None:
        return empty()
    if isinstance(data, Enumerable):
        return data
    if isinstance(data, (list, tuple, range)):
        return Enumerable(lambda: data, data)
    if iter(data) is data:
        return from_iterator(data)
    return Enumerable(lambda: data)

def from_items(*items: T) -> 'Enumerable[T]':
    """create enumerable over the arguments"""
    from .enumerable import Enumerable
    return Enumerable(lambda: items, items)

def from_iterator(iterator: Optional[Iterator[T]]) -> 'Enumerable[T]':
    """
    replayable sequence over a one-shot iterator or generator.
    each item is pulled from the iterator once, on demand, and kept for every
    later cursor. the cache grows with the furthest any cursor has read.
    """
    from .enumerable import Enumerable
    if iterator is None:
        return empty()
    source = iter(iterator)
    cache = []
    exhausted = False
    pull_lock = threading.Lock()

    def cached_data():
        nonlocal exhausted
        index = 0
        while True:
            if index == len(cache):
                with pull_lock:
                    # another cursor may have pulled while this one waited
                    if index == len(cache) and not exhausted:
                        item = next(source, NOTHING)
                        if item is NOTHING:
                            exhausted = True
                        else:
                            cache.append(item)
                if index == len(cache):
                    return
            yield cache[index]
            index += 1

    return Enumerable(cached_data)

def from_cursor_factory(factory: Optional[CursorFactory[T]]) -> 'Enumerable[T]':
    """create enumerable that calls factory() for each new cursor"""
    from .enumerable import Enumerable
    if factory is None:
        return empty()
    return Enumerable(factory)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    numbers = range(start, start + max(count, 0))
    return Enumerable(lambda: numbers, numbers)

def repeat(item: T, count: Optional[int] = None) -> 'Enumerable[T]':
    """create enumerable with repeated item. infinite when count is None."""
    from .enumerable import Enumerable
    if count is None:
        return Enumerable(lambda: itertools_repeat(item))
    items = (item,) * max(count, 0)
    return Enumerable(lambda: items, items)

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (), ())

# --- seeded generation ---

def generate(seed: T, next_item: Optional[Callable[[T], T]]) -> 'Enumerable[T]':
    """
    seed, next_item(seed), next_item(of that), ... until next_item returns NOTHING.
    a seed of NOTHING starts from nothing: the first call receives NOTHING.
    """
    start = empty() if seed is NOTHING else from_items(seed)
    return start.chain(next_item)

def generate_indexed(seed: T, next_item: Optional[Callable[[T, int], T]]) -> 'Enumerable[T]':
    """like generate(), with the zero-based index of the item being generated"""
    start = empty() if seed is NOTHING else from_items(seed)
    return start.chain_indexed(next_item)

def generate_pairs(seeds: Optional[Iterable[T]], next_item: Optional[Callable[[T, T], T]]) -> 'Enumerable[T]':
    """
    the seeds, then next_item(previous, last) over the two latest items.
    example: generate_pairs([0, 1], lambda a, b: a + b) -> fibonacci
    """
    return from_iterable(seeds).chain_pairs(next_item)

def recursive_generator(seed: T,
                       child_generator: Callable[[T], Optional[Iterable[T]]],
                       max_depth: int = 100) -> 'Enumerable[T]':
    """
    lazy breadth-first expansion of the tree grown from seed by child_generator.
    items deeper than max_depth levels are never generated. no cycle check is
    made, every generated child is emitted.
    """
    from .enumerable import Enumerable
    def generate_recursive():
        if max_depth <= 0:
            return
        worklist = deque([(iter((seed,)), 1)])
        while worklist:
            cursor, depth = worklist[0]
            item = next(cursor, NOTHING)
            if item is NOTHING:
                worklist.popleft()
                continue
            yield item
            if depth < max_depth:
                children = child_generator(item)
                if children is not None:
                    worklist.append((iter(children), depth + 1))

    return Enumerable(generate_recursive)

def to_queue(seed: Optional[Iterable[T]] = None) -> 'EnumerableQueue[T]':
    """create a fifo queue seeded with the items of seed"""
    from .queue import EnumerableQueue
    return EnumerableQueue(seed)

# --- aliases ---
chainy = from_iterable
C = from_iterable
