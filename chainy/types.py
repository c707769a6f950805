from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
CursorFactory = Callable[[], Iterable[T]]
ChildSelector = Callable[[T], Optional[Iterable[T]]]

DEFAULT_JOIN_DELIMITER = ""


class _Nothing:
    """
    the "no value" marker.
    generator callbacks return it to stop, and receive it when there is no previous item.
    unlike None, it is never a legitimate sequence item.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = _Nothing()


class ApplyResult(Generic[T]):
    """encapsulates the outcome of applying an action to every item"""

    def __init__(self, items: List[T], failures: List[Tuple[T, Exception]]):
        self.items = items
        self.failures = failures

    @property
    def has_failures(self) -> bool: return len(self.failures) > 0

    @property
    def success_count(self) -> int: return len(self.items) - len(self.failures)

    @property
    def failure_count(self) -> int: return len(self.failures)

    def __repr__(self) -> str:
        return f"ApplyResult(items={len(self.items)}, failures={self.failure_count})"


class _SeenSet:
    """
    membership record keyed by equality.
    hashable keys go through a set, unhashable ones (dicts, lists) through a linear scan.
    """

    def __init__(self):
        self._hashable = set()
        self._unhashable = []

    def add(self, key: Any) -> bool:
        """records the key, returning False if it was already present"""
        try:
            if key in self._hashable:
                return False
            self._hashable.add(key)
            return True
        except TypeError:
            if key in self._unhashable:
                return False
            self._unhashable.append(key)
            return True

    def __contains__(self, key: Any) -> bool:
        try:
            return key in self._hashable
        except TypeError:
            return key in self._unhashable

    def __len__(self) -> int:
        return len(self._hashable) + len(self._unhashable)
