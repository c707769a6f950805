from __future__ import annotations
import typing
from collections import deque
from ..types import *
from ..types import _SeenSet

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TreeAccessor(Generic[T]):
    """
    cycle-safe traversal of the tree or graph implied by a child selector,
    starting from the items of the sequence.
    """

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def traverse(self,
                 child_selector: Optional[ChildSelector[T]],
                 breadth_first: bool = True,
                 key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """
        walks the graph lazily, emitting every distinct node once.

        the frontier holds one cursor per branch that still has items. nodes are
        pulled from the leftmost cursor; a node's children are fetched only when
        the consumer moves past it, and their cursor joins the frontier on the
        right (breadth-first) or on the left (depth-first, pre-order).

        nodes are deduplicated by key(node), or by the node itself when no key is
        given, so two equal nodes count as one. pass key=id to tell equal but
        distinct objects apart. a None child list means no children.
        """
        from ..enumerable import Enumerable
        from ..factories import empty
        if child_selector is None:
            return empty()

        def traverse_data():
            frontier = deque([iter(self._enumerable)])
            seen = _SeenSet()
            # keys such as id() are only unique while their node is alive
            emitted = []
            while frontier:
                item = next(frontier[0], NOTHING)
                if item is NOTHING:
                    frontier.popleft()
                    continue
                if not seen.add(item if key is None else key(item)):
                    # already emitted, protects against cycles
                    continue
                if key is not None:
                    emitted.append(item)

                yield item

                children = child_selector(item)
                if children is not None:
                    if breadth_first:
                        frontier.append(iter(children))
                    else:
                        frontier.appendleft(iter(children))

        return Enumerable(traverse_data)

    def breadth_first(self, child_selector: Optional[ChildSelector[T]],
                      key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """level-order traversal"""
        return self.traverse(child_selector, True, key)

    def depth_first(self, child_selector: Optional[ChildSelector[T]],
                    key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """pre-order traversal"""
        return self.traverse(child_selector, False, key)

    def _not_below(self, child_selector: Optional[ChildSelector[T]],
                   condition: Optional[Predicate[T]],
                   breadth_first: bool,
                   key: Optional[KeySelector[T, K]]) -> 'Enumerable[T]':
        if child_selector is None or condition is None:
            return self.traverse(child_selector, breadth_first, key)

        def pruned_children(item: T) -> Optional[Iterable[T]]:
            return None if condition(item) else child_selector(item)

        return self.traverse(pruned_children, breadth_first, key)

    def breadth_first_not_below(self, child_selector: Optional[ChildSelector[T]],
                                condition: Optional[Predicate[T]],
                                key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """
        breadth-first, but nodes satisfying the condition are leaves:
        they are still emitted, their children are never fetched.
        """
        return self._not_below(child_selector, condition, True, key)

    def depth_first_not_below(self, child_selector: Optional[ChildSelector[T]],
                              condition: Optional[Predicate[T]],
                              key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """depth-first counterpart of breadth_first_not_below()"""
        return self._not_below(child_selector, condition, False, key)

    def breadth_first_as_long_as(self, child_selector: Optional[ChildSelector[T]],
                                 condition: Optional[Predicate[T]],
                                 key: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """breadth-first, following only the children that satisfy the condition"""
        if child_selector is None or condition is None:
            return self.traverse(child_selector, True, key)

        def matching_children(item: T) -> Optional[Iterable[T]]:
            children = child_selector(item)
            return None if children is None else (child for child in children if condition(child))

        return self.traverse(matching_children, True, key)
