"""
'      _______ __  __ _______ _______ __   _ __   __
'      |       |  |  |   _   |_     _|  \  |  \_/
'      |_____  |__|__|__| |__| _| |_ |   \_|   |
'
'  lazy, replayable sequences: compose, memoize, generate, traverse
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable, MemoizedEnumerable
from .queue import EnumerableQueue

# expose the factory functions
from .factories import (
    from_iterable,
    from_items,
    from_iterator,
    from_cursor_factory,
    from_range,
    repeat,
    empty,
    generate,
    generate_indexed,
    generate_pairs,
    recursive_generator,
    to_queue,
    chainy,
    C
)

# expose supporting data classes
from .types import (
    NOTHING,
    ApplyResult,
    DEFAULT_JOIN_DELIMITER
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "MemoizedEnumerable",
    "EnumerableQueue",
    "from_iterable",
    "from_items",
    "from_iterator",
    "from_cursor_factory",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "generate_indexed",
    "generate_pairs",
    "recursive_generator",
    "to_queue",
    "chainy",
    "C",
    "NOTHING",
    "ApplyResult",
    "DEFAULT_JOIN_DELIMITER"
]
