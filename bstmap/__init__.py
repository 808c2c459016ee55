"""
Ordered key/value map on an unbalanced binary search tree.

Keys need a strict total order (``<`` and ``>``); values can be anything.
"""

from bstmap.indexing import (
    InvalidPositionError,
    OrderedMap,
    Position,
    SubRange,
    TreeIterator,
)

__all__ = [
    "InvalidPositionError",
    "OrderedMap",
    "Position",
    "SubRange",
    "TreeIterator",
]
