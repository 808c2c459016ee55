
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


class InvalidPositionError(RuntimeError):
    """Raised when a position is used after it stopped naming a live entry."""


class Position(ABC):
    __slots__ = ()

    @abstractmethod
    def get(self) -> Tuple[Any, Any]:
        """Return the (key, value) pair stored at this position."""
        pass

    def __eq__(self, other):
        """Return True if other is a Position representing the same location."""
        raise NotImplementedError('must be implemented by subclass')

    def __ne__(self, other):
        """Return True if other does not represent the same location."""
        return not (self == other)


# ------------------ Iterator ------------------
class TreeIterator(Position):
    """
    In-order position inside an OrderedMap.

    The iterator keeps no parent chain: every advance re-descends from the
    owning map's current root to find the successor. A position without a
    node is the end sentinel. Positions compare by node identity and are
    not hashable.
    """
    __slots__ = '_node', '_tree'

    def __init__(self, node=None, tree=None):
        self._node = node
        self._tree = tree if node is not None else None

    def is_end(self) -> bool:
        return self._node is None

    def _validate(self):
        if self._node is None:
            raise InvalidPositionError("end iterator has no entry")
        return self._node

    @property
    def key(self) -> Any:
        return self._validate().key

    @property
    def value(self) -> Any:
        return self._validate().value

    def get(self) -> Tuple[Any, Any]:
        """
        Return a new (key, value) tuple for this position.

        Rebinding the tuple never touches the map, but a mutable value object
        inside it is the same object the map holds.
        """
        node = self._validate()
        return (node.key, node.value)

    def copy(self) -> "TreeIterator":
        return TreeIterator(self._node, self._tree)

    def advance(self) -> "TreeIterator":
        """Move to the in-order successor in place and return self."""
        node = self._validate()
        key = node.key
        walk = self._tree._root
        last_left_ancestor = None

        while walk is not None:
            if key < walk.key:
                last_left_ancestor = walk
                walk = walk.left
            elif walk.key < key:
                walk = walk.right
            else:
                if walk.right is not None:
                    walk = walk.right
                    while walk.left is not None:
                        walk = walk.left
                    self._node = walk
                else:
                    self._node = last_left_ancestor
                if self._node is None:
                    self._tree = None
                return self

        # Key is no longer reachable from the root: the entry was erased.
        raise InvalidPositionError(f"key {key!r} is no longer in the map")

    def __eq__(self, other):
        return isinstance(other, TreeIterator) and other._node is self._node

    def __repr__(self) -> str:
        if self._node is None:
            return "TreeIterator(end)"
        return f"TreeIterator({self._node.key!r}: {self._node.value!r})"


# ------------------ Range view ------------------
class SubRange:
    """Half-open view [start, finish) over the entries of an OrderedMap."""

    def __init__(self, start: TreeIterator, finish: TreeIterator):
        self._start = start
        self._finish = finish

    def begin(self) -> TreeIterator:
        return self._start.copy()

    def end(self) -> TreeIterator:
        return self._finish.copy()

    def is_empty(self) -> bool:
        return self._start == self._finish

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        walk = self.begin()
        while walk != self._finish:
            yield walk.get()
            walk.advance()

    def keys(self) -> Iterable[Any]:
        for key, _ in self:
            yield key

    def values(self) -> Iterable[Any]:
        for _, value in self:
            yield value


# ------------------ Map ------------------
class OrderedMap:
    """Ordered map on an unbalanced binary search tree (no rebalancing)."""

    class _Node:
        """Entry node; left holds smaller keys, right holds greater keys."""
        __slots__ = 'key', 'value', 'left', 'right'

        def __init__(self, key, value, left=None, right=None):
            self.key = key
            self.value = value
            self.left = left
            self.right = right

    def __init__(self, items: Optional[Iterable[Tuple[Any, Any]]] = None):
        self._root = None
        self._size = 0
        if items is not None:
            for key, value in items:
                self.insert(key, value)

    # ------------------ Accessors ------------------
    def __len__(self) -> int:
        return self._size

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True if the map holds no entries."""
        return self._size == 0

    def begin(self) -> TreeIterator:
        """Return the position of the smallest key (end() when empty)."""
        walk = self._root
        if walk is None:
            return self.end()
        while walk.left is not None:
            walk = walk.left
        return TreeIterator(walk, self)

    @staticmethod
    def end() -> TreeIterator:
        return TreeIterator()

    # ------------------ Search ------------------
    def _find_node(self, key: Any):
        walk = self._root
        while walk is not None:
            if key < walk.key:
                walk = walk.left
            elif walk.key < key:
                walk = walk.right
            else:
                return walk
        return None

    def find(self, key: Any) -> TreeIterator:
        """Return the position holding key, or end() if it is absent."""
        node = self._find_node(key)
        if node is None:
            return self.end()
        return TreeIterator(node, self)

    # ------------------ Core mutations ------------------
    def insert(self, key: Any, value: Any) -> None:
        """Insert (key, value), overwriting the value if key is present."""
        if self._root is None:
            self._root = self._Node(key, value)
            self._size = 1
            return

        walk = self._root
        while True:
            if key < walk.key:
                if walk.left is None:
                    walk.left = self._Node(key, value)
                    break
                walk = walk.left
            elif walk.key < key:
                if walk.right is None:
                    walk.right = self._Node(key, value)
                    break
                walk = walk.right
            else:  # Key found, replace value
                walk.value = value
                return
        self._size += 1

    def _replace_child(self, parent, on_left: bool, child) -> None:
        """Put child into the slot parent holds on the given side (or the root)."""
        if parent is None:
            self._root = child
        elif on_left:
            parent.left = child
        else:
            parent.right = child

    def erase(self, key: Any) -> None:
        """Remove the entry for key; absent keys are ignored."""
        parent = None
        walk = self._root
        on_left = False

        while walk is not None:
            if key < walk.key:
                parent, walk, on_left = walk, walk.left, True
            elif walk.key < key:
                parent, walk, on_left = walk, walk.right, False
            else:
                break

        if walk is None:
            logger.debug("erase: key %r not present", key)
            return

        if walk.left is not None and walk.right is not None:
            # Promote the in-order predecessor by copying its entry down.
            pred_parent = walk
            pred = walk.left
            while pred.right is not None:
                pred_parent = pred
                pred = pred.right

            walk.key = pred.key
            walk.value = pred.value
            if pred_parent is walk:
                walk.left = pred.left
            else:
                pred_parent.right = pred.left
            logger.debug("erase: key %r replaced by predecessor %r", key, pred.key)
        else:
            child = walk.left if walk.left is not None else walk.right
            self._replace_child(parent, on_left, child)
            logger.debug("erase: key %r detached (%s)", key,
                         "leaf" if child is None else "one child")

        self._size -= 1

    def clear(self) -> None:
        """Remove all entries, releasing nodes without recursion."""
        pending = [self._root] if self._root is not None else []
        self._root = None
        self._size = 0

        released = 0
        while pending:
            node = pending.pop()
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
            node.left = node.right = None
            released += 1
        logger.debug("clear: released %d nodes", released)

    # ------------------ Range queries ------------------
    def range(self, low: Any, high: Any) -> SubRange:
        """Return a view over the entries with low <= key < high."""
        end = self.end()
        if not (low < high):
            logger.debug("range: empty bounds [%r, %r)", low, high)
            return SubRange(end, end)

        start = end
        finish = end
        for node in self._inorder_nodes():
            if start.is_end() and not (node.key < low) and node.key < high:
                start = TreeIterator(node, self)
            if not (node.key < high):
                finish = TreeIterator(node, self)
                break

        if start.is_end():
            finish = end
        return SubRange(start, finish)

    # ------------------ Traversal ------------------
    def _inorder_nodes(self) -> Iterator["OrderedMap._Node"]:
        """Generate nodes in key order with an explicit stack."""
        stack = []
        walk = self._root
        while stack or walk is not None:
            while walk is not None:
                stack.append(walk)
                walk = walk.left
            walk = stack.pop()
            yield walk
            walk = walk.right

    def __iter__(self) -> Iterator[Any]:
        """Generate an iteration of the map's keys in order."""
        for node in self._inorder_nodes():
            yield node.key

    def keys(self) -> Iterable[Any]:
        return iter(self)

    def values(self) -> Iterable[Any]:
        """Generate an iteration of the map's values in key order."""
        for node in self._inorder_nodes():
            yield node.value

    def items(self) -> Iterable[Tuple[Any, Any]]:
        for node in self._inorder_nodes():
            yield (node.key, node.value)

    # ------------------ Mapping protocol ------------------
    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Any) -> None:
        if self._find_node(key) is None:
            raise KeyError(key)
        self.erase(key)

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value associated with key, or default."""
        node = self._find_node(key)
        if node is None:
            return default
        return node.value

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{body}}})"
