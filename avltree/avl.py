from __future__ import annotations

import logging
from collections.abc import Set
from typing import Generic, TypeVar, Optional, Iterable, Iterator

from .base import Side, TreeNode
from .iter import TreeIter

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AVLTree(Generic[T], Set):
    """An ordered set of unique values backed by an AVL tree.

    `insert`, `remove` and `contains` all run in O(log n). Duplicate inserts
    and removals of absent values are reported through the boolean return
    value and leave the tree untouched.

    Removing a value held by a node with two children copies the value of its
    in-order predecessor into that node and detaches the predecessor's node
    instead. Nodes therefore address positions in the tree, not values: a
    `TreeNode` obtained before a removal may hold a different value after it.
    """

    def __init__(self, values: Iterable[T] = ()):
        self._root: Optional[TreeNode[T]] = None
        self._len: int = 0

        for value in values:
            self.insert(value)

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    @property
    def height(self) -> int:
        if self._root is None:
            return 0
        return self._root.height

    def _find(self, value: T) -> Optional[TreeNode[T]]:
        cur = self._root
        while cur is not None:
            if value == cur.value:
                return cur
            elif value < cur.value:
                cur = cur._left
            else:
                cur = cur._right
        return None

    def contains(self, value: T) -> bool:
        return self._find(value) is not None

    def insert(self, value: T) -> bool:
        """Add `value` to the tree.

        Returns False, without modifying the tree, if the value is already
        present.
        """
        if self._root is None:
            self._root = TreeNode(value)
            self._len = 1
            return True

        cur = self._root
        while True:
            if value == cur.value:
                logger.debug("rejected duplicate value %r", value)
                return False

            side = Side.LEFT if value < cur.value else Side.RIGHT
            child = cur.child(side)
            if child is None:
                break
            cur = child

        cur._set_child(side, TreeNode(value))
        self._len += 1
        self._rebalance(cur)
        return True

    def remove(self, value: T) -> bool:
        """Remove `value` from the tree.

        Returns False, without modifying the tree, if the value is not
        present. If the node holding `value` has two children, it keeps its
        position and takes over its in-order predecessor's value; the
        predecessor's node is the one that gets detached.
        """
        node = self._find(value)
        if node is None:
            logger.debug("value %r not present, nothing removed", value)
            return False

        if node._left is not None and node._right is not None:
            replacement = node._replacement()
            node.value = replacement.value
            node = replacement

        self._splice(node)
        return True

    def _replace_child(
        self,
        parent: Optional[TreeNode[T]],
        was_left: bool,
        new: Optional[TreeNode[T]],
    ):
        if new is not None:
            new._set_parent(parent)

        if parent is None:
            self._root = new
        elif was_left:
            parent._left = new
        else:
            parent._right = new

    def _splice(self, node: TreeNode[T]):
        # node has at most one child here.
        child = node._left if node._left is not None else node._right
        parent = node.parent
        self._replace_child(parent, node._is_left_child(), child)

        node._left = None
        node._right = None
        node._set_parent(None)
        self._len -= 1

        self._rebalance(parent)

    def _rotate(self, node: TreeNode[T], side: int) -> TreeNode[T]:
        logger.debug(
            "rotating %s at value %r",
            "left" if side == Side.LEFT else "right",
            node.value,
        )
        was_left = node._is_left_child()
        promoted = node._rotate(side)
        self._replace_child(promoted.parent, was_left, promoted)
        return promoted

    def _rebalance(self, node: Optional[TreeNode[T]]):
        while node is not None:
            balance = node.balance_factor()

            if -1 <= balance <= 1:
                old_height = node.height
                node.update_height()
                if node.height == old_height:
                    return
                node = node.parent
                continue

            heavy_side = Side.RIGHT if balance > 0 else Side.LEFT
            heavy = node.child(heavy_side)

            if heavy.balance_factor() * balance < 0:
                # heavy child leans the other way: double rotation.
                self._rotate(heavy, heavy_side)

            subtree = self._rotate(node, Side.opposite(heavy_side))
            node = subtree.parent

    def _first_node(self) -> TreeNode[T]:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._extreme(Side.LEFT)

    def _last_node(self) -> TreeNode[T]:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._extreme(Side.RIGHT)

    def min(self) -> T:
        return self._first_node().value

    def max(self) -> T:
        return self._last_node().value

    def pop_min(self) -> T:
        node = self._first_node()
        r = node.value
        self._splice(node)
        return r

    def pop_max(self) -> T:
        node = self._last_node()
        r = node.value
        self._splice(node)
        return r

    # inclusive lower bound
    def _lower_bound(self, bound: T) -> Optional[TreeNode[T]]:
        cur = self._root
        ret = None
        while cur is not None:
            if cur.value < bound:
                cur = cur._right
            else:
                ret = cur
                cur = cur._left
        return ret

    # exclusive upper bound
    def _upper_bound(self, bound: T) -> Optional[TreeNode[T]]:
        cur = self._root
        ret = None
        while cur is not None:
            if cur.value < bound:
                ret = cur
                cur = cur._right
            else:
                cur = cur._left
        return ret

    def values(
        self,
        left_bound: Optional[T] = None,
        right_bound: Optional[T] = None,
        reverse: bool = False,
    ) -> Iterator[T]:
        """Iterate lazily over the values in [left_bound, right_bound).

        Either bound may be omitted. Every call returns a fresh iterator.
        """
        if (
            left_bound is not None
            and right_bound is not None
            and (right_bound < left_bound)
        ):
            return self.values(right_bound, left_bound, reverse)

        if self._root is None:
            return TreeIter(self, None, None, reverse)

        if left_bound is not None:
            lb = self._lower_bound(left_bound)
        else:
            lb = self._first_node()

        if right_bound is not None:
            rb = self._upper_bound(right_bound)
        else:
            rb = self._last_node()

        return TreeIter(self, lb, rb, reverse)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def __reversed__(self) -> Iterator[T]:
        return self.values(reverse=True)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, list(self))
