from __future__ import annotations

import weakref
from typing import Generic, TypeVar, Optional

T = TypeVar("T")


class Side(object):
    LEFT = 0
    RIGHT = 1

    @staticmethod
    def opposite(side: int) -> int:
        return Side.RIGHT if side == Side.LEFT else Side.LEFT


class TreeNode(Generic[T]):
    """A single position within an AVL tree.

    Children are owned through the `_left` and `_right` links; the parent is
    only held through a weak reference and is never kept alive by its
    children.
    """

    def __init__(self, value: T):
        self.value: T = value
        self.height: int = 1

        self._left: Optional[TreeNode[T]] = None
        self._right: Optional[TreeNode[T]] = None
        self._parent_ref: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional[TreeNode[T]]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def left(self) -> Optional[TreeNode[T]]:
        return self._left

    @property
    def right(self) -> Optional[TreeNode[T]]:
        return self._right

    def child(self, side: int) -> Optional[TreeNode[T]]:
        if side == Side.LEFT:
            return self._left
        return self._right

    def child_height(self, side: int) -> int:
        """Cached height of the child on `side`, or 0 if there is none."""
        child = self.child(side)
        if child is None:
            return 0
        return child.height

    def update_height(self):
        self.height = 1 + max(
            self.child_height(Side.LEFT), self.child_height(Side.RIGHT)
        )

    def balance_factor(self) -> int:
        return self.child_height(Side.RIGHT) - self.child_height(Side.LEFT)

    def _set_parent(self, parent: Optional[TreeNode[T]]):
        if parent is None:
            self._parent_ref = None
        else:
            self._parent_ref = weakref.ref(parent)

    def _set_child(self, side: int, child: Optional[TreeNode[T]]):
        if side == Side.LEFT:
            self._left = child
        else:
            self._right = child

        if child is not None:
            child._set_parent(self)

    def _is_left_child(self) -> bool:
        parent = self.parent
        return (parent is not None) and (parent._left is self)

    def _rotate(self, side: int) -> TreeNode[T]:
        """Rotate this subtree towards `side`.

        The child on the opposite side is promoted into this node's position
        and this node becomes its `side` child. Returns the promoted node; the
        caller must still point the old parent slot (or the tree root) at it.
        """
        other = Side.opposite(side)
        promoted: TreeNode[T] = self.child(other)
        parent = self.parent

        self._set_child(other, promoted.child(side))
        promoted._set_child(side, self)
        promoted._set_parent(parent)

        # self is now below promoted, so its height has to be fixed first.
        self.update_height()
        promoted.update_height()
        return promoted

    def _replacement(self) -> TreeNode[T]:
        """Find the node whose value replaces this one on deletion.

        This is the in-order predecessor if there is a left subtree, and the
        in-order successor otherwise. The returned node never has more than
        one child.
        """
        if self._left is not None:
            cur = self._left
            while cur._right is not None:
                cur = cur._right
        else:
            cur = self._right
            while cur._left is not None:
                cur = cur._left
        return cur

    def _extreme(self, side: int) -> TreeNode[T]:
        cur = self
        while cur.child(side) is not None:
            cur = cur.child(side)
        return cur

    def _neighbor(self, side: int) -> Optional[TreeNode[T]]:
        """The in-order successor (`Side.RIGHT`) or predecessor (`Side.LEFT`)."""
        child = self.child(side)
        if child is not None:
            return child._extreme(Side.opposite(side))

        cur = self
        parent = cur.parent
        while parent is not None and parent.child(side) is cur:
            cur = parent
            parent = cur.parent
        return parent

    def __repr__(self) -> str:
        return "TreeNode({!r}, height={})".format(self.value, self.height)
