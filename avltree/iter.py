from __future__ import annotations

from typing import Optional

from . import avl, base
from .base import Side


class TreeIter(object):
    """Lazy in-order walk over the closed node range [lower, upper].

    The tree must not be modified while an iterator over it is in use.
    """

    def __init__(
        self,
        tree: avl.AVLTree,
        lower: Optional[base.TreeNode],
        upper: Optional[base.TreeNode],
        rev: bool,
    ):
        # Parent links are weak, so the tree has to be kept alive while walking.
        self._tree = tree
        self._rev: bool = rev
        self._cur: Optional[base.TreeNode] = None
        self._end: Optional[base.TreeNode] = None

        if lower is not None and upper is not None and not (upper.value < lower.value):
            if not rev:
                self._cur = lower
                self._end = upper
            else:
                self._cur = upper
                self._end = lower

    def __iter__(self) -> TreeIter:
        return self

    def __reversed__(self) -> TreeIter:
        if not self._rev:
            return TreeIter(self._tree, self._cur, self._end, True)
        return TreeIter(self._tree, self._end, self._cur, False)

    def __next__(self):
        if self._cur is None:
            raise StopIteration()

        cur_node = self._cur

        if self._cur is not self._end:
            if not self._rev:
                self._cur = self._cur._neighbor(Side.RIGHT)
            else:
                self._cur = self._cur._neighbor(Side.LEFT)
        else:
            self._cur = None
            self._end = None

        return cur_node.value
