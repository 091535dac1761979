from . import base
from . import avl
from . import iter

from .base import Side, TreeNode
from .avl import AVLTree
from .iter import TreeIter

__all__ = [
    "AVLTree",
    "TreeNode",
    "TreeIter",
    "Side",
]
