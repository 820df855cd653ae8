# src/ordered_tree/db/node.py
from typing import Any, Optional


class TreeNode:
    """Un par clave/valor del árbol. La clave no cambia; left/right son hijos exclusivos."""

    __slots__ = ("_key", "value", "left", "right")

    def __init__(self, key: Any, value: Any):
        self._key = key
        self.value = value
        self.left: Optional['TreeNode'] = None
        self.right: Optional['TreeNode'] = None

    @property
    def key(self) -> Any:
        return self._key

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        return f"TreeNode({self._key!r}, {self.value!r})"
