# src/ordered_tree/db/errors.py
"""
Errores del árbol ordenado.
- KeyNotFoundError: find() no encontró la clave (es también un KeyError).
- InvalidArgumentError: entradas mal formadas (p.ej. listas paralelas de distinto largo).
"""
from typing import Any, Optional


class OrderedTreeError(Exception):
    """Base de todos los errores de ordered_tree."""


class KeyNotFoundError(OrderedTreeError, KeyError):
    def __init__(self, key: Any, tree_dump: Optional[str] = None):
        super().__init__(key)
        self.key = key
        self.tree_dump = tree_dump

    def __str__(self) -> str:
        msg = f"could not find key-value of: {self.key}"
        if self.tree_dump is not None:
            msg += f", in tree:\n\t{self.tree_dump}"
        return msg


class InvalidArgumentError(OrderedTreeError, ValueError):
    pass
