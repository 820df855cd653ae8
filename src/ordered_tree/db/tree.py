# src/ordered_tree/db/tree.py
"""
Árbol binario de búsqueda (sin balanceo) de pares clave/valor.
API: insert(key, value), find(key), clear(), to_string() / str(tree), size.

Reglas de orden:
- key <= node.key va al subárbol izquierdo, key > node.key al derecho.
- Una clave repetida NO sobreescribe: se crea otro nodo en el subárbol izquierdo,
  y find() devuelve el primer nodo igual que encuentra bajando desde la raíz.
Todo es recursivo; la profundidad depende del orden de inserción
(claves ordenadas dejan una cadena de profundidad n).
"""
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .errors import InvalidArgumentError, KeyNotFoundError
from .node import TreeNode


def _as_list(seq) -> List[Any]:
    # numpy arrays / pandas Series -> escalares de Python
    if hasattr(seq, "tolist"):
        return seq.tolist()
    return list(seq)


class OrderedTree:
    """BST de nodos enlazados. root es None si y solo si size == 0."""

    # incluir str(tree) en KeyNotFoundError (útil para depurar, cuesta O(n))
    dump_on_miss: bool = True

    def __init__(self, keys: Optional[Sequence[Any]] = None, values: Optional[Sequence[Any]] = None,
                 dump_on_miss: Optional[bool] = None):
        self.root: Optional[TreeNode] = None
        self._size = 0
        if dump_on_miss is not None:
            self.dump_on_miss = dump_on_miss
        if keys is not None or values is not None:
            self._insert_all(keys if keys is not None else [], values if values is not None else [])

    @classmethod
    def from_arrays(cls, keys: Sequence[Any], values: Sequence[Any], **kwargs) -> 'OrderedTree':
        """Construye el árbol insertando (keys[i], values[i]) en el orden dado."""
        return cls(keys, values, **kwargs)

    def _insert_all(self, keys: Sequence[Any], values: Sequence[Any]) -> None:
        keys = _as_list(keys)
        values = _as_list(values)
        if len(keys) != len(values):
            raise InvalidArgumentError(
                f"keys and values must have the same length ({len(keys)} != {len(values)})")
        for idx in range(len(keys)):
            self.insert(keys[idx], values[idx])

    @property
    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    # -------------------------
    # INSERT
    # -------------------------
    def insert(self, key: Any, value: Any) -> None:
        self.root = self._insert(self.root, key, value)

    def _insert(self, node: Optional[TreeNode], key: Any, value: Any) -> TreeNode:
        if node is None:
            new_node = TreeNode(key, value)
            self._size += 1
            return new_node
        if key <= node.key:
            node.left = self._insert(node.left, key, value)
        else:
            node.right = self._insert(node.right, key, value)
        return node

    # -------------------------
    # FIND
    # -------------------------
    def find(self, key: Any) -> Any:
        """
        Devuelve el valor asociado a key.
        Lanza KeyNotFoundError si la clave no está en el camino de búsqueda.
        """
        node = self._find(self.root, key)
        if node is None:
            dump = self.to_string() if self.dump_on_miss else None
            raise KeyNotFoundError(key, dump)
        return node.value

    def _find(self, node: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
        if node is None:
            return None
        if node.key == key:
            return node
        if key < node.key:
            return self._find(node.left, key)
        return self._find(node.right, key)

    def get(self, key: Any, default: Any = None) -> Any:
        node = self._find(self.root, key)
        return default if node is None else node.value

    def __contains__(self, key: Any) -> bool:
        return self._find(self.root, key) is not None

    # -------------------------
    # STRING
    # -------------------------
    def to_string(self) -> str:
        return f"<BinaryTree> size: {self._size} values: [ {self._str(self.root)}]"

    def _str(self, node: Optional[TreeNode]) -> str:
        if node is None:
            return ""
        return f"{self._str(node.left)}{node.value} {self._str(node.right)}"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"OrderedTree(size={self._size})"

    # -------------------------
    # CLEAR
    # -------------------------
    def clear(self) -> None:
        """Libera todos los nodos (post-orden) y deja el árbol vacío."""
        self._clear(self.root)
        self.root = None
        self._size = 0

    def _clear(self, node: Optional[TreeNode]) -> None:
        if node is None:
            return
        self._clear(node.left)
        self._clear(node.right)
        node.left = None
        node.right = None

    # -------------------------
    # SNAPSHOTS (listas, no iteradores vivos)
    # -------------------------
    def _inorder(self, node: Optional[TreeNode], visit: Callable[[TreeNode], None]) -> None:
        if node is None:
            return
        self._inorder(node.left, visit)
        visit(node)
        self._inorder(node.right, visit)

    def items(self) -> List[Tuple[Any, Any]]:
        res: List[Tuple[Any, Any]] = []
        self._inorder(self.root, lambda n: res.append((n.key, n.value)))
        return res

    def keys(self) -> List[Any]:
        return [k for k, _ in self.items()]

    def values(self) -> List[Any]:
        return [v for _, v in self.items()]

    def height(self) -> int:
        """Número de nodos en el camino raíz-hoja más largo (0 si está vacío)."""
        return self._height(self.root)

    def _height(self, node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        if node.is_leaf():
            return 1
        return 1 + max(self._height(node.left), self._height(node.right))

    def to_networkx(self):
        """
        Exporta el árbol a un networkx.DiGraph.
        - id de nodo: posición en el recorrido in-order (las claves pueden repetirse)
        - atributos: key, value, depth; aristas padre->hijo con side "L"/"R"
        Requiere networkx instalado.
        """
        import networkx as nx
        G = nx.DiGraph()
        counter = [0]

        def add(node: Optional[TreeNode], depth: int) -> Optional[int]:
            if node is None:
                return None
            left_id = add(node.left, depth + 1)
            node_id = counter[0]
            counter[0] += 1
            G.add_node(node_id, key=node.key, value=node.value, depth=depth)
            right_id = add(node.right, depth + 1)
            if left_id is not None:
                G.add_edge(node_id, left_id, side="L")
            if right_id is not None:
                G.add_edge(node_id, right_id, side="R")
            return node_id

        add(self.root, 0)
        return G
