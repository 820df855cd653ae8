# src/ordered_tree/io.py
"""
Carga de pares clave/valor desde CSV (o .csv.gz) para construir un OrderedTree.
Solo lectura: el árbol vive en memoria, no se guarda a disco.
"""
from pathlib import Path
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from ordered_tree.db.errors import InvalidArgumentError
from ordered_tree.db.tree import OrderedTree

DEFAULT_KEY_COL = "key"
DEFAULT_VALUE_COL = "value"

KEY_TYPES = {"int": np.int64, "float": np.float64, "str": np.str_}


def load_pairs_csv(path: Path,
                   key_col: str = DEFAULT_KEY_COL,
                   value_col: str = DEFAULT_VALUE_COL,
                   key_type: Optional[str] = None) -> Tuple[List[Any], List[Any]]:
    """
    Lee dos columnas paralelas (claves, valores) en el orden del archivo.

    Args:
      path: archivo .csv o .csv.gz
      key_col / value_col: nombres de columna
      key_type: "int", "float" o "str" para forzar el tipo de las claves (opcional)

    Retorna:
      (keys, values) como listas de escalares de Python, mismo largo.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    if key_type is not None and key_type not in KEY_TYPES:
        raise InvalidArgumentError(f"key_type must be one of {sorted(KEY_TYPES)}, got {key_type!r}")

    comp = "gzip" if p.suffix == ".gz" else None
    # con key_type=str leemos la clave como texto para no perder ceros a la izquierda
    dtype = {key_col: str} if key_type == "str" else None
    df = pd.read_csv(p, compression=comp, dtype=dtype)

    missing = [c for c in (key_col, value_col) if c not in df.columns]
    if missing:
        raise InvalidArgumentError(f"missing column(s) {missing} in {p}; found {list(df.columns)}")

    n_before = len(df)
    df = df.dropna(subset=[key_col])
    keys = df[key_col].to_numpy()
    if len(df) < n_before:
        print(f"Warning: {n_before - len(df)} fila(s) sin clave descartadas en {p}")
        # los huecos fuerzan float64 en pandas; si lo que queda es entero, volver a int
        if key_type is None and keys.dtype.kind == "f" and np.all(np.mod(keys, 1) == 0):
            keys = keys.astype(np.int64)

    if key_type is not None:
        try:
            converted = keys.astype(KEY_TYPES[key_type])
            numeric = keys.astype(np.float64) if key_type == "int" else None
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(f"cannot convert column {key_col!r} to {key_type}: {e}") from e
        # astype(int) trunca 1.9 -> 1 sin avisar
        if numeric is not None and not np.array_equal(converted, numeric):
            raise InvalidArgumentError(f"column {key_col!r} has non-integer keys, cannot convert to int")
        keys = converted

    values = df[value_col].to_numpy()
    return keys.tolist(), values.tolist()


def build_tree_from_csv(path: Path,
                        key_col: str = DEFAULT_KEY_COL,
                        value_col: str = DEFAULT_VALUE_COL,
                        key_type: Optional[str] = None,
                        dump_on_miss: Optional[bool] = None) -> OrderedTree:
    keys, values = load_pairs_csv(path, key_col, value_col, key_type)
    return OrderedTree.from_arrays(keys, values, dump_on_miss=dump_on_miss)


def tree_to_frame(tree: OrderedTree) -> pd.DataFrame:
    """Tabla in-order (key, value) del árbol, para mostrar por pantalla."""
    return pd.DataFrame(tree.items(), columns=["key", "value"])
