# src/ordered_tree/cli.py
import argparse
import sys

from ordered_tree.db.errors import KeyNotFoundError
from ordered_tree.db.tree import OrderedTree
from ordered_tree.io import DEFAULT_KEY_COL, DEFAULT_VALUE_COL, build_tree_from_csv, tree_to_frame

# visualización opcional
try:
    from ordered_tree.viz.visualizer import visualize_tree
    HAS_VIS = True
except Exception:
    HAS_VIS = False

PY_KEY_TYPES = {"int": int, "float": float, "str": str}


def load_tree(args) -> OrderedTree:
    return build_tree_from_csv(args.csv, key_col=args.key_col, value_col=args.value_col,
                               key_type=args.key_type, dump_on_miss=not args.no_dump)


def coerce_key(raw: str, key_type, tree: OrderedTree):
    """La clave llega como texto; se convierte al tipo pedido o al de las claves del árbol."""
    if key_type is not None:
        return PY_KEY_TYPES[key_type](raw)
    if tree.root is not None and isinstance(tree.root.key, (int, float)):
        return type(tree.root.key)(raw)
    return raw


def plot_tree(tree: OrderedTree, args, title: str):
    if not HAS_VIS:
        print("Visualización no disponible. Instala networkx y matplotlib.")
        return
    out = visualize_tree(tree, title=title, out_path=args.out)
    if out is not None:
        print("Figura guardada en", out)


def cmd_show(args) -> int:
    tree = load_tree(args)
    print("=== ÁRBOL ===")
    print(tree)
    print("Tamaño:", tree.size, "| Altura:", tree.height())
    if tree.size:
        print(tree_to_frame(tree).to_string(index=False))
    if args.plot:
        plot_tree(tree, args, title=str(args.csv))
    return 0


def cmd_find(args) -> int:
    tree = load_tree(args)
    key = coerce_key(args.key, args.key_type, tree)
    value = tree.find(key)
    print("=== RESULTADO ===")
    print("Clave:", key)
    print("Valor:", value)
    return 0


def cmd_demo(args) -> int:
    ints = OrderedTree.from_arrays([5, 3, 8, 1, 4, 7, 9], [50, 30, 80, 10, 40, 70, 90])
    print("int -> int:   ", ints)
    print("  find(4) =", ints.find(4), "| altura:", ints.height())

    prices = OrderedTree.from_arrays(["pera", "manzana", "uva", "kiwi"], [1.25, 0.8, 3.1, 0.45])
    print("str -> float: ", prices)
    print("  find('uva') =", prices.find("uva"), "| altura:", prices.height())

    dup = OrderedTree()
    dup.insert(2, "x")
    dup.insert(2, "y")
    print("duplicados:   ", dup, "| find(2) =", dup.find(2))
    if args.plot:
        plot_tree(ints, args, title="demo int -> int")
    return 0


def add_source_args(parser: argparse.ArgumentParser):
    parser.add_argument("--csv", required=True, help="CSV (o .csv.gz) con columnas de clave y valor")
    parser.add_argument("--key-col", default=DEFAULT_KEY_COL, help="Columna de claves")
    parser.add_argument("--value-col", default=DEFAULT_VALUE_COL, help="Columna de valores")
    parser.add_argument("--key-type", choices=sorted(PY_KEY_TYPES), default=None,
                        help="Forzar tipo de clave (por defecto el que infiera pandas)")
    parser.add_argument("--no-dump", action="store_true",
                        help="No incluir el contenido del árbol en el error de clave no encontrada")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ordered-tree")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("show", help="Construir el árbol desde un CSV y mostrarlo en orden")
    add_source_args(ps)
    ps.add_argument("--plot", action="store_true", help="Dibujar el árbol (si hay dependencias)")
    ps.add_argument("--out", help="Guardar la figura en este archivo en vez de mostrarla")
    ps.set_defaults(func=cmd_show)

    pf = sub.add_parser("find", help="Buscar el valor de una clave")
    add_source_args(pf)
    pf.add_argument("--key", required=True, help="Clave a buscar")
    pf.set_defaults(func=cmd_find)

    pdemo = sub.add_parser("demo", help="Árboles de ejemplo int->int y str->float")
    pdemo.add_argument("--plot", action="store_true")
    pdemo.add_argument("--out", help="Guardar la figura en este archivo")
    pdemo.set_defaults(func=cmd_demo)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except KeyNotFoundError as e:
        print(f"KeyNotFoundError: {e}", file=sys.stderr)
        return 1
    except (ValueError, FileNotFoundError) as e:  # incluye InvalidArgumentError y claves mal escritas
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
