# scripts/run_demo.py
"""
Compara la forma del árbol según el orden de inserción (sin balanceo):
claves ordenadas -> cadena de altura n; claves barajadas -> altura ~ O(log n).
Uso (ejemplo, desde la raíz del proyecto):
  python scripts/run_demo.py --n 200 --seed 0
  python scripts/run_demo.py --n 30 --plot --out results/demo_tree.png
"""
import argparse
import time

import numpy as np

try:
    from ordered_tree.db.tree import OrderedTree
except Exception:
    print("ERROR: no se pudo importar ordered_tree. Instala el paquete (pip install -e .) o ejecuta desde la raíz.")
    raise


def timed_finds(tree: OrderedTree, keys) -> float:
    t0 = time.perf_counter()
    for k in keys:
        tree.find(k)
    return time.perf_counter() - t0


def main(argv=None):
    p = argparse.ArgumentParser(description="Ordered vs shuffled insertion into an unbalanced BST")
    p.add_argument("--n", type=int, default=200, help="Número de claves (ojo: > ~900 ordenadas supera el límite de recursión)")
    p.add_argument("--seed", type=int, default=None, help="Semilla aleatoria para reproducibilidad (numpy)")
    p.add_argument("--plot", action="store_true", help="Dibujar el árbol barajado")
    p.add_argument("--out", default=None, help="Archivo donde guardar la figura")
    args = p.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    keys = np.arange(args.n)
    values = [f"v{k}" for k in keys.tolist()]

    skewed = OrderedTree.from_arrays(keys, values)
    perm = rng.permutation(args.n)
    shuffled = OrderedTree.from_arrays(keys[perm], [values[i] for i in perm.tolist()])

    print("=== FORMA DEL ÁRBOL ===")
    print("n:", args.n)
    print("Ordenadas  -> altura:", skewed.height(), "| find(todas) s:", round(timed_finds(skewed, keys.tolist()), 5))
    print("Barajadas  -> altura:", shuffled.height(), "| find(todas) s:", round(timed_finds(shuffled, keys.tolist()), 5))
    # mismo contenido, mismo recorrido in-order
    print("Mismo recorrido in-order:", skewed.values() == shuffled.values())

    if args.plot:
        try:
            from ordered_tree.viz.visualizer import visualize_tree
            visualize_tree(shuffled, title="Inserción barajada", out_path=args.out)
        except Exception as ex:
            print("No se puede visualizar (falta networkx/matplotlib o hay error):", ex)


if __name__ == "__main__":
    main()
