# src/ordered_tree/viz/visualizer.py
"""
Dibuja un OrderedTree con networkx + matplotlib.
x = posición in-order, y = -profundidad, así el dibujo respeta el orden de claves.
Si no están instalados, lanza ImportError al importarlo (CLI lo manejará).
"""
from pathlib import Path
from typing import Optional

import networkx as nx
import matplotlib.pyplot as plt


def tree_layout(G: nx.DiGraph):
    return {n: (float(n), -float(data["depth"])) for n, data in G.nodes(data=True)}


def visualize_tree(tree, title: str = "OrderedTree", out_path: Optional[Path] = None,
                   show_values: bool = False):
    """
    tree: OrderedTree (usa tree.to_networkx())
    out_path: si se da, guarda la figura ahí en lugar de mostrarla
    show_values: etiqueta "key: value" en vez de solo la clave
    """
    G = tree.to_networkx()
    pos = tree_layout(G)

    # el ancho crece con el número de nodos, con tope para árboles grandes
    width = min(max(6, len(G) * 0.6), 30)
    height = min(max(4, tree.height() * 0.9), 20)
    fig = plt.figure(figsize=(width, height))

    nx.draw_networkx_edges(G, pos, arrows=False, width=1.0, alpha=0.7)
    nx.draw_networkx_nodes(G, pos, node_size=400, node_color="lightsteelblue")
    # labels pequeños pueden saturar, así que solo si el árbol es pequeño
    if len(G) < 200:
        if show_values:
            labels = {n: f"{d['key']}: {d['value']}" for n, d in G.nodes(data=True)}
        else:
            labels = {n: str(d["key"]) for n, d in G.nodes(data=True)}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=8)

    plt.title(f"{title} (size={tree.size}, height={tree.height()})")
    plt.axis('off')
    if out_path is not None:
        out = Path(out_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out, bbox_inches="tight")
        plt.close(fig)
        return out
    plt.show()
    return None
