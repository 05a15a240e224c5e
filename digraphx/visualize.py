"""
Drawing helpers for weighted digraphs.

The graph is converted to a ``networkx.DiGraph`` (one edge per adjacency
entry, carrying a ``weight`` attribute) and rendered with matplotlib.

Example:
```python
from digraphx import make_graph, shortest_path
from digraphx.visualize import show_graph

g = make_graph(9, 11, seed=1)
show_graph(g, highlight=shortest_path(g, 0, 5))
```
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .exceptions import InvalidArgumentError
from .graph import Adjacency

Vertex = Hashable

_LAYOUTS = {
    "spring": lambda G: nx.spring_layout(G, seed=42),
    "kamada_kawai": nx.kamada_kawai_layout,
    "shell": nx.shell_layout,
    "circular": nx.circular_layout,
}


def to_networkx(g: Adjacency) -> nx.DiGraph:
    """Return ``g`` as a ``networkx.DiGraph`` with ``weight`` edge attributes."""
    G = nx.DiGraph()
    G.add_nodes_from(g)
    for u, row in g.items():
        for v, w in row.items():
            G.add_edge(u, v, weight=w)
    return G


def draw_graph(
    g: Adjacency,
    *,
    layout: str = "spring",
    show_weights: bool = True,
    highlight: Optional[Sequence[Vertex]] = None,
    node_size: int = 300,
    ax: Any = None,
) -> Any:
    """
    Draw ``g`` on ``ax`` (a new figure when omitted) and return the axes.

    ``highlight`` is a vertex sequence, typically a shortest path; its
    vertices and consecutive edges are drawn in red.
    """
    if layout not in _LAYOUTS:
        raise InvalidArgumentError(f"Unknown layout: {layout}")

    G = to_networkx(g)
    pos = _LAYOUTS[layout](G)
    if ax is None:
        _, ax = plt.subplots(figsize=(12, 10))

    path = list(highlight or [])
    path_edges = set(zip(path[:-1], path[1:]))
    on_path = set(path)

    nx.draw_networkx_nodes(
        G,
        pos,
        ax=ax,
        node_color=["tab:red" if n in on_path else "tab:blue" for n in G.nodes],
        node_size=node_size,
        alpha=0.9,
    )
    nx.draw_networkx_edges(
        G,
        pos,
        ax=ax,
        edge_color=["tab:red" if e in path_edges else "black" for e in G.edges],
        arrowstyle="->",
        arrowsize=12,
        width=1.2,
        alpha=0.6,
    )
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=8, font_color="white")

    if show_weights:
        nx.draw_networkx_edge_labels(
            G,
            pos,
            ax=ax,
            edge_labels=nx.get_edge_attributes(G, "weight"),
            font_size=7,
        )

    ax.set_title("Weighted digraph", fontsize=14)
    ax.set_axis_off()
    return ax


def show_graph(g: Adjacency, **kwargs: Any) -> None:
    """Draw ``g`` and open the matplotlib window."""
    draw_graph(g, **kwargs)
    plt.tight_layout()
    plt.show()


__all__ = ["draw_graph", "show_graph", "to_networkx"]
