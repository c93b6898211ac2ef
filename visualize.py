from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph, Node
from reconstruction import PathResult, path_edges


def build_networkx_graph(graph: Graph) -> nx.MultiDiGraph:
    g = nx.MultiDiGraph()
    g.add_nodes_from(graph.nodes)
    for edge in graph.edges:
        g.add_edge(edge.origin, edge.target, weight=edge.weight, directed=edge.directed)
        if not edge.directed:
            g.add_edge(edge.target, edge.origin, weight=edge.weight, directed=False)
    return g


def compute_layout(
    graph_nx: nx.MultiDiGraph,
    positions: Mapping[Node, Sequence[float]] | None = None,
) -> Dict[Node, Tuple[float, float]]:
    if positions and all(node in positions for node in graph_nx.nodes):
        return {node: tuple(positions[node]) for node in graph_nx.nodes}
    return nx.spring_layout(graph_nx, seed=42)


def edge_labels(graph: Graph) -> Dict[Tuple[Node, Node], str]:
    labels: Dict[Tuple[Node, Node], str] = {}
    for edge in graph.edges:
        key = (edge.origin, edge.target)
        if key in labels:
            labels[key] = f"{labels[key]}|{edge.weight}"
        else:
            labels[key] = str(edge.weight)
    return labels


def draw_path_figure(
    graph: Graph,
    result: PathResult,
    output: Path | None,
    positions: Mapping[Node, Sequence[float]] | None = None,
    show: bool = False,
) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx, positions)
    fig, ax = plt.subplots(figsize=(10, 8))

    simple = nx.DiGraph(graph_nx)
    nx.draw_networkx_edges(
        simple, layout, ax=ax, edge_color="lightgray", width=1.0, arrows=graph.is_directed
    )

    route = path_edges(result.nodes)
    if route:
        nx.draw_networkx_edges(
            simple,
            layout,
            edgelist=route,
            edge_color="#d62728",
            width=2.5,
            arrows=True,
            ax=ax,
        )

    node_colors = ["#d62728" if node in result.nodes else "#9ecae1" for node in simple.nodes]
    nx.draw_networkx_nodes(simple, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(simple, layout, font_size=10, ax=ax)
    nx.draw_networkx_edge_labels(simple, layout, edge_labels=edge_labels(graph), font_size=8, ax=ax)

    summary_lines = [
        f"Path: {' -> '.join(str(node) for node in result.nodes)}",
        f"Distance: {result.distance}",
        f"Hops: {result.hops}",
    ]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(f"Shortest path {result.source} -> {result.target}")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
