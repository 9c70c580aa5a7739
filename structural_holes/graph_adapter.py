"""
Structural Holes — Graph Adapter

Read-only view over a networkx Graph/DiGraph exposing exactly the
adjacency queries the constraint engine consumes:

- vertex set
- mode-filtered neighbors (both / out / in)
- edge existence
- non-negative edge weight lookup

Weighted vs. unweighted is decided once, when the adapter is built,
so the formulas never inspect the graph type themselves.

Also provides helpers for building graphs from node/edge DataFrames.
"""

import logging
from itertools import chain
from typing import Optional

import networkx as nx
import pandas as pd

from .config import (
    DEFAULT_WEIGHT_ATTR,
    EDGE_FROM_COL,
    EDGE_TO_COL,
    MISSING_WEIGHT_DEFAULT,
    NODE_ID_COL,
)
from .errors import NegativeWeightError
from .validation import Mode

logger = logging.getLogger(__name__)


class GraphAdapter:
    """
    Adjacency queries over a networkx graph.

    Args:
        G: networkx Graph or DiGraph (multigraphs are not supported)
        weight: Edge attribute holding the tie strength
        weighted: Force weighted/unweighted treatment. None = weighted
            when any edge carries the ``weight`` attribute.
    """

    def __init__(self, G: nx.Graph, weight: str = DEFAULT_WEIGHT_ATTR,
                 weighted: Optional[bool] = None):
        if G.is_multigraph():
            raise nx.NetworkXNotImplemented("not implemented for multigraph type")
        self.G = G
        self.weight_attr = weight

        if weighted is None:
            n_with_attr = sum(1 for _, _, d in G.edges(data=True) if weight in d)
            weighted = n_with_attr > 0
            if weighted and n_with_attr < G.number_of_edges():
                logger.warning(
                    f"{G.number_of_edges() - n_with_attr} of {G.number_of_edges()} edges "
                    f"lack '{weight}'; reading them as {MISSING_WEIGHT_DEFAULT}"
                )
        self._weighted = bool(weighted)

        logger.debug(
            f"Wrapped {'directed' if G.is_directed() else 'undirected'} graph: "
            f"{G.number_of_nodes()} nodes, {G.number_of_edges()} edges, "
            f"weighted={self._weighted}"
        )

    def __repr__(self) -> str:
        return (f"GraphAdapter(nodes={self.G.number_of_nodes()}, "
                f"edges={self.G.number_of_edges()}, weighted={self._weighted})")

    def vertices(self):
        return self.G.nodes

    def is_directed(self) -> bool:
        return self.G.is_directed()

    def is_weighted(self) -> bool:
        return self._weighted

    def neighbors(self, i, mode=Mode.BOTH) -> list:
        """
        Neighbors of ``i`` under ``mode``.

        For directed graphs 'both' is the union of successors and
        predecessors, each listed once, successors first. Undirected graphs
        ignore the mode. Self-loops are not filtered here.
        """
        G = self.G
        if not G.is_directed():
            return list(G.neighbors(i))
        if mode == Mode.OUT:
            return list(G.successors(i))
        if mode == Mode.IN:
            return list(G.predecessors(i))
        return list(dict.fromkeys(chain(G.successors(i), G.predecessors(i))))

    def has_edge(self, i, j) -> bool:
        return self.G.has_edge(i, j)

    def weight(self, i, j) -> float:
        """
        Tie strength of i -> j.

        0.0 when the edge is absent, 1.0 for any edge of an unweighted
        graph, otherwise the weight attribute. Negative (or NaN) weights
        raise NegativeWeightError.
        """
        data = self.G.get_edge_data(i, j)
        if data is None:
            return 0.0
        if not self._weighted:
            return 1.0
        w = data.get(self.weight_attr, MISSING_WEIGHT_DEFAULT)
        if not w >= 0:
            raise NegativeWeightError((i, j), w)
        return float(w)


def as_adapter(graph, weight: str = DEFAULT_WEIGHT_ATTR) -> GraphAdapter:
    """Wrap a networkx graph; adapters pass through unchanged."""
    if isinstance(graph, GraphAdapter):
        return graph
    if isinstance(graph, nx.Graph):
        return GraphAdapter(graph, weight=weight)
    raise TypeError(
        f"Expected a networkx graph or GraphAdapter, got {type(graph).__name__}"
    )


# =============================================================================
# Graph Construction Helpers
# =============================================================================

def build_graph(edges_df: pd.DataFrame, nodes_df: Optional[pd.DataFrame] = None,
                directed: bool = False, weight_col: str = DEFAULT_WEIGHT_ATTR) -> nx.Graph:
    """
    Build a graph from canonical edge (and optional node) tables.

    Args:
        edges_df: DataFrame with from_id, to_id and optionally a weight column
        nodes_df: Optional DataFrame with node_id plus attribute columns.
            Lets isolated nodes appear in the graph.
        directed: Build a DiGraph instead of a Graph
        weight_col: Column copied onto each edge as its weight attribute

    Returns:
        nx.Graph or nx.DiGraph
    """
    for col in (EDGE_FROM_COL, EDGE_TO_COL):
        if col not in edges_df.columns:
            raise ValueError(f"Missing required edge column: {col}")
    if nodes_df is not None and NODE_ID_COL not in nodes_df.columns:
        raise ValueError(f"Missing required node column: {NODE_ID_COL}")

    G = nx.DiGraph() if directed else nx.Graph()

    # Column-wise iteration keeps integer ids integral (iterrows upcasts
    # mixed int/float rows to float)
    if nodes_df is not None:
        for attrs in nodes_df.to_dict("records"):
            G.add_node(attrs.pop(NODE_ID_COL), **attrs)

    sources = edges_df[EDGE_FROM_COL]
    targets = edges_df[EDGE_TO_COL]
    if weight_col in edges_df.columns:
        for u, v, w in zip(sources, targets, edges_df[weight_col]):
            if pd.notna(w):
                G.add_edge(u, v, **{weight_col: w})
            else:
                G.add_edge(u, v)
    else:
        G.add_edges_from(zip(sources, targets))

    logger.debug(f"Built graph from tables: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G


def relabel_one_based(G: nx.Graph) -> nx.Graph:
    """Relabel nodes to consecutive integers starting at 1 (node order kept)."""
    return nx.convert_node_labels_to_integers(G, first_label=1)
