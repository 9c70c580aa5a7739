"""Shared graph fixtures for the structural holes tests."""

import networkx as nx
import pytest


@pytest.fixture
def star():
    """Undirected 5-node star, center 1, leaves 2-5."""
    G = nx.Graph()
    G.add_edges_from([(1, 2), (1, 3), (1, 4), (1, 5)])
    return G


@pytest.fixture
def weighted_triangle():
    G = nx.Graph()
    G.add_weighted_edges_from([(1, 2, 1.0), (2, 3, 1.0), (1, 3, 1.0)])
    return G


@pytest.fixture
def directed_cycle():
    """1 -> 2 -> 3 -> 4 -> 1."""
    G = nx.DiGraph()
    G.add_edges_from([(1, 2), (2, 3), (3, 4), (4, 1)])
    return G


@pytest.fixture
def random_digraph():
    """Sparse directed graph with nodes 1..15."""
    G = nx.gnp_random_graph(15, 0.25, seed=11, directed=True)
    return nx.convert_node_labels_to_integers(G, first_label=1)


@pytest.fixture
def random_weighted_digraph(random_digraph):
    G = random_digraph.copy()
    for n, (u, v) in enumerate(G.edges):
        G[u][v]["weight"] = 0.5 + (n * 7 % 11) / 4.0
    return G
