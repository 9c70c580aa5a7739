"""Tests for weighted graphs and negative-weight rejection."""

import logging

import networkx as nx
import pytest

from structural_holes import (
    GraphAdapter,
    NegativeWeightError,
    constraint,
    dyadic_constraint,
    investment,
)
from structural_holes.config import FLOAT_TOLERANCE


# =============================================================================
# Weighted undirected graphs
# =============================================================================


class TestWeightedUndirected:
    def test_uniform_star_matches_unweighted(self, star):
        W = nx.Graph()
        W.add_weighted_edges_from([(u, v, 2.5) for u, v in star.edges])
        for i in star.nodes:
            assert constraint(W, i) == pytest.approx(constraint(star, i), abs=FLOAT_TOLERANCE)
        assert constraint(W, 2) == pytest.approx(1.0, abs=FLOAT_TOLERANCE)

    def test_non_uniform_star(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 3.0), (1, 3, 2.0), (1, 4, 1.0)])
        assert investment(G, 1, 2) == pytest.approx(3.0 / 6.0, abs=FLOAT_TOLERANCE)
        assert investment(G, 1, 3) == pytest.approx(2.0 / 6.0, abs=FLOAT_TOLERANCE)
        assert investment(G, 1, 4) == pytest.approx(1.0 / 6.0, abs=FLOAT_TOLERANCE)
        expected = (3.0 / 6.0) ** 2 + (2.0 / 6.0) ** 2 + (1.0 / 6.0) ** 2
        assert constraint(G, 1) == pytest.approx(expected, abs=FLOAT_TOLERANCE)
        assert 0.0 < constraint(G, 1) < 1.0

    def test_uniform_cycle_nodes_equal(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 1.0), (2, 3, 1.0), (3, 4, 1.0), (4, 1, 1.0)])
        values = [constraint(G, i) for i in (1, 2, 3, 4)]
        for v in values[1:]:
            assert v == pytest.approx(values[0], abs=FLOAT_TOLERANCE)

    def test_non_uniform_cycle(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 3.0), (2, 3, 1.0), (3, 4, 1.0), (4, 1, 1.0)])
        assert investment(G, 1, 2) == pytest.approx(0.75, abs=FLOAT_TOLERANCE)
        assert investment(G, 1, 4) == pytest.approx(0.25, abs=FLOAT_TOLERANCE)

    def test_non_uniform_triangle_indirect_paths(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 4.0), (2, 3, 2.0), (1, 3, 1.0)])
        p12 = investment(G, 1, 2)
        assert p12 == pytest.approx(0.8, abs=FLOAT_TOLERANCE)
        assert investment(G, 1, 3) == pytest.approx(0.2, abs=FLOAT_TOLERANCE)
        assert dyadic_constraint(G, 1, 2) > p12 ** 2

    def test_weighted_path(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 2.0), (2, 3, 1.0), (3, 4, 1.0)])
        assert constraint(G, 1) == pytest.approx(1.0, abs=FLOAT_TOLERANCE)
        assert 0.0 < constraint(G, 2) < 1.0

    def test_custom_weight_attribute(self):
        G = nx.Graph()
        G.add_edge(1, 2, strength=3.0)
        G.add_edge(1, 3, strength=1.0)
        assert investment(G, 1, 2, weight="strength") == pytest.approx(0.75, abs=FLOAT_TOLERANCE)
        # Default attribute absent: read as unweighted
        assert investment(G, 1, 2) == 0.5

    def test_partial_weights_warn_and_default_to_one(self, caplog):
        G = nx.Graph()
        G.add_edge(1, 2, weight=3.0)
        G.add_edge(1, 3)
        with caplog.at_level(logging.WARNING, logger="structural_holes.graph_adapter"):
            assert investment(G, 1, 2) == pytest.approx(0.75, abs=FLOAT_TOLERANCE)
        assert "lack 'weight'" in caplog.text

    def test_forced_unweighted(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 3.0), (1, 3, 1.0)])
        g = GraphAdapter(G, weighted=False)
        assert investment(g, 1, 2) == 0.5


# =============================================================================
# Weighted directed graphs
# =============================================================================


class TestWeightedDirected:
    def test_out_mode_ignores_incoming_weight(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([(1, 2, 2.0), (1, 3, 1.0), (4, 1, 5.0)])
        assert investment(G, 1, 2, mode="out") == pytest.approx(2.0 / 3.0, abs=FLOAT_TOLERANCE)
        assert investment(G, 1, 4, mode="out") == 0.0
        assert investment(G, 1, 4, mode="in") == 1.0
        # both: (2 + 0) / (2 + 1 + 5)
        assert investment(G, 1, 2) == pytest.approx(0.25, abs=FLOAT_TOLERANCE)

    def test_weighted_directed_cycle_symmetric(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([(1, 2, 2.0), (2, 3, 2.0), (3, 4, 2.0), (4, 1, 2.0)])
        values = [constraint(G, i, mode=m) for m in ("both", "out", "in") for i in (1, 2, 3, 4)]
        assert values[:4] == [values[0]] * 4
        assert values[4:8] == [1.0] * 4
        assert values[8:] == [1.0] * 4


# =============================================================================
# Negative weights
# =============================================================================


class TestNegativeWeights:
    @pytest.fixture
    def undirected_negative(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 2.0), (2, 3, -1.0)])
        return G

    @pytest.fixture
    def directed_negative(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([(1, 2, 2.0), (2, 3, -1.0)])
        return G

    def test_undirected(self, undirected_negative):
        G = undirected_negative
        with pytest.raises(NegativeWeightError):
            constraint(G, 2)
        with pytest.raises(NegativeWeightError):
            constraint(G, 3)
        with pytest.raises(NegativeWeightError):
            investment(G, 2, 3)
        with pytest.raises(NegativeWeightError):
            investment(G, 3, 2)
        with pytest.raises(NegativeWeightError):
            dyadic_constraint(G, 2, 3)

    def test_directed(self, directed_negative):
        G = directed_negative
        with pytest.raises(NegativeWeightError):
            constraint(G, 2)
        with pytest.raises(NegativeWeightError):
            constraint(G, 3)
        with pytest.raises(NegativeWeightError):
            investment(G, 2, 3)
        with pytest.raises(NegativeWeightError):
            dyadic_constraint(G, 2, 3)

    def test_untouched_node_computes_normally(self, directed_negative, undirected_negative):
        assert constraint(directed_negative, 1) == pytest.approx(1.0, abs=FLOAT_TOLERANCE)
        assert constraint(undirected_negative, 1) == pytest.approx(1.0, abs=FLOAT_TOLERANCE)

    def test_negative_out_edge_with_modes(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([(1, 2, 2.0), (1, 3, -1.0), (4, 1, 1.0)])
        with pytest.raises(NegativeWeightError):
            constraint(G, 1, mode="both")
        with pytest.raises(NegativeWeightError):
            constraint(G, 1, mode="out")
        assert constraint(G, 1, mode="in") == pytest.approx(1.0, abs=FLOAT_TOLERANCE)

    def test_negative_in_edge_with_modes(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([(1, 2, -1.0), (2, 3, 2.0)])
        with pytest.raises(NegativeWeightError):
            constraint(G, 2, mode="in")
        assert constraint(G, 2, mode="out") == pytest.approx(1.0, abs=FLOAT_TOLERANCE)

    def test_zero_weight_is_valid(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 0.0), (1, 3, 1.0)])
        assert investment(G, 1, 2) == 0.0
        assert constraint(G, 1) == pytest.approx(1.0, abs=FLOAT_TOLERANCE)

    def test_tiny_positive_weight_is_valid(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, 1e-10), (1, 3, 1.0)])
        assert 0.0 < investment(G, 1, 2) < 1e-9
        assert constraint(G, 1) > 0.0

    def test_nan_weight_rejected(self):
        G = nx.Graph()
        G.add_weighted_edges_from([(1, 2, float("nan")), (1, 3, 1.0)])
        with pytest.raises(NegativeWeightError):
            constraint(G, 1)

    def test_error_details(self):
        G = nx.DiGraph()
        G.add_weighted_edges_from([(1, 2, -5.0)])
        with pytest.raises(NegativeWeightError) as exc_info:
            constraint(G, 1)
        err = exc_info.value
        assert isinstance(err, ValueError)
        assert err.edge == (1, 2)
        assert err.weight == -5.0
        assert "non-negative" in str(err)
        assert "weight" in str(err)
