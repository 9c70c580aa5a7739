"""
Structural Holes — Constraint

Burt's network constraint and its dyadic components.

    c_ij = (p_ij + Σ_q p_iq × p_qj)²
    C_i  = Σ_j c_ij          j over i's mode-neighbors, self excluded

High constraint = few structural holes (ego's contacts are tied to each
other). Low constraint = ego brokers between otherwise separate contacts.
"""

import logging

from .config import DEFAULT_MODE, DEFAULT_WEIGHT_ATTR
from .graph_adapter import GraphAdapter, as_adapter
from .investment import _indirect_investment, _investment, _investment_sum
from .validation import Mode, validate_mode, validate_node, validate_nodes

logger = logging.getLogger(__name__)


def dyadic_constraint(G, i, j=None, mode=DEFAULT_MODE,
                      weight: str = DEFAULT_WEIGHT_ATTR) -> float:
    """
    Dyadic constraint c_ij that alter j places on ego i.

    Can be called with two node ids, ``dyadic_constraint(G, 1, 2)``, or
    with an edge pair such as an item of ``G.edges``:
    ``dyadic_constraint(G, (1, 2))``. Both forms give identical results.

    Returns 0.0 when i and j share neither a tie nor an intermediary
    under the mode.
    """
    if j is None:
        try:
            i, j = i[0], i[1]
        except (TypeError, IndexError):
            raise TypeError(
                f"dyadic_constraint() needs two node ids or an edge pair, got {i!r}"
            ) from None

    g = as_adapter(G, weight)
    validate_nodes(g, i, j)
    mode = validate_mode(mode)
    return (_investment(g, i, j, mode) + _indirect_investment(g, i, j, mode)) ** 2


def constraint(G, i, mode=DEFAULT_MODE, weight: str = DEFAULT_WEIGHT_ATTR) -> float:
    """
    Total network constraint on node i.

    Investments from i to each neighbor, and each node's total tie
    strength, are computed once per call and reused for every indirect
    term, so the pairwise work is O(d²) instead of O(d³).

    Args:
        G: networkx graph or GraphAdapter
        i: Ego node
        mode: 'both' (default), 'out' or 'in'
        weight: Edge attribute holding tie strength

    Returns:
        Constraint C_i >= 0. 0.0 for a node with no neighbors under the
        mode (isolated, or only a self-loop).

    Raises:
        InvalidNodeError, InvalidModeError, NegativeWeightError
    """
    g = as_adapter(G, weight)
    validate_node(g, i)
    mode = validate_mode(mode)
    return _constraint(g, i, mode)


def constraint_all(G, mode=DEFAULT_MODE, weight: str = DEFAULT_WEIGHT_ATTR) -> dict:
    """Constraint for every node, keyed by node in graph order."""
    g = as_adapter(G, weight)
    mode = validate_mode(mode)
    return {node: _constraint(g, node, mode) for node in g.vertices()}


def _constraint(g: GraphAdapter, i, mode: Mode) -> float:
    # Per-call caches: neighbor -> p_ij (neighbor order kept), node -> denominator
    denoms = {}
    inv_cache = {}
    for j in g.neighbors(i, mode):
        if j == i:
            continue
        inv_cache[j] = _investment(g, i, j, mode, denoms)

    c = 0.0
    for j, p_ij in inv_cache.items():
        c += (p_ij + _investment_sum(inv_cache, g, i, j, mode, denoms)) ** 2

    logger.debug(f"constraint(node={i}, mode={mode.value}): {len(inv_cache)} alters, C={c:.6f}")
    return c
