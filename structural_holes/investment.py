"""
Structural Holes — Investment

Proportional investment p_ij: the share of node i's total tie strength
that goes to node j, under one of three modes.

    both: p_ij = (w_ij + w_ji) / Σ_k (w_ik + w_ki)   k ∈ in ∪ out neighbors
    out:  p_ij = w_ij / Σ_k w_ik                     k ∈ out-neighbors
    in:   p_ij = w_ji / Σ_k w_ki                     k ∈ in-neighbors

Unweighted graphs use edge presence (1 or 0) for w. Self-loops never
count. In 'both' mode a one-way tie still contributes its single
direction; the missing direction reads as 0.

References:
    Burt, R.S. (1992). Structural Holes. Harvard University Press.
    Everett & Borgatti (2020). Unpacking Burt's constraint measure.
        Social Networks, 62.
"""

from .config import DEFAULT_MODE, DEFAULT_WEIGHT_ATTR
from .graph_adapter import GraphAdapter, as_adapter
from .validation import Mode, validate_mode, validate_nodes


# =============================================================================
# Public API
# =============================================================================

def investment(G, i: int, j: int, mode=DEFAULT_MODE,
               weight: str = DEFAULT_WEIGHT_ATTR) -> float:
    """
    Proportional investment from node i to node j.

    Args:
        G: networkx graph or GraphAdapter
        i: Ego node
        j: Alter node
        mode: 'both' (default), 'out' or 'in'
        weight: Edge attribute holding tie strength

    Returns:
        Investment in [0, 1]. 0.0 when i == j or when i has no ties
        under the mode.

    Raises:
        InvalidNodeError, InvalidModeError, NegativeWeightError
    """
    g = as_adapter(G, weight)
    validate_nodes(g, i, j)
    mode = validate_mode(mode)
    return _investment(g, i, j, mode)


def investment_sum(G, i: int, j: int, mode=DEFAULT_MODE,
                   weight: str = DEFAULT_WEIGHT_ATTR) -> float:
    """
    Indirect investment from i to j through shared neighbors.

    Σ_q p_iq × p_qj over q in i's mode-neighbors, q ≠ i, q ≠ j: the
    strength of every length-2 path i -> q -> j.
    """
    g = as_adapter(G, weight)
    validate_nodes(g, i, j)
    mode = validate_mode(mode)
    return _indirect_investment(g, i, j, mode)


# =============================================================================
# Internals (inputs already validated)
# =============================================================================

def _tie(g: GraphAdapter, i, k, mode: Mode) -> float:
    """Mode-selected tie strength from i toward k."""
    if mode == Mode.OUT:
        return g.weight(i, k)
    if mode == Mode.IN:
        return g.weight(k, i)
    return g.weight(i, k) + g.weight(k, i)


def _investment_denom(g: GraphAdapter, i, mode: Mode) -> float:
    total = 0.0
    for k in g.neighbors(i, mode):
        if k == i:
            continue
        total += _tie(g, i, k, mode)
    return total


def _investment(g: GraphAdapter, i, j, mode: Mode, denoms: dict = None) -> float:
    if i == j:
        return 0.0
    if denoms is None:
        denom = _investment_denom(g, i, mode)
    elif i in denoms:
        denom = denoms[i]
    else:
        denom = denoms[i] = _investment_denom(g, i, mode)
    if denom == 0:
        return 0.0
    return _tie(g, i, j, mode) / denom


def _indirect_investment(g: GraphAdapter, i, j, mode: Mode) -> float:
    total = 0.0
    for q in g.neighbors(i, mode):
        if q == i or q == j:
            continue
        total += _investment(g, i, q, mode) * _investment(g, q, j, mode)
    return total


def _investment_sum(cache: dict, g: GraphAdapter, i, j, mode: Mode,
                    denoms: dict = None) -> float:
    """
    Memoized indirect investment for use inside constraint().

    ``cache`` maps each of i's mode-neighbors q (self excluded, neighbor
    order kept) to p_iq, so only p_qj is computed here. ``denoms`` holds
    each q's total tie strength once it has been summed.
    """
    total = 0.0
    for q, p_iq in cache.items():
        if q == j:
            continue
        total += p_iq * _investment(g, q, j, mode, denoms)
    return total
