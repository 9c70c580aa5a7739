"""
Structural Holes — Configuration

Single source of truth for modes, attribute names, tolerances and
level thresholds.
Used by: graph adapter, investment/constraint engines, metrics tables.

Version: 0.1.0
"""

# =============================================================================
# Modes
# =============================================================================
# both: symmetrized ties (in + out), Burt's original formulation
# out:  ego's outgoing ties only
# in:   incoming ties to ego only
DEFAULT_MODE = "both"
VALID_MODES = ("both", "out", "in")

# =============================================================================
# Edge Weights
# =============================================================================
DEFAULT_WEIGHT_ATTR = "weight"
# Value used for an existing edge that lacks the weight attribute
# (networkx convention)
MISSING_WEIGHT_DEFAULT = 1.0

# =============================================================================
# Numerical Tolerance
# =============================================================================
# Investments to all neighbors sum to 1.0 within this tolerance;
# constraint equals the sum of dyadic constraints within it
FLOAT_TOLERANCE = 1e-10

# =============================================================================
# Constraint Levels (quantile breakpoints)
# =============================================================================
# 40% / 80% / 95% = low / medium / high / extreme
CONSTRAINT_LEVEL_QUANTILES = (0.40, 0.80, 0.95)
CONSTRAINT_LEVELS = ["low", "medium", "high", "extreme"]

# =============================================================================
# DataFrame Columns
# =============================================================================
EDGE_FROM_COL = "from_id"
EDGE_TO_COL = "to_id"
NODE_ID_COL = "node_id"
