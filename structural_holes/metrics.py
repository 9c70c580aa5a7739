"""
Structural Holes — Metrics Tables

Whole-graph tables built on the constraint and brokerage engines:

1. Per-node constraint table (one column per mode)
2. Breakpoints for constraint values (quantile-based, adaptive)
3. Qualitative constraint levels
4. Per-node brokerage table with integer group ids
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import networkx as nx
import numpy as np
import pandas as pd

from .brokerage import brokerage, groups_to_integer, groups_to_vector
from .config import (
    CONSTRAINT_LEVEL_QUANTILES,
    CONSTRAINT_LEVELS,
    DEFAULT_MODE,
    DEFAULT_WEIGHT_ATTR,
    NODE_ID_COL,
)
from .constraint import constraint
from .graph_adapter import as_adapter
from .validation import Mode, validate_mode

logger = logging.getLogger(__name__)


# ============================================================================
# 1. CONSTRAINT TABLE
# ============================================================================

def compute_constraint_metrics(G, modes: Sequence = (DEFAULT_MODE,),
                               weight: str = DEFAULT_WEIGHT_ATTR) -> pd.DataFrame:
    """
    Constraint for every node as a DataFrame.

    Columns: node_id, degree (distinct neighbors, self-loops excluded),
    then 'constraint' when only 'both' is requested, otherwise one
    'constraint_<mode>' column per mode.
    """
    g = as_adapter(G, weight)
    if isinstance(modes, str):
        modes = [modes]
    # Repeated modes collapse to one column, first occurrence kept
    modes = list(dict.fromkeys(validate_mode(m) for m in modes))
    single = modes == [Mode.BOTH]

    rows = []
    for node in g.vertices():
        row = {
            NODE_ID_COL: node,
            "degree": sum(1 for k in g.neighbors(node, Mode.BOTH) if k != node),
        }
        for mode in modes:
            col = "constraint" if single else f"constraint_{mode.value}"
            row[col] = constraint(g, node, mode)
        rows.append(row)

    columns = [NODE_ID_COL, "degree"] + (
        ["constraint"] if single else [f"constraint_{m.value}" for m in modes]
    )
    logger.debug(f"Constraint table: {len(rows)} nodes, modes={[m.value for m in modes]}")
    return pd.DataFrame(rows, columns=columns)


# ============================================================================
# 2. BREAKPOINTS & LEVELS
# ============================================================================

@dataclass
class ConstraintBreakpoints:
    """Quantile-based thresholds for constraint values."""
    low: float      # up to this = "low"
    medium: float   # up to this = "medium"
    high: float     # up to this = "high"; above = "extreme"

    def level(self, value: Optional[float]) -> str:
        """Level label for one constraint value; missing values read as low."""
        if value is None or pd.isna(value):
            return CONSTRAINT_LEVELS[0]
        idx = np.searchsorted([self.low, self.medium, self.high], value, side="left")
        return CONSTRAINT_LEVELS[int(idx)]


def compute_breakpoints(values: Sequence[float]) -> ConstraintBreakpoints:
    """
    Thresholds at the CONSTRAINT_LEVEL_QUANTILES of the observed values.

    None/NaN values are ignored; an empty input gives all-zero breakpoints.
    """
    s = pd.Series(list(values), dtype=float).dropna()
    if s.empty:
        return ConstraintBreakpoints(low=0.0, medium=0.0, high=0.0)

    q = s.quantile(list(CONSTRAINT_LEVEL_QUANTILES)).tolist()
    return ConstraintBreakpoints(*(float(x) for x in q))


def classify_constraint(value: Optional[float], bp: ConstraintBreakpoints) -> str:
    """Map a constraint value to "low", "medium", "high" or "extreme"."""
    return bp.level(value)


def add_constraint_levels(df: pd.DataFrame, column: str = "constraint") -> pd.DataFrame:
    """Return a copy of df with a '<column>_level' column."""
    if column not in df.columns:
        raise ValueError(f"Missing constraint column: {column}")
    out = df.copy()
    bp = compute_breakpoints(out[column])
    out[f"{column}_level"] = out[column].map(bp.level)
    return out


# ============================================================================
# 3. BROKERAGE TABLE
# ============================================================================

def brokerage_table(G: nx.Graph, groups) -> pd.DataFrame:
    """
    Brokerage role counts per node, with integer group ids.

    Columns: group_id, coordinator, gatekeeper, representative, liaison,
    cosmopolitan, total. Indexed by node_id.
    """
    df = brokerage(G, groups).to_dataframe()
    df.insert(0, "group_id", groups_to_integer(groups_to_vector(G, groups)))
    return df
