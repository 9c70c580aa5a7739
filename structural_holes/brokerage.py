"""
Structural Holes — Gould-Fernandez Brokerage

Classifies every open two-path a -> ego -> b (no direct tie a -> b) by the
group memberships of a, ego and b, and tallies role counts per ego.

Roles (checked in this order):
- coordinator:    ego, a and b all in one group
- gatekeeper:     ego and b share a group, a is outside
- representative: ego and a share a group, b is outside
- liaison:        a and b share a group, ego is outside
- cosmopolitan:   all three groups differ

Groups are supplied per call, either as a sequence aligned with graph node
order or as a mapping {node: label}. Labels only need equality.

Reference:
    Gould, R.V. & Fernandez, R.M. (1989). Structures of Mediation.
    Sociological Methodology, 19, 89-126.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

import networkx as nx
import numpy as np
import pandas as pd

from .errors import GroupAssignmentError
from .graph_adapter import GraphAdapter

logger = logging.getLogger(__name__)


class Role(str, Enum):
    COORDINATOR = "coordinator"
    GATEKEEPER = "gatekeeper"
    REPRESENTATIVE = "representative"
    LIAISON = "liaison"
    COSMOPOLITAN = "cosmopolitan"


ROLES = tuple(Role)

# Role display configuration
ROLE_CONFIG = {
    Role.COORDINATOR: {
        "emoji": "🧩",
        "label": "Coordinator",
        "description": "Mediates between members of its own group",
    },
    Role.GATEKEEPER: {
        "emoji": "🚪",
        "label": "Gatekeeper",
        "description": "Controls what flows into its group from outside",
    },
    Role.REPRESENTATIVE: {
        "emoji": "📢",
        "label": "Representative",
        "description": "Carries its group's flow out to another group",
    },
    Role.LIAISON: {
        "emoji": "🌉",
        "label": "Liaison",
        "description": "Outsider mediating between members of one other group",
    },
    Role.COSMOPOLITAN: {
        "emoji": "🧠",
        "label": "Cosmopolitan",
        "description": "Outsider mediating between two different groups",
    },
}


# =============================================================================
# Classification
# =============================================================================

def classify_role(group_ego, group_in, group_out) -> Role:
    """
    Classify the two-path in -> ego -> out by group membership.

    Example:
        classify_role("Sales", "Sales", "Eng")  # Role.REPRESENTATIVE
        classify_role("Sales", "Eng", "HR")     # Role.COSMOPOLITAN
    """
    if group_ego == group_in and group_ego == group_out:
        return Role.COORDINATOR
    if group_ego == group_out and group_ego != group_in:
        return Role.GATEKEEPER
    if group_ego == group_in and group_ego != group_out:
        return Role.REPRESENTATIVE
    if group_in == group_out and group_in != group_ego:
        return Role.LIAISON
    return Role.COSMOPOLITAN


def get_role_badge(role) -> str:
    """Get emoji + label for a brokerage role."""
    config = ROLE_CONFIG[Role(role)]
    return f"{config['emoji']} {config['label']}"


# =============================================================================
# Group Assignment Helpers
# =============================================================================

def _as_groups_container(groups):
    """Unwrap numpy/pandas containers into list/dict."""
    if isinstance(groups, pd.Series):
        return groups.to_dict()
    if isinstance(groups, np.ndarray):
        return groups.tolist()
    return groups


def validate_groups(G: nx.Graph, groups) -> bool:
    """
    Check that a group assignment covers the graph's vertices.

    Sequences must have one label per vertex; mappings must have a key for
    every vertex.

    Raises:
        GroupAssignmentError with a descriptive message
    """
    groups = _as_groups_container(groups)
    if isinstance(groups, Mapping):
        for v in G.nodes:
            if v not in groups:
                raise GroupAssignmentError(f"Vertex {v} is missing from groups mapping")
    elif isinstance(groups, Sequence) and not isinstance(groups, (str, bytes)):
        if len(groups) != G.number_of_nodes():
            raise GroupAssignmentError(
                f"Group sequence length ({len(groups)}) does not match "
                f"number of vertices ({G.number_of_nodes()})"
            )
    else:
        raise GroupAssignmentError(
            f"Groups must be a sequence or mapping, got {type(groups).__name__}"
        )
    return True


def groups_to_dict(G: nx.Graph, groups) -> dict:
    """Normalize a validated group assignment to {node: label}."""
    groups = _as_groups_container(groups)
    if isinstance(groups, Mapping):
        return {v: groups[v] for v in G.nodes}
    return dict(zip(G.nodes, groups))


def groups_to_vector(G: nx.Graph, groups) -> list:
    """Group labels as a list in graph node order."""
    groups = _as_groups_container(groups)
    if isinstance(groups, Mapping):
        return [groups[v] for v in G.nodes]
    return list(groups)


def groups_to_integer(groups) -> list[int]:
    """
    Map arbitrary labels to integers 1, 2, ... in first-occurrence order.

    Equal inputs always give the same mapping:
        groups_to_integer(["Sales", "Sales", "Eng", "Eng", "HR"])  # [1, 1, 2, 2, 3]

    Mappings (and Series) are read by value, in key order.
    """
    groups = _as_groups_container(groups)
    if isinstance(groups, Mapping):
        groups = list(groups.values())
    elif isinstance(groups, (str, bytes)) or not isinstance(groups, Sequence):
        raise GroupAssignmentError(
            f"Groups must be a sequence or mapping, got {type(groups).__name__}"
        )
    else:
        groups = list(groups)
    group_map = {g: n for n, g in enumerate(dict.fromkeys(groups), start=1)}
    return [group_map[g] for g in groups]


# =============================================================================
# Aggregation
# =============================================================================

@dataclass
class BrokerageResult:
    """Per-node brokerage role counts."""
    nodes: list = field(default_factory=list)
    counts: dict = field(default_factory=dict)  # node -> {Role: int}

    def _count(self, v, role: Role) -> int:
        if v not in self.counts:
            raise KeyError(f"Node {v} is not in the brokerage result")
        return self.counts[v][role]

    def coordinator(self, v) -> int:
        return self._count(v, Role.COORDINATOR)

    def gatekeeper(self, v) -> int:
        return self._count(v, Role.GATEKEEPER)

    def representative(self, v) -> int:
        return self._count(v, Role.REPRESENTATIVE)

    def liaison(self, v) -> int:
        return self._count(v, Role.LIAISON)

    def cosmopolitan(self, v) -> int:
        return self._count(v, Role.COSMOPOLITAN)

    def total_brokerage(self, v) -> int:
        return sum(self._count(v, role) for role in ROLES)

    def totals(self) -> dict:
        """Role counts summed over all nodes."""
        return {role.value: sum(c[role] for c in self.counts.values()) for role in ROLES}

    def to_dict(self) -> dict:
        return {
            "role_counts": self.totals(),
            "nodes": {
                str(v): {role.value: int(self.counts[v][role]) for role in ROLES}
                for v in self.nodes
            },
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One row per node, one column per role plus 'total'."""
        df = pd.DataFrame(
            [[self.counts[v][role] for role in ROLES] for v in self.nodes],
            index=pd.Index(self.nodes, name="node_id"),
            columns=[role.value for role in ROLES],
            dtype=int,
        )
        df["total"] = df.sum(axis=1)
        return df


def brokerage(G: nx.Graph, groups) -> BrokerageResult:
    """
    Gould-Fernandez brokerage role counts for every node.

    For each ego, every ordered pair (a, b) with a an in-neighbor and b an
    out-neighbor (a, b and ego distinct, self-loops ignored) and no direct
    tie a -> b is classified with classify_role. Undirected graphs are
    read as mutual ties, so each open pair is counted in both directions.

    Args:
        G: networkx Graph or DiGraph, or a GraphAdapter wrapping one
        groups: Sequence aligned with G.nodes, or mapping {node: label}

    Returns:
        BrokerageResult
    """
    if isinstance(G, GraphAdapter):
        G = G.G
    validate_groups(G, groups)
    group_of = groups_to_dict(G, groups)
    directed = G.is_directed()

    result = BrokerageResult(nodes=list(G.nodes))
    for ego in G.nodes:
        tally = {role: 0 for role in ROLES}
        if directed:
            senders = [a for a in G.predecessors(ego) if a != ego]
            receivers = [b for b in G.successors(ego) if b != ego]
        else:
            senders = receivers = [a for a in G.neighbors(ego) if a != ego]

        for a in senders:
            for b in receivers:
                if a == b or G.has_edge(a, b):
                    continue
                tally[classify_role(group_of[ego], group_of[a], group_of[b])] += 1
        result.counts[ego] = tally

    logger.debug(f"Brokerage over {len(result.nodes)} nodes: {result.totals()}")
    return result


# Function forms of the BrokerageResult accessors

def coordinator(result: BrokerageResult, v) -> int:
    return result.coordinator(v)


def gatekeeper(result: BrokerageResult, v) -> int:
    return result.gatekeeper(v)


def representative(result: BrokerageResult, v) -> int:
    return result.representative(v)


def liaison(result: BrokerageResult, v) -> int:
    return result.liaison(v)


def cosmopolitan(result: BrokerageResult, v) -> int:
    return result.cosmopolitan(v)


def total_brokerage(result: BrokerageResult, v) -> int:
    return result.total_brokerage(v)
