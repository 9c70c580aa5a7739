"""
Structural Holes

Burt's network constraint family (investment, dyadic constraint,
constraint) and Gould-Fernandez brokerage roles over networkx graphs.
"""

from .errors import (
    StructuralHolesError,
    InvalidNodeError,
    InvalidModeError,
    NegativeWeightError,
    GroupAssignmentError,
)
from .validation import Mode, validate_mode, validate_node, validate_nodes
from .graph_adapter import GraphAdapter, as_adapter, build_graph, relabel_one_based
from .investment import investment, investment_sum
from .constraint import constraint, constraint_all, dyadic_constraint
from .brokerage import (
    Role,
    ROLES,
    ROLE_CONFIG,
    BrokerageResult,
    brokerage,
    classify_role,
    validate_groups,
    groups_to_dict,
    groups_to_vector,
    groups_to_integer,
    get_role_badge,
    coordinator,
    gatekeeper,
    representative,
    liaison,
    cosmopolitan,
    total_brokerage,
)
from .metrics import (
    ConstraintBreakpoints,
    compute_constraint_metrics,
    compute_breakpoints,
    classify_constraint,
    add_constraint_levels,
    brokerage_table,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    'StructuralHolesError',
    'InvalidNodeError',
    'InvalidModeError',
    'NegativeWeightError',
    'GroupAssignmentError',
    # Validation
    'Mode',
    'validate_mode',
    'validate_node',
    'validate_nodes',
    # Graph access
    'GraphAdapter',
    'as_adapter',
    'build_graph',
    'relabel_one_based',
    # Constraint family
    'investment',
    'investment_sum',
    'dyadic_constraint',
    'constraint',
    'constraint_all',
    # Brokerage
    'Role',
    'ROLES',
    'ROLE_CONFIG',
    'BrokerageResult',
    'brokerage',
    'classify_role',
    'validate_groups',
    'groups_to_dict',
    'groups_to_vector',
    'groups_to_integer',
    'get_role_badge',
    'coordinator',
    'gatekeeper',
    'representative',
    'liaison',
    'cosmopolitan',
    'total_brokerage',
    # Tables
    'ConstraintBreakpoints',
    'compute_constraint_metrics',
    'compute_breakpoints',
    'classify_constraint',
    'add_constraint_levels',
    'brokerage_table',
]
