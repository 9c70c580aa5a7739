"""
Exceptions raised by the structural holes engine.

All errors subclass ValueError as well, so callers that already guard
bad-input paths with ``except ValueError`` keep working.
"""


class StructuralHolesError(Exception):
    """Base class for all structural holes errors."""


class InvalidNodeError(StructuralHolesError, ValueError):
    """Node index is not a positive integer in the graph, or the graph is empty."""


class InvalidModeError(StructuralHolesError, ValueError):
    """Mode is not one of 'both', 'out' or 'in'."""


class NegativeWeightError(StructuralHolesError, ValueError):
    """An edge weight read during a formula evaluation is negative."""

    def __init__(self, edge: tuple, weight: float):
        self.edge = edge
        self.weight = weight
        super().__init__(
            f"Edge weight must be non-negative, got weight={weight} for edge {edge}"
        )


class GroupAssignmentError(StructuralHolesError, ValueError):
    """Group labels do not match the graph's vertex set."""
