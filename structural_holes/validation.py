"""
Input validation for the structural holes engine.

Every public entry point calls these before touching any weights, so bad
node ids or modes are reported before any arithmetic runs.
"""

from enum import Enum
from numbers import Integral

from .config import VALID_MODES
from .errors import InvalidModeError, InvalidNodeError


class Mode(str, Enum):
    """Which ties of a directed graph count toward ego's investments."""
    BOTH = "both"
    OUT = "out"
    IN = "in"


def validate_mode(mode) -> Mode:
    """Return ``mode`` as a Mode member, raising InvalidModeError otherwise."""
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(mode)
    except (ValueError, TypeError):
        raise InvalidModeError(
            f"mode must be one of {', '.join(repr(m) for m in VALID_MODES)}, got {mode!r}"
        ) from None


def validate_node(g, i) -> None:
    """Check that ``i`` is a positive integer node of adapter ``g``."""
    vertices = g.vertices()
    if len(vertices) == 0:
        raise InvalidNodeError("Graph has no vertices")
    if isinstance(i, bool) or not isinstance(i, Integral):
        raise InvalidNodeError(f"Node index must be an integer, got {i!r}")
    if i <= 0:
        raise InvalidNodeError(f"Node index must be positive, got {i}")
    if i not in vertices:
        raise InvalidNodeError(f"Node {i} is not in the graph")


def validate_nodes(g, i, j) -> None:
    validate_node(g, i)
    validate_node(g, j)
