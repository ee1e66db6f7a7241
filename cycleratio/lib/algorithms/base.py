from __future__ import annotations

from fractions import Fraction
from typing import List, Tuple, Union

from cycleratio.lib.graph import NodeID, EdgeTuple

#: Numeric value of a ratio, a weight or a potential. Any ordered numeric type
#: works as long as one type is used consistently throughout a solve.
Ratio = Union[int, float, Fraction]

#: A directed edge, identified by its (source, target) pair.
Edge = EdgeTuple

#: A cycle is the list of its edges in traversal order:
#: [(u0, u1), (u1, u2), ..., (uk, u0)]. An empty list means "no cycle".
Cycle = List[Edge]

#: Edge attribute holding the numerator of the cycle ratio.
COST_ATTR = "cost"

#: Edge attribute holding the denominator of the cycle ratio.
TIME_ATTR = "time"


class DegenerateCycleError(ValueError):
    """
    Raised when a cycle's total time is zero, leaving its ratio undefined.

    Attributes:
        cycle: The offending cycle.
    """

    def __init__(self, message: str, cycle: Cycle) -> None:
        super().__init__(message)
        self.cycle = cycle


def cycle_nodes(cycle: Cycle) -> Tuple[NodeID, ...]:
    """Return the nodes visited by a cycle, in order, without repeating the start."""
    return tuple(u for u, _ in cycle)
