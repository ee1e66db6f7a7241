"""Separation oracle for parametric network feasibility problems.

Given decision variables x, the problem

    find x, dist
    s.t. dist[v] - dist[u] <= h(x, (u, v))  for every edge (u, v)

is feasible exactly when no cycle is negative under h(x, .). When a negative
cycle C exists, summing its constraints gives a cut for cutting-plane
methods:

    fval = -sum(h(x, e) for e in C) > 0
    grad = -sum(h.grad(x, e) for e in C)

and every feasible y satisfies fval + grad @ (y - x) <= 0 when h is affine
in x.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Tuple

import numpy as np

from cycleratio.config import SolverConfig
from cycleratio.lib.graph import NodeID, StrictDiGraph
from cycleratio.lib.algorithms.base import Edge, Ratio
from cycleratio.lib.algorithms.neg_cycle import NegCycleFinder
from cycleratio.logging import get_logger

logger = get_logger(__name__)

#: A cutting plane (grad, fval).
Cut = Tuple[np.ndarray, float]


class NetworkConstraint(ABC):
    """
    Edge constraint h(x, e) of a network feasibility problem.

    Attributes:
        gamma: Best objective value found so far, set through `update`.
    """

    gamma: Optional[Ratio] = None

    @abstractmethod
    def eval(self, edge: Edge, x: np.ndarray) -> float:
        """Value of h at `x` for `edge`."""

    @abstractmethod
    def grad(self, edge: Edge, x: np.ndarray) -> np.ndarray:
        """Gradient of h with respect to `x` for `edge`."""

    def update(self, gamma: Ratio) -> None:
        self.gamma = gamma


class NetworkOracle:
    """
    Assesses a point x against the network constraints.

    Attributes:
        graph: The constraint graph.
        potentials: Node potentials steering the cycle search. They are
            read, never written.
        constraint: The edge constraint h.
    """

    def __init__(
        self,
        graph: StrictDiGraph,
        potentials: Optional[Mapping[NodeID, Ratio]],
        constraint: NetworkConstraint,
        config: Optional[SolverConfig] = None,
    ) -> None:
        self.graph = graph
        self.potentials = potentials
        self.constraint = constraint
        self._ncf = NegCycleFinder(graph, config)

    def update(self, gamma: Ratio) -> None:
        """Pass the best-so-far objective value on to the constraint."""
        self.constraint.update(gamma)

    def assess_feas(self, x: Any) -> Optional[Cut]:
        """
        Check `x` for feasibility.

        Args:
            x: Decision variables, anything `numpy.asarray` accepts.

        Returns:
            None if `x` is feasible, otherwise a cut (grad, fval) built from
            one negative cycle.
        """
        xval = np.asarray(x, dtype=float)

        def get_weight(edge: Edge) -> float:
            return self.constraint.eval(edge, xval)

        cycle = self._ncf.find_reduced_cycle(self.potentials, get_weight)
        if cycle is None:
            return None

        grad = np.zeros_like(xval)
        fval = 0.0
        for edge in cycle:
            fval -= self.constraint.eval(edge, xval)
            grad -= self.constraint.grad(edge, xval)
        logger.debug("Cut from %d-edge cycle, fval %s", len(cycle), fval)
        return grad, fval

    def __call__(self, x: Any) -> Optional[Cut]:
        return self.assess_feas(x)
