"""Maximum parametric problem solver.

Solves

    max  r
    s.t. dist[v] - dist[u] <= distance(r, (u, v))  for every edge (u, v)

where `distance` is monotone decreasing in r. The constraints are feasible
exactly when the graph has no negative cycle under `distance(r, .)`, so the
solver lowers r to the zero-cancel ratio of the violating cycles until none
is left.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Tuple

from cycleratio.config import SOLVER_CONFIG, SolverConfig
from cycleratio.lib.graph import NodeID, StrictDiGraph
from cycleratio.lib.algorithms.base import Cycle, Edge, Ratio
from cycleratio.lib.algorithms.neg_cycle import NegCycleFinder
from cycleratio.logging import get_logger

logger = get_logger(__name__)


class ParametricAPI(ABC):
    """Weighting of a parametric problem, as consumed by MaxParametricSolver."""

    @abstractmethod
    def distance(self, ratio: Ratio, edge: Edge) -> Ratio:
        """Weight of `edge` when the parameter equals `ratio`."""

    @abstractmethod
    def zero_cancel(self, cycle: Cycle) -> Ratio:
        """Parameter value at which the total weight of `cycle` is zero."""


class MaxParametricSolver:
    """
    Drives the parametric search with a NegCycleFinder.

    Attributes:
        graph: The graph to solve on.
        omega: The parametric weighting.
        config: Solver configuration (iteration cap, certification).
    """

    def __init__(
        self,
        graph: StrictDiGraph,
        omega: ParametricAPI,
        config: Optional[SolverConfig] = None,
    ) -> None:
        self.graph = graph
        self.omega = omega
        self.config = config if config is not None else SOLVER_CONFIG
        self._ncf = NegCycleFinder(graph, self.config)

    def run(
        self, dist: Optional[Mapping[NodeID, Ratio]], ratio: Ratio
    ) -> Tuple[Ratio, Cycle]:
        """
        Lower `ratio` until no negative cycle is left.

        Each round collects every cycle the finder yields under
        `omega.distance(ratio, .)` reduced by `dist`, and moves to the smallest
        zero-cancel ratio among them if it is strictly below the current one.

        Args:
            dist: Node potentials, held fixed for the whole run. None means
                zero for every node.
            ratio: Starting value of the parameter; an upper bound of the
                optimum.

        Returns:
            A tuple (ratio, cycle): the optimal ratio and a cycle attaining
            it. If the starting ratio is already feasible the cycle is empty
            and the ratio is returned unchanged.

        Raises:
            Whatever `omega.zero_cancel` raises for a candidate cycle; the
            run is aborted without a partial result.
        """
        r_min = ratio
        c_min: Cycle = []
        cycle: Cycle = []

        for niter in range(self.config.max_iters):
            current = ratio

            def get_weight(edge: Edge) -> Ratio:
                return self.omega.distance(current, edge)

            for candidate in self._ncf.find_reduced_cycles(dist, get_weight):
                r_candidate = self.omega.zero_cancel(candidate)
                if r_candidate < r_min:
                    r_min = r_candidate
                    c_min = candidate

            if r_min >= ratio:
                logger.debug("Converged after %d round(s) at ratio %s", niter, ratio)
                break

            logger.debug(
                "Round %d: ratio %s -> %s via %d-edge cycle",
                niter,
                ratio,
                r_min,
                len(c_min),
            )
            cycle = c_min
            ratio = r_min
        else:
            logger.warning(
                "No convergence after %d rounds; returning ratio %s",
                self.config.max_iters,
                ratio,
            )

        return ratio, cycle
