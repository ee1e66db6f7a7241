"""Minimum cost-to-time cycle ratio.

Solves

    max  r
    s.t. dist[v] - dist[u] <= cost(u, v) - r * time(u, v)  for every edge

whose optimum is the smallest sum(cost) / sum(time) over all cycles.
"""

from __future__ import annotations

from fractions import Fraction
from numbers import Rational
from typing import Callable, Mapping, Optional, Tuple

import networkx as nx

from cycleratio.config import SolverConfig
from cycleratio.lib.graph import NodeID, StrictDiGraph
from cycleratio.lib.algorithms.base import (
    COST_ATTR,
    TIME_ATTR,
    Cycle,
    DegenerateCycleError,
    Edge,
    Ratio,
    cycle_nodes,
)
from cycleratio.lib.algorithms.parametric import MaxParametricSolver, ParametricAPI
from cycleratio.logging import get_logger

logger = get_logger(__name__)


class CycleRatioAPI(ParametricAPI):
    """
    Cost/time weighting: distance(r, e) = cost(e) - r * time(e).

    Attributes:
        graph: Graph whose edges carry `cost` and `time`.
        ratio_type: Numeric type the total cost is converted to before the
            zero-cancel division, e.g. Fraction for exact ratios.
    """

    def __init__(
        self, graph: StrictDiGraph, ratio_type: Callable[..., Ratio] = float
    ) -> None:
        self.graph = graph
        self.ratio_type = ratio_type

    def distance(self, ratio: Ratio, edge: Edge) -> Ratio:
        utx, vtx = edge
        cost = self.graph.get_attr(utx, vtx, COST_ATTR)
        time = self.graph.get_attr(utx, vtx, TIME_ATTR)
        return cost - ratio * time

    def zero_cancel(self, cycle: Cycle) -> Ratio:
        """
        Ratio of total cost to total time over `cycle`.

        Raises:
            DegenerateCycleError: If the total time is zero.
        """
        total_cost = sum(self.graph.get_attr(u, v, COST_ATTR) for u, v in cycle)
        total_time = sum(self.graph.get_attr(u, v, TIME_ATTR) for u, v in cycle)
        if total_time == 0:
            raise DegenerateCycleError(
                f"Cycle through {list(cycle_nodes(cycle))} has zero total time; "
                "its ratio is undefined.",
                cycle,
            )
        return self.ratio_type(total_cost) / total_time


class MinCycleRatioSolver:
    """
    Minimum cycle ratio solver for graphs with `cost` and `time` edge attributes.

    Attributes:
        graph: The graph to solve on. It is not modified.
        config: Solver configuration passed down to the parametric solver.
    """

    def __init__(
        self, graph: StrictDiGraph, config: Optional[SolverConfig] = None
    ) -> None:
        self.graph = graph
        self.config = config

    def run(
        self,
        dist: Optional[Mapping[NodeID, Ratio]] = None,
        r0: Optional[Ratio] = None,
    ) -> Tuple[Ratio, Cycle]:
        """
        Find the minimum cycle ratio and a cycle attaining it.

        Args:
            dist: Node potentials for the reduced-weight search. None means
                zero for every node.
            r0: Starting ratio, an upper bound of the answer. Its type fixes
                the arithmetic of the run: pass a Fraction for exact results.
                If None, a bound is derived from the edges (see
                `initial_ratio`).

        Returns:
            A tuple (ratio, cycle). An empty cycle means no cycle has a ratio
            below `r0` (in particular, the graph may be acyclic) and the
            ratio is `r0` unchanged.

        Raises:
            MissingAttributeError: If an edge lacks `cost` or `time`.
            DegenerateCycleError: If some cycle has zero total time.
            ValueError: If `r0` is None and no bound can be derived.
        """
        self._check_attributes()
        self._check_zero_time_cycles()
        if r0 is None:
            r0 = self.initial_ratio()

        omega = CycleRatioAPI(self.graph, _ratio_type(r0))
        solver = MaxParametricSolver(self.graph, omega, self.config)
        ratio, cycle = solver.run(dist, r0)
        logger.debug(
            "Minimum cycle ratio %s (%s)",
            ratio,
            f"{len(cycle)}-edge cycle" if cycle else "no cycle below r0",
        )
        return ratio, cycle

    def initial_ratio(self) -> Ratio:
        """
        Derive a strict upper bound of every cycle ratio:
        sum(|cost|) / min(positive time) + 1.

        With non-negative times and no zero-time cycle, every cycle has a
        total time of at least the smallest positive edge time, and its
        total cost is at most the sum of all absolute costs. Zero-time edges
        are fine. The bound is an exact Fraction when every cost and time is
        rational.

        Returns:
            The bound, or 0 when no edge has a positive time (the graph is
            then acyclic once zero-time cycles are excluded).

        Raises:
            ValueError: If some edge time is negative.
        """
        total_cost: Ratio = 0
        min_time: Optional[Ratio] = None
        for utx, vtx in self.graph.edges:
            cost = self.graph.get_attr(utx, vtx, COST_ATTR)
            time = self.graph.get_attr(utx, vtx, TIME_ATTR)
            if time < 0:
                raise ValueError(
                    f"Edge from '{utx}' to '{vtx}' has negative time {time}; "
                    "pass an explicit r0."
                )
            total_cost += abs(cost)
            if time > 0 and (min_time is None or time < min_time):
                min_time = time
        if min_time is None:
            return 0
        if isinstance(total_cost, Rational) and isinstance(min_time, Rational):
            return Fraction(total_cost, min_time) + 1
        return total_cost / min_time + 1

    def _check_attributes(self) -> None:
        for utx, vtx in self.graph.edges:
            self.graph.get_attr(utx, vtx, COST_ATTR)
            self.graph.get_attr(utx, vtx, TIME_ATTR)

    def _check_zero_time_cycles(self) -> None:
        zero_time = nx.DiGraph()
        zero_time.add_edges_from(
            (utx, vtx)
            for utx, vtx, time in self.graph.edges(data=TIME_ATTR)
            if time == 0
        )
        try:
            cycle = nx.find_cycle(zero_time)
        except nx.NetworkXNoCycle:
            return
        raise DegenerateCycleError(
            f"Cycle through {list(cycle_nodes(cycle))} has zero total time; "
            "its ratio is undefined.",
            list(cycle),
        )


def _ratio_type(r0: Ratio) -> Callable[..., Ratio]:
    # int() truncates, so integer bounds run on Fractions
    if isinstance(r0, int):
        return Fraction
    return type(r0)


def min_cycle_ratio(
    graph: StrictDiGraph,
    r0: Optional[Ratio] = None,
    dist: Optional[Mapping[NodeID, Ratio]] = None,
    config: Optional[SolverConfig] = None,
) -> Tuple[Ratio, Cycle]:
    """
    Shortcut for MinCycleRatioSolver(graph, config).run(dist, r0).

    Args:
        graph: Graph whose edges carry `cost` and `time`.
        r0: Starting ratio (upper bound); derived from the edges if None.
        dist: Node potentials; zero for every node if None.
        config: Solver configuration; the global default if None.

    Returns:
        A tuple (ratio, cycle); an empty cycle means no cycle was found.
    """
    return MinCycleRatioSolver(graph, config).run(dist, r0)
