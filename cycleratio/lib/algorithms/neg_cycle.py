"""Negative cycle detection on weighted directed graphs.

The finder never stores weights: every query receives a weight function
`get_weight((u, v)) -> number`, so the same graph can be probed under many
weightings (for instance one per candidate ratio of a parametric search).
All working state is local to a single query.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, Mapping, Optional

from cycleratio.config import SOLVER_CONFIG, SolverConfig
from cycleratio.lib.graph import NodeID, StrictDiGraph
from cycleratio.lib.algorithms.base import Cycle, Edge, Ratio

#: Weight of an edge under the current query.
WeightFunc = Callable[[Edge], Ratio]


class NegCycleFinder:
    """
    Finds cycles of negative total weight.

    Detection runs in two stages:

      1. A chain probe. Starting from every root, follow the last strictly
         improving edge out of the current node, recording the edges taken.
         When an edge repeats, the recorded edges from its first occurrence
         form a closed walk of strictly negative weight, because every step
         lowered the distance label of its head. A dead end discards the
         chain and restores the labels it touched.
      2. A certificate. If the probe finds nothing, repeated relaxation of all
         edges either stabilizes (there is no negative cycle) or produces a
         cycle in the predecessor graph, which is negative.

    Outgoing edges are scanned in insertion order, so results are
    reproducible for a given graph.

    Attributes:
        graph: The graph being probed.
        config: Solver configuration; `config.certify` enables stage 2.
    """

    def __init__(
        self, graph: StrictDiGraph, config: Optional[SolverConfig] = None
    ) -> None:
        self.graph = graph
        self.config = config if config is not None else SOLVER_CONFIG

    def find_cycles(self, get_weight: WeightFunc) -> Iterator[Cycle]:
        """
        Yield negative cycles of the graph under `get_weight`.

        At most one cycle is yielded per root of the chain probe, so the same
        cycle may show up more than once (rotated) and not every negative
        cycle is listed. Nothing is yielded only if no negative cycle exists
        (or, with certification disabled, none was reached by the probe).

        Args:
            get_weight: Maps an edge (u, v) to its weight.

        Yields:
            Cycles as lists of edges in traversal order.
        """
        found = False
        for cycle in self._probe(get_weight):
            found = True
            yield cycle
        if not found and self.config.certify:
            cycle = self._certify(get_weight)
            if cycle:
                yield cycle

    def find_cycle(self, get_weight: WeightFunc) -> Optional[Cycle]:
        """
        Return one negative cycle under `get_weight`, or None.

        Args:
            get_weight: Maps an edge (u, v) to its weight.

        Returns:
            The first cycle produced by `find_cycles`, or None.
        """
        return next(self.find_cycles(get_weight), None)

    def find_reduced_cycles(
        self,
        potentials: Optional[Mapping[NodeID, Ratio]],
        get_weight: WeightFunc,
    ) -> Iterator[Cycle]:
        """
        Yield negative cycles under the reduced weights
        w'(u, v) = w(u, v) - potentials[u] + potentials[v].

        Potentials cancel out around any cycle, so the cycles found are
        negative under `get_weight` as well; the potentials only steer which
        chains the probe follows. Nodes missing from `potentials` count as 0.

        Args:
            potentials: Per-node offsets, or None for all zeros.
            get_weight: Maps an edge (u, v) to its weight.

        Yields:
            Cycles as lists of edges in traversal order.
        """
        return self.find_cycles(reduced_weight(potentials, get_weight))

    def find_reduced_cycle(
        self,
        potentials: Optional[Mapping[NodeID, Ratio]],
        get_weight: WeightFunc,
    ) -> Optional[Cycle]:
        """Return one negative cycle under the reduced weights, or None."""
        return next(self.find_reduced_cycles(potentials, get_weight), None)

    @staticmethod
    def is_negative(cycle: Cycle, get_weight: WeightFunc) -> bool:
        """Check whether the total weight of `cycle` is below zero."""
        return sum(get_weight(edge) for edge in cycle) < 0

    #
    # Stage 1: chain probe
    #
    def _probe(self, get_weight: WeightFunc) -> Iterator[Cycle]:
        succ = self.graph._succ
        # Every label is back at 0 between roots
        dist: Dict[NodeID, Ratio] = {node: 0 for node in succ}

        for root in succ:
            chain: Cycle = []
            position: Dict[Edge, int] = {}
            utx = root
            while True:
                edge: Optional[Edge] = None
                best: Ratio = 0
                for vtx in succ[utx]:
                    distance = dist[utx] + get_weight((utx, vtx))
                    if distance < dist[vtx]:
                        edge, best = (utx, vtx), distance
                if edge is None:
                    break

                vtx = edge[1]
                dist[vtx] = best
                if edge in position:
                    yield chain[position[edge] :]
                    break
                position[edge] = len(chain)
                chain.append(edge)
                utx = vtx

            # Unwind: free every node of this chain for later roots
            dist[root] = 0
            for _, vtx in chain:
                dist[vtx] = 0

    #
    # Stage 2: relaxation certificate
    #
    def _certify(self, get_weight: WeightFunc) -> Cycle:
        succ = self.graph._succ
        dist: Dict[NodeID, Ratio] = {node: 0 for node in succ}
        pred: Dict[NodeID, NodeID] = {}

        while self._relax(dist, pred, get_weight):
            handle = self._find_pred_cycle(pred)
            if handle is not None:
                return self._cycle_list(handle, pred)
        return []

    def _relax(
        self,
        dist: Dict[NodeID, Ratio],
        pred: Dict[NodeID, NodeID],
        get_weight: WeightFunc,
    ) -> bool:
        changed = False
        for utx, neighbors in self.graph._succ.items():
            for vtx in neighbors:
                distance = dist[utx] + get_weight((utx, vtx))
                if dist[vtx] > distance:
                    dist[vtx] = distance
                    pred[vtx] = utx
                    changed = True
        return changed

    def _find_pred_cycle(self, pred: Dict[NodeID, NodeID]) -> Optional[NodeID]:
        """Return a node lying on a cycle of the predecessor graph, if any."""
        visited: Dict[NodeID, NodeID] = {}
        for vtx in self.graph._succ:
            if vtx in visited:
                continue
            utx = vtx
            while True:
                visited[utx] = vtx
                if utx not in pred:
                    break
                utx = pred[utx]
                if utx in visited:
                    if visited[utx] == vtx:
                        return utx
                    break
        return None

    @staticmethod
    def _cycle_list(handle: NodeID, pred: Dict[NodeID, NodeID]) -> Cycle:
        cycle: Cycle = []
        vtx = handle
        while True:
            utx = pred[vtx]
            cycle.append((utx, vtx))
            vtx = utx
            if vtx == handle:
                break
        cycle.reverse()
        return cycle


def reduced_weight(
    potentials: Optional[Mapping[NodeID, Ratio]], get_weight: WeightFunc
) -> WeightFunc:
    """
    Wrap `get_weight` with node potentials:
    w'(u, v) = w(u, v) - potentials[u] + potentials[v].

    Args:
        potentials: Per-node offsets, or None for all zeros. Missing nodes
            count as 0.
        get_weight: The weight function to wrap.

    Returns:
        The reduced weight function (`get_weight` itself when potentials
        is None).
    """
    if potentials is None:
        return get_weight

    def _weight(edge: Edge) -> Ratio:
        utx, vtx = edge
        return get_weight(edge) - potentials.get(utx, 0) + potentials.get(vtx, 0)

    return _weight
