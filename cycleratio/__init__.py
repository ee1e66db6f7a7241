"""cycleratio: minimum cycle ratio of directed graphs.

Every edge carries a `cost` and a `time`; the solver finds the cycle with the
smallest total cost divided by total time, by parametric search over a
negative cycle detector.

Primary API:
    StrictDiGraph - Directed graph with per-edge attributes
    min_cycle_ratio() - Minimum ratio and a cycle attaining it
    MinCycleRatioSolver - The same, as a reusable solver object
    NegCycleFinder - Negative cycle detection under any weight function
    MaxParametricSolver, ParametricAPI - Generic parametric search
    NetworkOracle - Cutting planes from negative cycles

Example:
    from fractions import Fraction
    from cycleratio import StrictDiGraph, min_cycle_ratio

    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", cost=2, time=1)
    g.add_edge("B", "A", cost=4, time=1)

    ratio, cycle = min_cycle_ratio(g, r0=Fraction(10))
    # ratio == Fraction(3), cycle == [("A", "B"), ("B", "A")]
"""

from __future__ import annotations

from cycleratio import logging
from cycleratio._version import __version__
from cycleratio.config import SOLVER_CONFIG, SolverConfig
from cycleratio.lib.algorithms import (
    COST_ATTR,
    TIME_ATTR,
    CycleRatioAPI,
    DegenerateCycleError,
    MaxParametricSolver,
    MinCycleRatioSolver,
    NegCycleFinder,
    NetworkConstraint,
    NetworkOracle,
    ParametricAPI,
    min_cycle_ratio,
)
from cycleratio.lib.graph import MissingAttributeError, StrictDiGraph

__all__ = [
    # Version
    "__version__",
    # Graph
    "StrictDiGraph",
    "COST_ATTR",
    "TIME_ATTR",
    # Algorithms
    "NegCycleFinder",
    "ParametricAPI",
    "MaxParametricSolver",
    "CycleRatioAPI",
    "MinCycleRatioSolver",
    "min_cycle_ratio",
    "NetworkConstraint",
    "NetworkOracle",
    # Errors
    "MissingAttributeError",
    "DegenerateCycleError",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Utilities
    "logging",
]
