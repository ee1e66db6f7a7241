"""Cycle detection and parametric search algorithms."""

from cycleratio.lib.algorithms.base import (
    COST_ATTR,
    TIME_ATTR,
    Cycle,
    DegenerateCycleError,
    Edge,
    Ratio,
)
from cycleratio.lib.algorithms.min_cycle_ratio import (
    CycleRatioAPI,
    MinCycleRatioSolver,
    min_cycle_ratio,
)
from cycleratio.lib.algorithms.neg_cycle import NegCycleFinder, reduced_weight
from cycleratio.lib.algorithms.network_oracle import NetworkConstraint, NetworkOracle
from cycleratio.lib.algorithms.parametric import MaxParametricSolver, ParametricAPI

__all__ = [
    "COST_ATTR",
    "TIME_ATTR",
    "Cycle",
    "DegenerateCycleError",
    "Edge",
    "Ratio",
    "CycleRatioAPI",
    "MinCycleRatioSolver",
    "min_cycle_ratio",
    "NegCycleFinder",
    "reduced_weight",
    "NetworkConstraint",
    "NetworkOracle",
    "MaxParametricSolver",
    "ParametricAPI",
]
