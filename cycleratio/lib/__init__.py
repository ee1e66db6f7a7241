"""Graph container and algorithms for cycleratio."""

from cycleratio.lib.graph import MissingAttributeError, StrictDiGraph

__all__ = [
    "MissingAttributeError",
    "StrictDiGraph",
]
