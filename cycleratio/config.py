"""Configuration classes for cycleratio solvers."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration for the parametric cycle ratio solvers."""

    # Maximum number of parametric rounds before giving up on convergence
    max_iters: int = 1000

    # Prove the absence of negative cycles with a full relaxation pass
    # whenever the chain probe comes back empty
    certify: bool = True

    def __post_init__(self) -> None:
        if self.max_iters < 1:
            raise ValueError(f"max_iters must be positive, got {self.max_iters}")


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
