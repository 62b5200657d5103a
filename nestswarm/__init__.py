"""Population-based metaheuristics for bounded continuous optimization."""

from .errors import (
    DimensionMismatchError,
    InfeasibleGenerationError,
    InvalidInputError,
    NotSolvedError,
    OptimizationError,
)
from .methods import METHODS, PSO, BaseMethod, CuckooSearch, MethodResult
from .problems import BaseProblem, BoxBoundedProblem, ProblemInfo
from .solutions import Solution, SolutionSet

__version__ = "0.1.0"

__all__ = [
    "BaseMethod",
    "BaseProblem",
    "BoxBoundedProblem",
    "CuckooSearch",
    "DimensionMismatchError",
    "InfeasibleGenerationError",
    "InvalidInputError",
    "METHODS",
    "MethodResult",
    "NotSolvedError",
    "OptimizationError",
    "PSO",
    "ProblemInfo",
    "Solution",
    "SolutionSet",
]
