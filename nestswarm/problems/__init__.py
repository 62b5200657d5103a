from .base import BaseProblem, BoxBoundedProblem, ProblemInfo
from .function_opt import FUNC_MAP, FunctionOptimizationProblem, MichalewiczMinProblem
from .geometry import BoxMinAreaProblem, FenceProblem

__all__ = [
    "BaseProblem",
    "BoxBoundedProblem",
    "ProblemInfo",
    "FUNC_MAP",
    "FunctionOptimizationProblem",
    "MichalewiczMinProblem",
    "FenceProblem",
    "BoxMinAreaProblem",
]
