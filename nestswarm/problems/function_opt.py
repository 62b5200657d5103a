# nestswarm/problems/function_opt.py

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .base import BoxBoundedProblem, ProblemInfo


def sphere(x: np.ndarray) -> float:
    return float(np.sum(x ** 2))


def rastrigin(x: np.ndarray) -> float:
    n = x.size
    return float(10 * n + np.sum(x ** 2 - 10 * np.cos(2 * np.pi * x)))


def ackley(x: np.ndarray) -> float:
    n = x.size
    a, b, c = 20.0, 0.2, 2 * np.pi
    s1 = np.sum(x ** 2)
    s2 = np.sum(np.cos(c * x))
    term1 = -a * np.exp(-b * np.sqrt(s1 / n))
    term2 = -np.exp(s2 / n)
    return float(term1 + term2 + a + np.e)


def rosenbrock(x: np.ndarray) -> float:
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1 - x[:-1]) ** 2))


def michalewicz(x: np.ndarray, m: float = 10.0) -> float:
    i = np.arange(1, x.size + 1)
    return float(-np.sum(np.sin(x) * np.sin(i * x ** 2 / np.pi) ** (2 * m)))


FUNC_MAP = {
    "sphere": sphere,
    "rastrigin": rastrigin,
    "ackley": ackley,
    "rosenbrock": rosenbrock,
    "michalewicz": michalewicz,
}

DEFAULT_BOUNDS = {
    "sphere": (-5.12, 5.12),
    "rastrigin": (-5.12, 5.12),
    "ackley": (-32.768, 32.768),
    "rosenbrock": (-5.0, 10.0),
    "michalewicz": (0.0, np.pi),
}

# known minima; michalewicz only for 2 dimensions
KNOWN_OPTIMUM = {
    "sphere": 0.0,
    "rastrigin": 0.0,
    "ackley": 0.0,
    "rosenbrock": 0.0,
}


class FunctionOptimizationProblem(BoxBoundedProblem):
    """Minimize a classic benchmark function on a box."""

    objective = "minimize"

    def __init__(
        self,
        func_name: str = "rastrigin",
        dim: int = 10,
        lower: Optional[float] = None,
        upper: Optional[float] = None,
    ):
        if func_name not in FUNC_MAP:
            raise ValueError(f"Unknown function: {func_name}. Choose from {list(FUNC_MAP.keys())}")
        if dim <= 0:
            raise ValueError("dim must be positive")

        lo, hi = DEFAULT_BOUNDS[func_name]
        lo = lo if lower is None else lower
        hi = hi if upper is None else upper
        super().__init__(np.full(dim, lo, dtype=float), np.full(dim, hi, dtype=float))

        self.func_name = func_name
        self.dim = dim
        self.func = FUNC_MAP[func_name]

    def info(self) -> ProblemInfo:
        known = KNOWN_OPTIMUM.get(self.func_name)
        if self.func_name == "michalewicz" and self.dim == 2:
            known = MichalewiczMinProblem.KNOWN_MINIMUM_2D
        return ProblemInfo(
            name=f"{self.func_name}_{self.dim}d",
            objective=self.objective,
            dimension=self.dim,
            extra={
                "bounds": [float(self.lower[0]), float(self.upper[0])],
                "representation": "real",
                "known_optimum": known,
            },
        )

    def evaluate(self, solution: Any) -> float:
        return self.func(self.vector(solution))


class MichalewiczMinProblem(FunctionOptimizationProblem):
    """The Michalewicz function on ``[0, pi]^dim`` (steepness ``m = 10``)."""

    KNOWN_MINIMUM_2D = -1.8013

    def __init__(self, dim: int = 2):
        super().__init__(func_name="michalewicz", dim=dim)
