# nestswarm/problems/base.py

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Union

import numpy as np

from nestswarm.errors import DimensionMismatchError
from nestswarm.solutions import Solution


@dataclass
class ProblemInfo:
    name: str
    objective: str     # "minimize" | "maximize", direction of evaluate()
    dimension: int
    extra: Dict[str, Any] = field(default_factory=dict)


class BaseProblem(ABC):
    """
    Search-space definition consumed by the algorithms.

    Algorithms only use ``num_variables``, ``fitness``, ``within_constraints``
    and ``random_solution``. ``fitness`` is always maximized: problems whose
    ``evaluate`` is a quantity to minimize declare ``objective = "minimize"``
    and get the negated value.
    """

    objective: str = "maximize"

    def __init__(self, num_variables: int):
        if num_variables < 1:
            raise ValueError("num_variables must be positive")
        self._num_variables = int(num_variables)

    @property
    def num_variables(self) -> int:
        return self._num_variables

    @abstractmethod
    def info(self) -> ProblemInfo:
        raise NotImplementedError

    @abstractmethod
    def evaluate(self, solution: Any) -> float:
        """Raw objective value, in the direction given by ``objective``."""
        raise NotImplementedError

    @abstractmethod
    def within_constraints(self, solution: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def random_solution(self, rng: np.random.Generator) -> Solution:
        raise NotImplementedError

    def fitness(self, solution: Any) -> float:
        value = float(self.evaluate(solution))
        return -value if self.objective == "minimize" else value

    def vector(self, solution: Union[Solution, Sequence[float], np.ndarray]) -> np.ndarray:
        x = np.asarray(getattr(solution, "variables", solution), dtype=float).reshape(-1)
        if x.size != self.num_variables:
            raise DimensionMismatchError(self.num_variables, x.size)
        return x


class BoxBoundedProblem(BaseProblem):
    """Problem whose feasible region is the box ``lower <= x <= upper``."""

    def __init__(self, lower: Sequence[float], upper: Sequence[float]):
        lower = np.asarray(lower, dtype=float).reshape(-1)
        upper = np.asarray(upper, dtype=float).reshape(-1)
        if lower.shape != upper.shape:
            raise ValueError(f"bounds shape mismatch: {lower.shape} vs {upper.shape}")
        if np.any(lower > upper):
            raise ValueError("lower bound must not exceed upper bound")
        super().__init__(lower.size)
        self.lower = lower
        self.upper = upper

    def within_constraints(self, solution: Any) -> bool:
        x = self.vector(solution)
        return bool(np.all(np.isfinite(x)) and np.all(x >= self.lower) and np.all(x <= self.upper))

    def random_solution(self, rng: np.random.Generator) -> Solution:
        return Solution(rng.uniform(self.lower, self.upper))
