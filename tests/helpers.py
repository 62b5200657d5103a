"""Small analytic problems used across the tests."""

from typing import Any, List

import numpy as np

from nestswarm.problems import BaseProblem, BoxBoundedProblem, ProblemInfo
from nestswarm.solutions import Solution


class QuadraticProblem(BoxBoundedProblem):
    """fitness(x) = -(x - target)^2 on [lower, upper]."""

    def __init__(self, target: float = 3.0, lower: float = -10.0, upper: float = 10.0):
        super().__init__([lower], [upper])
        self.target = target

    def info(self) -> ProblemInfo:
        return ProblemInfo(name="quadratic", objective=self.objective, dimension=1)

    def evaluate(self, solution: Any) -> float:
        (x,) = self.vector(solution)
        return -(x - self.target) ** 2


class LinearProblem(BoxBoundedProblem):
    """fitness(x) = sum(x); remembers every random solution it hands out."""

    def __init__(self, dim: int = 1, lower: float = -100.0, upper: float = 100.0):
        super().__init__([lower] * dim, [upper] * dim)
        self.issued: List[Solution] = []

    def info(self) -> ProblemInfo:
        return ProblemInfo(name="linear", objective=self.objective, dimension=self.num_variables)

    def evaluate(self, solution: Any) -> float:
        return float(np.sum(self.vector(solution)))

    def random_solution(self, rng: np.random.Generator) -> Solution:
        sol = super().random_solution(rng)
        self.issued.append(sol)
        return sol


class FloorProblem(LinearProblem):
    """Integer-valued fitness, so distinct points can tie."""

    def evaluate(self, solution: Any) -> float:
        return float(np.floor(np.sum(self.vector(solution))))


class PointProblem(BaseProblem):
    """Feasible region is the single point 0."""

    def __init__(self, dim: int = 1):
        super().__init__(dim)

    def info(self) -> ProblemInfo:
        return ProblemInfo(name="point", objective=self.objective, dimension=self.num_variables)

    def evaluate(self, solution: Any) -> float:
        return -float(np.sum(self.vector(solution) ** 2))

    def within_constraints(self, solution: Any) -> bool:
        return bool(np.all(self.vector(solution) == 0.0))

    def random_solution(self, rng: np.random.Generator) -> Solution:
        return Solution(np.zeros(self.num_variables))


class NeverFeasibleProblem(PointProblem):
    def within_constraints(self, solution: Any) -> bool:
        return False
