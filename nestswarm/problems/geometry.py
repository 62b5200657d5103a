# nestswarm/problems/geometry.py
"""
Small closed-form design problems used as demos and sanity checks.

Both have analytic optima, which makes them handy for checking a run:

- ``FenceProblem``: a fence of length ``L`` enclosing a rectangle
  ``x * y`` with ``2x + 2y <= L``. Best is the square, area ``(L/4)^2``.
- ``BoxMinAreaProblem``: a closed box of volume ``V`` with free sides
  ``a, b`` and height ``V / (a b)``. Least surface area is the cube,
  ``6 V^(2/3)``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from nestswarm.solutions import Solution
from .base import BoxBoundedProblem, ProblemInfo


class FenceProblem(BoxBoundedProblem):
    objective = "maximize"

    def __init__(self, fence_length: float = 100.0):
        if fence_length <= 0:
            raise ValueError("fence_length must be positive")
        self.fence_length = float(fence_length)
        half = self.fence_length / 2.0
        super().__init__([0.0, 0.0], [half, half])

    def info(self) -> ProblemInfo:
        return ProblemInfo(
            name="fence",
            objective=self.objective,
            dimension=2,
            extra={"fence_length": self.fence_length, "known_optimum": (self.fence_length / 4.0) ** 2},
        )

    def evaluate(self, solution: Any) -> float:
        width, depth = self.vector(solution)
        return float(width * depth)

    def within_constraints(self, solution: Any) -> bool:
        if not super().within_constraints(solution):
            return False
        width, depth = self.vector(solution)
        return 2.0 * (width + depth) <= self.fence_length

    def random_solution(self, rng: np.random.Generator) -> Solution:
        # width uniform, depth uniform in what is left of the fence
        half = self.fence_length / 2.0
        width = rng.uniform(0.0, half)
        depth = rng.uniform(0.0, half - width)
        return Solution([width, depth])


class BoxMinAreaProblem(BoxBoundedProblem):
    objective = "minimize"

    def __init__(self, volume: float = 100.0):
        if volume <= 0:
            raise ValueError("volume must be positive")
        self.volume = float(volume)
        side_max = max(self.volume, 1.0)
        super().__init__([1e-6, 1e-6], [side_max, side_max])

    def info(self) -> ProblemInfo:
        return ProblemInfo(
            name="box_min_area",
            objective=self.objective,
            dimension=2,
            extra={"volume": self.volume, "known_optimum": 6.0 * self.volume ** (2.0 / 3.0)},
        )

    def height(self, solution: Any) -> float:
        a, b = self.vector(solution)
        return self.volume / (a * b)

    def evaluate(self, solution: Any) -> float:
        a, b = self.vector(solution)
        h = self.volume / (a * b)
        return float(2.0 * (a * b + a * h + b * h))
