# nestswarm/solutions/solution_set.py

from __future__ import annotations

from typing import Any, Iterator, List

import numpy as np

from nestswarm.errors import DimensionMismatchError, InfeasibleGenerationError
from .solution import Solution

# absorbs products such as 0.29 * 100 == 28.999999999999996
_FLOOR_EPS = 1e-9


class SolutionSet:
    """
    Fixed-size population of solutions.

    The set is sized once for ``size`` members of ``num_variables`` each and
    draws all of its randomness from ``rng``, the generator of the algorithm
    that owns it. Every member entered the set feasible: random draws are
    repeated until ``problem.within_constraints`` accepts them, at most
    ``max_attempts + 1`` times.

    Ranking is descending by ``problem.fitness`` and stable, so members with
    equal fitness keep their relative order.
    """

    def __init__(self, size: int, num_variables: int, rng: np.random.Generator, max_attempts: int = 20):
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        if num_variables < 1:
            raise ValueError(f"num_variables must be >= 1, got {num_variables}")
        if max_attempts < 0:
            raise ValueError(f"max_attempts must be >= 0, got {max_attempts}")

        self.size = int(size)
        self.num_variables = int(num_variables)
        self.rng = rng
        self.max_attempts = int(max_attempts)
        self.run_count = 0
        self._members: List[Solution] = []

    # ---- construction

    def initialize_with_random_solutions(self, problem: Any) -> None:
        if problem.num_variables != self.num_variables:
            raise DimensionMismatchError(self.num_variables, problem.num_variables, where="problem")
        self._members = [self.draw_feasible(problem) for _ in range(self.size)]

    def draw_feasible(self, problem: Any) -> Solution:
        """Ask the problem for random solutions until one is feasible."""
        for _ in range(self.max_attempts + 1):
            sol = problem.random_solution(self.rng)
            self._check_dimension(sol, where="random solution")
            if problem.within_constraints(sol):
                return sol
        raise InfeasibleGenerationError(self.max_attempts + 1)

    # ---- access

    @property
    def initialized(self) -> bool:
        return len(self._members) == self.size

    def get_solution(self, index: int) -> Solution:
        self._require_initialized()
        return self._members[index]

    def get_solutions(self) -> List[Solution]:
        self._require_initialized()
        return list(self._members)

    def get_random_index(self) -> int:
        return int(self.rng.integers(self.size))

    def get_random_solution(self) -> Solution:
        self._require_initialized()
        return self._members[self.get_random_index()]

    def replace(self, index: int, solution: Solution) -> None:
        """Overwrite the member at ``index``. ``solution`` must be feasible."""
        self._require_initialized()
        self._check_dimension(solution)
        self._members[index] = solution

    def set_num_runs(self, n: int) -> None:
        if n < self.run_count:
            raise ValueError(f"run count cannot go backwards ({self.run_count} -> {n})")
        self.run_count = int(n)

    # ---- ranking

    def fitness_values(self, problem: Any) -> np.ndarray:
        self._require_initialized()
        return np.array([problem.fitness(s) for s in self._members], dtype=float)

    def ranking(self, problem: Any) -> List[int]:
        """Member indices, best first; ties keep index order."""
        fit = self.fitness_values(problem)
        return sorted(range(self.size), key=lambda k: -fit[k])

    def sort_by_fitness(self, problem: Any) -> None:
        order = self.ranking(problem)
        self._members = [self._members[k] for k in order]

    def get_most_fit_solution(self, problem: Any) -> Solution:
        fit = self.fitness_values(problem)
        # argmax returns the first of equal maxima
        return self._members[int(np.argmax(fit))]

    def abandon_worst_solutions(self, problem: Any, fraction: float) -> List[int]:
        """
        Replace the worst ``floor(fraction * size)`` members with fresh
        random solutions and return the indices that were replaced.

        Members are replaced in place, so the positions of the surviving
        members do not change.
        """
        if not 0.0 <= fraction <= 1.0:
            raise ValueError(f"fraction must be within [0, 1], got {fraction}")

        n_abandon = int(np.floor(fraction * self.size + _FLOOR_EPS))
        if n_abandon == 0:
            return []

        worst = self.ranking(problem)[self.size - n_abandon:]
        for k in worst:
            self._members[k] = self.draw_feasible(problem)
        return sorted(worst)

    # ---- helpers

    def _require_initialized(self) -> None:
        if not self.initialized:
            raise RuntimeError("SolutionSet is empty; call initialize_with_random_solutions() first.")

    def _check_dimension(self, solution: Solution, where: str = "solution") -> None:
        if solution.num_variables != self.num_variables:
            raise DimensionMismatchError(self.num_variables, solution.num_variables, where=where)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Solution]:
        return iter(self._members)

    def __getitem__(self, index: int) -> Solution:
        return self.get_solution(index)
