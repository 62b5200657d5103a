# nestswarm/methods/cuckoo.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import numpy as np

from .base import BaseMethod, ProgressCallback
from nestswarm.errors import InfeasibleGenerationError
from nestswarm.solutions import Solution

Walk = Callable[[np.ndarray, np.random.Generator], np.ndarray]


@dataclass
class NestState:
    # generation that put this egg in its nest, 0 for the initial population
    laid_at: int


def levy_flight(dim: int, rng: np.random.Generator, beta: float = 1.5) -> np.ndarray:
    """Mantegna's algorithm for a Levy-stable step of index ``beta``."""
    sigma = (
        math.gamma(1 + beta) * math.sin(math.pi * beta / 2)
        / (math.gamma((1 + beta) / 2) * beta * 2 ** ((beta - 1) / 2))
    ) ** (1 / beta)
    u = rng.normal(0.0, sigma, dim)
    v = rng.normal(0.0, 1.0, dim)
    return u / np.abs(v) ** (1 / beta)


class CuckooSearch(BaseMethod):
    """
    Cuckoo search with nest abandonment.

    Each generation a random cuckoo lays an egg (a random walk from its
    nest), the egg is compared with a second random nest and replaces it
    only if strictly fitter, then the worst ``abandon_fraction`` of the
    nests are rebuilt from scratch.

    ``walk(variables, rng) -> variables`` may replace the default Levy
    flight; it must keep the dimensionality.
    """

    name = "CuckooSearch"

    def __init__(
        self,
        params: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
        walk: Optional[Walk] = None,
        logger_name: str = "nestswarm",
    ):
        super().__init__(params, seed=seed, logger_name=logger_name)
        self.walk = walk or self.levy_walk

    @classmethod
    def default_params(cls) -> Dict[str, Any]:
        return {
            "n_nests": 15,
            "n_generations": 20000,
            "abandon_fraction": 0.25,   # share of worst nests rebuilt each generation
            "max_retry_attempts": 20,   # extra walks allowed per egg
            "step_size": 0.1,
            "levy_beta": 1.5,
        }

    @classmethod
    def param_schema(cls) -> Dict[str, Any]:
        return {
            "n_nests": {"type": int, "min": 1, "max": 10000},
            "n_generations": {"type": int, "min": 1, "max": 10_000_000},
            "abandon_fraction": {"type": float, "min": 0.0, "max": 1.0},
            "max_retry_attempts": {"type": int, "min": 0, "max": 100000},
            "step_size": {"type": float, "min": 0.0},
            "levy_beta": {"type": float, "min": 0.3, "max": 1.99},
        }

    def levy_walk(self, x: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        return x + self.params["step_size"] * levy_flight(x.size, rng, self.params["levy_beta"])

    def lay_egg(self, problem: Any, cuckoo: Solution, generation: int) -> Solution:
        """Walk from ``cuckoo`` until the result is feasible."""
        attempts = self.params["max_retry_attempts"] + 1
        for _ in range(attempts):
            egg = Solution(self.walk(cuckoo.variables, self.rng), state=NestState(generation))
            if problem.within_constraints(egg):
                return egg
        raise InfeasibleGenerationError(attempts)

    def solve(self, problem: Any, progress_cb: Optional[ProgressCallback] = None) -> None:
        p = self.params
        nests = self._new_population(problem, p["n_nests"], p["max_retry_attempts"])
        for nest in nests:
            nest.state = NestState(laid_at=0)

        for t in range(p["n_generations"]):
            generation = t + 1
            egg = self.lay_egg(problem, nests.get_random_solution(), generation)

            j = nests.get_random_index()
            replaced = problem.fitness(egg) > problem.fitness(nests.get_solution(j))
            if replaced:
                nests.replace(j, egg)

            abandoned = nests.abandon_worst_solutions(problem, p["abandon_fraction"])
            for k in abandoned:
                nests.get_solution(k).state = NestState(laid_at=generation)

            self._end_generation(t, problem, progress_cb, {"replaced": replaced, "abandoned": len(abandoned)})

        self.logger.debug(f"{self.name} finished {nests.run_count} generations")
