from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from .result import MethodResult
from nestswarm.errors import InfeasibleGenerationError, NotSolvedError
from nestswarm.solutions import Solution, SolutionSet
from nestswarm.utils.logging import get_logger
from nestswarm.utils.seeding import make_rng

ProgressCallback = Callable[[int, float, Dict[str, Any]], None]


class BaseMethod(ABC):
    """
    Shared contract of the population-based search algorithms.

    Parameters are fixed when the instance is built: ``params`` overrides
    ``default_params()`` and is checked against ``param_schema()``. All
    randomness comes from one generator seeded with ``seed``; every
    ``solve`` call reseeds it and builds a fresh population, so two calls
    with the same seed give the same population.

    ``solve`` raises :class:`InfeasibleGenerationError` when a feasible
    candidate cannot be produced. ``run`` wraps ``solve`` and reports that
    failure as a ``MethodResult`` with ``status="failed"``.
    """

    name: str = "BaseMethod"

    def __init__(self, params: Optional[Dict[str, Any]] = None, seed: Optional[int] = None, logger_name: str = "nestswarm"):
        self.logger = get_logger(logger_name)
        self.params = self.validate_params(params or {})
        self.seed = seed
        self.rng = make_rng(seed)
        self.solutions: Optional[SolutionSet] = None
        self.history: List[float] = []

    @classmethod
    @abstractmethod
    def default_params(cls) -> Dict[str, Any]:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def param_schema(cls) -> Dict[str, Any]:
        """
        Example schema:
        {
          "n_nests": {"type": int, "min": 1, "max": 10000},
          "abandon_fraction": {"type": float, "min": 0.0, "max": 1.0},
          "step": {"type": str, "choices": ["levy", "gaussian"]},
        }
        """
        raise NotImplementedError

    @classmethod
    def validate_params(cls, params: Dict[str, Any]) -> Dict[str, Any]:
        schema = cls.param_schema()
        out = dict(cls.default_params())
        out.update(params or {})

        for k, rules in schema.items():
            if k not in out:
                raise ValueError(f"Missing parameter: {k}")

            v = out[k]
            t = rules.get("type")

            # ints are fine wherever a float is expected
            if t is float and isinstance(v, int) and not isinstance(v, bool):
                v = out[k] = float(v)

            if t is not None and not isinstance(v, t):
                raise TypeError(f"Param '{k}' must be {t.__name__}, got {type(v).__name__}")

            if "min" in rules and v < rules["min"]:
                raise ValueError(f"Param '{k}' must be >= {rules['min']}, got {v}")

            if "max" in rules and v > rules["max"]:
                raise ValueError(f"Param '{k}' must be <= {rules['max']}, got {v}")

            if "choices" in rules and v not in rules["choices"]:
                raise ValueError(f"Param '{k}' must be one of {rules['choices']}, got {v}")

        # extra keys are allowed, the schema keys are always checked
        return out

    def run(self, problem: Any, progress_cb: Optional[ProgressCallback] = None) -> MethodResult:
        self.logger.info(f"START {self.name} | params={self.params}")

        t0 = time.time()
        try:
            self.solve(problem, progress_cb=progress_cb)
        except InfeasibleGenerationError as e:
            self.logger.exception(f"FAILED {self.name} | error={e}")
            return MethodResult(
                method_name=self.name,
                best_solution=None,
                best_fitness=float("-inf"),
                history=list(self.history),
                time_sec=time.time() - t0,
                iterations=len(self.history),
                status="failed",
                params_used=dict(self.params),
                seed=self.seed,
                message=str(e),
            )

        best = self.best_solution(problem)
        res = MethodResult(
            method_name=self.name,
            best_solution=best,
            best_fitness=float(problem.fitness(best)),
            history=list(self.history),
            time_sec=time.time() - t0,
            iterations=self.solutions.run_count,
            status="ok",
            params_used=dict(self.params),
            seed=self.seed,
        )

        self.logger.info(f"END {self.name} | best={res.best_fitness} | iters={res.iterations} | time={res.time_sec:.3f}s")
        return res

    @abstractmethod
    def solve(self, problem: Any, progress_cb: Optional[ProgressCallback] = None) -> None:
        raise NotImplementedError

    def get_solutions(self, problem: Any) -> SolutionSet:
        if self.solutions is None:
            raise NotSolvedError(self.name)
        self.solutions.sort_by_fitness(problem)
        return self.solutions

    def best_solution(self, problem: Any) -> Solution:
        """Best solution found by the last ``solve``."""
        return self.get_solutions(problem).get_most_fit_solution(problem)

    # ---- helpers for subclasses

    def _new_population(self, problem: Any, size: int, max_attempts: int) -> SolutionSet:
        self.rng = make_rng(self.seed)
        self.history = []
        self.solutions = None
        population = SolutionSet(size, problem.num_variables, self.rng, max_attempts=max_attempts)
        population.initialize_with_random_solutions(problem)
        self.solutions = population
        return population

    def _end_generation(
        self,
        generation: int,
        problem: Any,
        progress_cb: Optional[ProgressCallback],
        extra: Optional[Dict[str, Any]] = None,
        best: Optional[float] = None,
    ) -> float:
        self.solutions.set_num_runs(generation + 1)
        if best is None:
            best = float(np.max(self.solutions.fitness_values(problem)))
        self.history.append(best)
        if progress_cb:
            progress_cb(generation + 1, best, extra or {})
        return best
