from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .base import BaseMethod, ProgressCallback
from nestswarm.solutions import Solution, SolutionSet


@dataclass
class ParticleState:
    velocity: np.ndarray
    best_variables: np.ndarray
    best_fitness: float


class PSO(BaseMethod):
    """
    Global-best particle swarm.

    Moves that leave the feasible region are backtracked: the step is halved
    up to ``max_retry_attempts`` times, and a particle that still cannot
    move stays in place with zero velocity. The problem's bounds are never
    read, only ``within_constraints``.
    """

    name = "PSO"

    @classmethod
    def default_params(cls) -> Dict[str, Any]:
        return {
            "n_particles": 30,
            "max_iterations": 500,
            "w": 0.7,
            "c1": 1.5,
            "c2": 1.5,
            "w_decay": True,            # linearly decrease w towards w_end
            "w_end": 0.4,
            "velocity_clamp": 1.0,      # max |v| per dimension
            "max_retry_attempts": 20,
        }

    @classmethod
    def param_schema(cls) -> Dict[str, Any]:
        return {
            "n_particles": {"type": int, "min": 1, "max": 10000},
            "max_iterations": {"type": int, "min": 1, "max": 10_000_000},
            "w": {"type": float, "min": 0.0, "max": 1.0},
            "c1": {"type": float, "min": 0.0, "max": 4.0},
            "c2": {"type": float, "min": 0.0, "max": 4.0},
            "w_decay": {"type": bool},
            "w_end": {"type": float, "min": 0.0, "max": 1.0},
            "velocity_clamp": {"type": float, "min": 1e-12},
            "max_retry_attempts": {"type": int, "min": 0, "max": 100000},
        }

    def inertia(self, t: int) -> float:
        p = self.params
        if not p["w_decay"]:
            return p["w"]
        return p["w"] + (p["w_end"] - p["w"]) * (t / p["max_iterations"])

    def move(self, problem: Any, x: np.ndarray, v: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Return the new position and the velocity that was actually applied."""
        step = v
        for _ in range(self.params["max_retry_attempts"] + 1):
            candidate = x + step
            if problem.within_constraints(Solution(candidate)):
                return candidate, step
            step = step / 2.0
        return x, np.zeros_like(v)

    def solve(self, problem: Any, progress_cb: Optional[ProgressCallback] = None) -> None:
        p = self.params
        swarm = self._new_population(problem, p["n_particles"], p["max_retry_attempts"])

        c1, c2 = p["c1"], p["c2"]
        vmax = p["velocity_clamp"]
        iters = p["max_iterations"]

        for particle in swarm:
            particle.state = ParticleState(
                velocity=self.rng.uniform(-vmax, vmax, size=particle.num_variables),
                best_variables=particle.variables,
                best_fitness=float(problem.fitness(particle)),
            )
        gbest_X, gbest_F = self._swarm_best(swarm)

        for t in range(iters):
            w = self.inertia(t + 1)
            stuck = 0

            for k in range(len(swarm)):
                particle = swarm.get_solution(k)
                state = particle.state
                x = particle.variables

                r1 = self.rng.random(x.size)
                r2 = self.rng.random(x.size)
                v = w * state.velocity + c1 * r1 * (state.best_variables - x) + c2 * r2 * (gbest_X - x)
                v = np.clip(v, -vmax, vmax)

                new_x, v = self.move(problem, x, v)
                if new_x is x:
                    stuck += 1

                moved = Solution(new_x)
                f = float(problem.fitness(moved))
                if f > state.best_fitness:
                    moved.state = ParticleState(v, moved.variables, f)
                else:
                    moved.state = ParticleState(v, state.best_variables, state.best_fitness)
                swarm.replace(k, moved)

            gbest_X, gbest_F = self._swarm_best(swarm)

            if stuck:
                self.logger.debug(f"{self.name} gen={t + 1} | {stuck} particle(s) could not move")

            self._end_generation(t, problem, progress_cb, {"w": w, "gbest": gbest_F}, best=gbest_F)

    def best_solution(self, problem: Any) -> Solution:
        """The swarm's best remembered position, which may no longer be occupied."""
        population = self.get_solutions(problem)
        X, F = self._swarm_best(population)
        current = population.get_most_fit_solution(problem)
        if problem.fitness(current) >= F:
            return current
        return Solution(X)

    @staticmethod
    def _swarm_best(swarm: SolutionSet) -> Tuple[np.ndarray, float]:
        states = [s.state for s in swarm]
        k = int(np.argmax([st.best_fitness for st in states]))
        return states[k].best_variables, states[k].best_fitness
