"""
Tests for CuckooSearch.

Checks the strict acceptance rule, per-generation abandonment, fresh
populations on every solve, convergence on a 1-D parabola and the typed
failure raised when no feasible egg can be laid.
"""

import numpy as np
import pytest

from nestswarm.errors import DimensionMismatchError, InfeasibleGenerationError, NotSolvedError
from nestswarm.methods import CuckooSearch, NestState, levy_flight

from .helpers import LinearProblem, QuadraticProblem


def _single_nest(delta):
    """One nest, one generation, no abandonment, walk moves by ``delta``."""
    params = {"n_nests": 1, "n_generations": 1, "abandon_fraction": 0.0}
    return CuckooSearch(params, seed=0, walk=lambda x, rng: x + delta)


class TestAcceptanceRule:
    def test_worse_egg_is_discarded(self):
        problem = LinearProblem(lower=-1e6, upper=1e6)
        cs = _single_nest(-1.0)
        cs.solve(problem)

        (original,) = problem.issued
        assert cs.get_solutions(problem).get_solution(0) is original

    def test_better_egg_replaces_nest(self):
        problem = LinearProblem(lower=-1e6, upper=1e6)
        cs = _single_nest(+1.0)
        cs.solve(problem)

        (original,) = problem.issued
        nest = cs.get_solutions(problem).get_solution(0)
        assert nest is not original
        assert nest.variables[0] == pytest.approx(original.variables[0] + 1.0)
        assert nest.state == NestState(laid_at=1)

    def test_equal_egg_does_not_replace(self):
        problem = LinearProblem(lower=-1e6, upper=1e6)
        cs = _single_nest(0.0)
        cs.solve(problem)

        (original,) = problem.issued
        assert cs.get_solutions(problem).get_solution(0) is original


class TestSolve:
    def test_population_is_feasible_and_tagged(self, quadratic):
        cs = CuckooSearch({"n_nests": 10, "n_generations": 200}, seed=1)
        cs.solve(quadratic)

        nests = cs.get_solutions(quadratic)
        assert len(nests) == 10
        assert nests.run_count == 200
        assert all(quadratic.within_constraints(s) for s in nests)
        assert all(isinstance(s.state, NestState) for s in nests)
        assert all(0 <= s.state.laid_at <= 200 for s in nests)

    def test_solve_twice_builds_fresh_population(self, quadratic):
        cs = CuckooSearch({"n_nests": 12, "n_generations": 50}, seed=5)

        cs.solve(quadratic)
        first = [s.variables.copy() for s in cs.get_solutions(quadratic)]
        first_set = cs.solutions

        cs.solve(quadratic)
        second = cs.get_solutions(quadratic)

        assert second is not first_set
        assert len(second) == 12
        assert second.run_count == 50
        # same seed, same search
        assert [s.variables.tolist() for s in second] == [v.tolist() for v in first]

    def test_abandonment_runs_every_generation(self):
        problem = LinearProblem()
        cs = CuckooSearch({"n_nests": 8, "n_generations": 10, "abandon_fraction": 0.25}, seed=2)
        cs.solve(problem)

        # 8 initial draws + floor(0.25 * 8) = 2 per generation
        assert len(problem.issued) == 8 + 2 * 10

    def test_best_fitness_never_decreases(self, quadratic):
        cs = CuckooSearch({"n_generations": 300}, seed=11)
        cs.solve(quadratic)

        assert len(cs.history) == 300
        assert np.all(np.diff(cs.history) >= 0)

    def test_progress_callback_per_generation(self, quadratic):
        seen = []
        cs = CuckooSearch({"n_nests": 5, "n_generations": 7}, seed=3)
        cs.solve(quadratic, progress_cb=lambda gen, best, extra: seen.append((gen, best, extra)))

        assert [g for g, _, _ in seen] == list(range(1, 8))
        assert all({"replaced", "abandoned"} <= set(extra) for _, _, extra in seen)
        assert [b for _, b, _ in seen] == cs.history

    def test_get_solutions_before_solve(self, quadratic):
        with pytest.raises(NotSolvedError):
            CuckooSearch().get_solutions(quadratic)


class TestConvergence:
    def test_finds_peak_of_parabola(self):
        problem = QuadraticProblem(target=3.0, lower=-10.0, upper=10.0)
        cs = CuckooSearch({"n_generations": 300}, seed=42)
        cs.solve(problem)

        best = cs.get_solutions(problem).get_most_fit_solution(problem)
        assert best.variables[0] == pytest.approx(3.0, abs=0.5)

    def test_run_reports_best(self):
        problem = QuadraticProblem()
        res = CuckooSearch({"n_generations": 300}, seed=42).run(problem)

        assert res.ok
        assert res.iterations == 300
        assert res.best_solution.variables[0] == pytest.approx(3.0, abs=0.5)
        assert res.best_fitness == pytest.approx(problem.fitness(res.best_solution))
        assert res.best_fitness == res.history[-1]


class TestInfeasibleGeneration:
    def test_exhausted_retries_raise(self, point_problem):
        cs = CuckooSearch({"n_nests": 3, "n_generations": 10, "max_retry_attempts": 5}, seed=0)

        with pytest.raises(InfeasibleGenerationError) as exc:
            cs.solve(point_problem)
        assert exc.value.attempts == 6
        # the population kept its feasible members
        assert all(point_problem.within_constraints(s) for s in cs.solutions)

    def test_run_returns_failed_result(self, point_problem):
        res = CuckooSearch({"n_nests": 3, "n_generations": 10}, seed=0).run(point_problem)

        assert res.status == "failed"
        assert not res.ok
        assert res.best_solution is None
        assert "widen your constraints" in res.message

    def test_walk_changing_dimension_is_a_programming_error(self, quadratic):
        cs = CuckooSearch({"n_nests": 2, "n_generations": 1}, walk=lambda x, rng: np.append(x, 0.0))

        with pytest.raises(DimensionMismatchError):
            cs.run(quadratic)


class TestParams:
    def test_defaults(self):
        p = CuckooSearch().params
        assert p["n_nests"] == 15
        assert p["n_generations"] == 20000
        assert p["abandon_fraction"] == 0.25
        assert p["max_retry_attempts"] == 20

    def test_int_accepted_for_float(self):
        assert CuckooSearch({"step_size": 2}).params["step_size"] == 2.0

    @pytest.mark.parametrize(
        "params,error",
        [
            ({"abandon_fraction": 1.5}, ValueError),
            ({"n_nests": 0}, ValueError),
            ({"n_nests": "5"}, TypeError),
            ({"levy_beta": 2.5}, ValueError),
        ],
    )
    def test_invalid(self, params, error):
        with pytest.raises(error):
            CuckooSearch(params)


def test_levy_flight_shape(rng):
    steps = levy_flight(4, rng, beta=1.5)
    assert steps.shape == (4,)
    assert np.all(np.isfinite(steps))
