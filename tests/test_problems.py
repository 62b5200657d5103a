import numpy as np
import pytest

from nestswarm.errors import DimensionMismatchError
from nestswarm.methods import CuckooSearch
from nestswarm.problems import (
    BoxMinAreaProblem,
    FenceProblem,
    FunctionOptimizationProblem,
    MichalewiczMinProblem,
)
from nestswarm.solutions import Solution


class TestFunctionOptimizationProblem:
    @pytest.mark.parametrize("func_name", ["sphere", "rastrigin", "ackley"])
    def test_zero_at_origin(self, func_name):
        p = FunctionOptimizationProblem(func_name=func_name, dim=10)
        assert p.evaluate(np.zeros(10)) == pytest.approx(0.0, abs=1e-12)

    def test_rosenbrock_zero_at_ones(self):
        p = FunctionOptimizationProblem("rosenbrock", dim=5)
        assert p.evaluate(Solution(np.ones(5))) == pytest.approx(0.0)

    def test_fitness_is_negated_objective(self):
        p = FunctionOptimizationProblem("sphere", dim=2)
        sol = Solution([1.0, 2.0])
        assert p.evaluate(sol) == pytest.approx(5.0)
        assert p.fitness(sol) == pytest.approx(-5.0)

    def test_box_constraints(self):
        p = FunctionOptimizationProblem("sphere", dim=2)
        assert p.within_constraints(Solution([5.12, -5.12]))
        assert not p.within_constraints(Solution([5.2, 0.0]))
        assert not p.within_constraints(Solution([np.nan, 0.0]))

    def test_custom_bounds(self):
        p = FunctionOptimizationProblem("sphere", dim=1, lower=-1.0, upper=2.0)
        assert p.info().extra["bounds"] == [-1.0, 2.0]
        assert not p.within_constraints(Solution([2.5]))

    def test_random_solution_in_bounds(self, rng):
        p = FunctionOptimizationProblem("ackley", dim=6)
        for _ in range(50):
            assert p.within_constraints(p.random_solution(rng))

    def test_dimension_mismatch(self):
        p = FunctionOptimizationProblem("sphere", dim=3)
        with pytest.raises(DimensionMismatchError):
            p.evaluate(Solution([1.0, 2.0]))

    def test_unknown_function(self):
        with pytest.raises(ValueError):
            FunctionOptimizationProblem("himmelblau", dim=2)

    def test_info(self):
        info = FunctionOptimizationProblem("rastrigin", dim=4).info()
        assert info.name == "rastrigin_4d"
        assert info.objective == "minimize"
        assert info.dimension == 4
        assert info.extra["known_optimum"] == 0.0


class TestMichalewicz:
    def test_known_minimum_2d(self):
        p = MichalewiczMinProblem()
        x = Solution([2.20290552, 1.57079633])
        assert p.evaluate(x) == pytest.approx(MichalewiczMinProblem.KNOWN_MINIMUM_2D, abs=1e-3)
        assert p.info().extra["known_optimum"] == MichalewiczMinProblem.KNOWN_MINIMUM_2D

    def test_cuckoo_gets_close_to_minimum(self):
        p = MichalewiczMinProblem()
        res = CuckooSearch({"n_generations": 2000}, seed=42).run(p)
        assert res.ok
        assert p.evaluate(res.best_solution) < -1.3


class TestFenceProblem:
    def test_area_and_constraint(self):
        p = FenceProblem(100.0)
        assert p.evaluate(Solution([25.0, 25.0])) == pytest.approx(625.0)
        assert p.within_constraints(Solution([25.0, 25.0]))
        assert not p.within_constraints(Solution([30.0, 25.0]))
        assert not p.within_constraints(Solution([-1.0, 5.0]))

    def test_random_solutions_use_at_most_the_fence(self, rng):
        p = FenceProblem(40.0)
        assert all(p.within_constraints(p.random_solution(rng)) for _ in range(100))

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            FenceProblem(0.0)


class TestBoxMinAreaProblem:
    def test_cube_area(self):
        p = BoxMinAreaProblem(1000.0)
        cube = Solution([10.0, 10.0])
        assert p.height(cube) == pytest.approx(10.0)
        assert p.evaluate(cube) == pytest.approx(600.0)
        assert p.info().extra["known_optimum"] == pytest.approx(600.0)

    def test_flat_box_is_worse_than_cube(self):
        p = BoxMinAreaProblem(1000.0)
        assert p.fitness(Solution([10.0, 10.0])) > p.fitness(Solution([50.0, 2.0]))

    def test_sides_must_be_positive(self):
        p = BoxMinAreaProblem(8.0)
        assert not p.within_constraints(Solution([0.0, 2.0]))
        assert p.within_constraints(Solution([2.0, 2.0]))
