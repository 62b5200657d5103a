"""Shared fixtures for the nestswarm test-suite."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from .helpers import LinearProblem, PointProblem, QuadraticProblem


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def quadratic():
    return QuadraticProblem()


@pytest.fixture
def linear():
    return LinearProblem()


@pytest.fixture
def point_problem():
    return PointProblem()
