"""
Unit tests for solver.py.

Tests the Newton-Raphson root finder: convergence, the returned iterate,
the iteration budget and the None result on non-convergence.
"""

import math
import warnings

import pytest

from tvmkit.config import RootFinderConfig
from tvmkit.constants import MAX_ITERATIONS, PRECISION
from tvmkit.exceptions import ConfigurationError
from tvmkit.solver import find_root


class CountingFunction:
    """Wraps a function and counts how often the solver calls it."""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.func(x)


class TestConvergence:
    """Test roots found by the solver."""

    def test_square_root_of_two(self):
        """x^2 - 2 from 1.0 converges to sqrt(2)."""
        root = find_root(lambda x: x * x - 2.0, 1.0)

        assert root is not None
        assert root == pytest.approx(math.sqrt(2.0), abs=1e-9)

    def test_default_guess(self):
        """Without a guess the solver starts at 0.1 and still converges."""
        f = CountingFunction(lambda x: x - 3.0)
        root = find_root(f)

        assert root == pytest.approx(3.0, abs=1e-8)
        # one step to reach 3, one step to confirm; three calls per step
        assert f.calls == 6

    def test_negative_root(self):
        """Roots below zero are found like any other."""
        root = find_root(lambda x: x * x - 2.0, -1.0)

        assert root == pytest.approx(-math.sqrt(2.0), abs=1e-9)

    def test_returns_latest_iterate(self):
        """On convergence the new iterate is returned, not the previous guess."""
        config = RootFinderConfig(precision=1e-2)
        root = find_root(lambda x: x * x - 2.0, 1.0, config=config)

        # iterates: 1.5, 1.41667, 1.41422 (step 0.0025 <= 0.01)
        assert root == pytest.approx(1.4142157, abs=1e-6)
        assert abs(root - 1.4166667) > 1e-3

    def test_result_is_builtin_float(self):
        """Results are plain floats, not numpy scalars."""
        root = find_root(lambda x: x - 1.0, 0.0)

        assert type(root) is float


class TestNonConvergence:
    """Test the None result when no root is found."""

    def test_no_real_root(self):
        """x^2 + 1 has no real root: every Newton step is at least 1 long."""
        assert find_root(lambda x: x * x + 1.0) is None

    def test_constant_function(self):
        """A zero derivative gives inf/NaN iterates and no root, without warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert find_root(lambda x: 5.0) is None

    def test_uses_full_budget(self):
        """Non-convergence consumes all MAX_ITERATIONS - 1 steps, NaN included."""
        f = CountingFunction(lambda x: 5.0)
        find_root(f)

        assert f.calls == 3 * (MAX_ITERATIONS - 1)

    def test_budget_from_config(self):
        """max_iterations=2 allows a single update step."""
        f = CountingFunction(lambda x: x * x - 2.0)
        result = find_root(f, 1.0, config=RootFinderConfig(max_iterations=2))

        assert result is None
        assert f.calls == 3

    def test_more_iterations_reach_root(self):
        """A far-off guess that fails with the default budget converges with a larger one."""
        f = lambda x: x * x - 2.0  # noqa: E731

        assert find_root(f, 1e6) is None
        root = find_root(f, 1e6, config=RootFinderConfig(max_iterations=100))
        assert root == pytest.approx(math.sqrt(2.0), abs=1e-9)


class TestConfiguration:
    """Test solver configuration handling."""

    def test_default_config_matches_constants(self):
        """Default config reproduces the module constants."""
        config = RootFinderConfig()

        assert config.precision == PRECISION
        assert config.max_iterations == MAX_ITERATIONS

    def test_default_guess_from_config(self):
        """default_guess is used when no guess is passed."""
        f = CountingFunction(lambda x: x * x - 2.0)
        root = find_root(f, config=RootFinderConfig(default_guess=-1.0))

        assert root == pytest.approx(-math.sqrt(2.0), abs=1e-9)

    def test_rejects_non_config(self):
        """A plain dict is not accepted as config."""
        with pytest.raises(ConfigurationError, match="RootFinderConfig"):
            find_root(lambda x: x, 0.0, config={"precision": 1e-3})
