"""
Newton-Raphson root finder for tvmkit.

Purpose
-------
Searches for a zero of a real-to-real function starting from a guess, using
the function value and a central finite-difference estimate of its slope.
The solver knows nothing about finance: ``internal_rate_of_return`` hands it
the NPV of a fixed cash-flow series as a closure.

Algorithm
---------
For each iteration i = 1 .. max_iterations - 1:

    value      = f(g)
    slope      = (f(g + h) - f(g - h)) / (2h)
    next       = g - value / slope
    |next - g| <= h  ->  return next
    g          = next

where h is the configured precision (1e-7 by default). If the loop runs out,
the solver returns None. It never returns the last guess and never raises on
non-convergence: absence of a root is a regular outcome.

Arithmetic follows IEEE-754 (numpy float64): a zero slope produces inf/NaN,
the convergence test fails on those values and the loop keeps going until
the budget is used up.

Example
-------
>>> find_root(lambda x: x * x - 2.0, 1.0)
1.4142135623...
>>> find_root(lambda x: x * x + 1.0) is None
True
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np

from .config import RootFinderConfig
from .exceptions import ConfigurationError

__all__ = [
    "find_root",
]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = RootFinderConfig()


def find_root(
    f: Callable[[float], float],
    initial_guess: Optional[float] = None,
    *,
    config: Optional[RootFinderConfig] = None,
) -> Optional[float]:
    """
    Find a zero of ``f`` with the Newton-Raphson method.

    Parameters
    ----------
    f : Callable[[float], float]
        Objective function. Called three times per iteration (at the guess
        and at guess +/- precision).
    initial_guess : float, optional
        Starting point. Defaults to ``config.default_guess`` (0.1).
    config : RootFinderConfig, optional
        Solver knobs. The default reproduces precision 1e-7 and a cap of
        20 iterations (19 update steps).

    Returns
    -------
    float or None
        The first iterate whose step from the previous guess is within the
        precision, or None when no such iterate appears within the budget.

    Raises
    ------
    ConfigurationError
        If ``config`` is not a RootFinderConfig.
    """
    if config is None:
        config = _DEFAULT_CONFIG
    elif not isinstance(config, RootFinderConfig):
        raise ConfigurationError(
            f"config must be a RootFinderConfig, got {type(config).__name__}. "
            f"Use RootFinderConfig.model_validate(...) to build one."
        )

    h = np.float64(config.precision)
    guess = np.float64(config.default_guess if initial_guess is None else initial_guess)

    def slope(x: np.float64) -> np.float64:
        return (np.float64(f(x + h)) - np.float64(f(x - h))) / (2.0 * h)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for iteration in range(1, config.max_iterations):
            value = np.float64(f(guess))
            next_guess = guess - value / slope(guess)

            if abs(next_guess - guess) <= h:
                logger.debug("Converged to %r after %d iteration(s)", next_guess, iteration)
                return float(next_guess)

            logger.debug("Iteration %d: guess=%r f=%r", iteration, next_guess, value)
            guess = next_guess

    logger.debug(
        "No root within %d iterations (last guess %r discarded)",
        config.max_iterations - 1,
        guess,
    )
    return None
