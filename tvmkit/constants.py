"""
Global constants for tvmkit.

Purpose
-------
Centralizes the numeric defaults used throughout tvmkit so that the root
finder, the loan formulas and the rounding helpers agree on them.

Usage
-----
>>> from tvmkit.constants import PRECISION, MAX_ITERATIONS
>>>
>>> root = find_root(f)  # uses PRECISION and MAX_ITERATIONS

Categories
----------
- Root finding: step/tolerance, iteration cap, default guess
- Loans: months per year, percent scale
- Rounding: decimal places for currency and precise display
"""

__all__ = [
    # Root finding
    "PRECISION",
    "MAX_ITERATIONS",
    "DEFAULT_GUESS",
    # Loans
    "MONTHS_PER_YEAR",
    "PERCENT",
    # Rounding
    "CURRENCY_DECIMALS",
    "PRECISE_DECIMALS",
]


# =============================================================================
# Root Finding Defaults
# =============================================================================

PRECISION: float = 1e-7
"""Finite-difference step AND convergence tolerance of the Newton-Raphson solver."""

MAX_ITERATIONS: int = 20
"""Iteration cap of the Newton-Raphson solver.

The loop runs from 1 to MAX_ITERATIONS - 1, so at most 19 updates are tried.
"""

DEFAULT_GUESS: float = 0.1
"""Initial guess used when the caller does not supply one (10% per period)."""


# =============================================================================
# Loan Defaults
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (periodic rate and period-count conversion)."""

PERCENT: float = 100.0
"""Scale of percentage rates (7.5 means 7.5%)."""


# =============================================================================
# Rounding
# =============================================================================

CURRENCY_DECIMALS: int = 2
"""Decimal places for currency display (round_currency)."""

PRECISE_DECIMALS: int = 4
"""Decimal places for precise display and reference comparisons (round_precise)."""
