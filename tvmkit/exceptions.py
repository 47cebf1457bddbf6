"""
Custom exceptions for tvmkit.

Purpose
-------
Provides a unified exception hierarchy for the precondition failures that
tvmkit reports. All exceptions inherit from TVMKitError, enabling catch-all
handling when needed.

Non-convergence of the IRR root finder is NOT an exception: it is reported
as ``None``. Numerical degeneracy (e.g. ``rate <= -1``) is propagated as
NaN/inf through the arithmetic.

Exception Hierarchy
-------------------
TVMKitError (base)
├── ConfigurationError - Invalid settings or solver configuration
└── ValidationError - Input precondition violations
    └── InsufficientCashFlowsError - Series too short for the operation

Usage
-----
>>> from tvmkit.exceptions import ValidationError
>>>
>>> try:
...     net_present_value(0.1, [])
... except ValidationError as e:
...     print(f"bad input: {e}")
"""

__all__ = [
    "TVMKitError",
    "ConfigurationError",
    "ValidationError",
    "InsufficientCashFlowsError",
]


class TVMKitError(Exception):
    """
    Base exception for all tvmkit errors.

    Examples
    --------
    >>> try:
    ...     payback_period([100.0], 0.0)
    ... except TVMKitError as e:
    ...     logger.error(f"Payback failed: {e}")
    """
    pass


class ConfigurationError(TVMKitError):
    """
    Invalid configuration.

    Raised when a solver configuration object of the wrong type is handed
    to the root finder, or when settings cannot be applied.

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "config must be a RootFinderConfig, got dict. "
    ...     "Use RootFinderConfig.model_validate(...) to build one."
    ... )
    """
    pass


class ValidationError(TVMKitError):
    """
    Input validation failures.

    Raised when input data fails precondition checks, such as:
    - Empty cash-flow series
    - Multi-dimensional input where a 1-D series is expected
    - NaN or infinite cash-flow entries
    - Unknown amortization period unit

    Examples
    --------
    >>> raise ValidationError(
    ...     "cash_flows must not be empty. "
    ...     "Index 0 is the time-zero flow and is always required."
    ... )
    """
    pass


class InsufficientCashFlowsError(ValidationError):
    """
    Cash-flow series shorter than the operation requires.

    Raised when, e.g., the even-flow payback period needs both the initial
    outlay (index 0) and the periodic flow (index 1).

    Examples
    --------
    >>> raise InsufficientCashFlowsError(
    ...     "cash_flows needs at least 2 entries, got 1."
    ... )
    """
    pass
