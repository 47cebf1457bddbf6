"""General utilities for tvmkit

Contents
--------
- Validation helpers (ensure_cash_flows)
- Rounding helpers (round_currency, round_precise)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from .constants import CURRENCY_DECIMALS, PRECISE_DECIMALS
from .exceptions import ValidationError, InsufficientCashFlowsError

__all__ = [
    # Validation
    "ensure_cash_flows",
    # Rounding
    "round_currency",
    "round_precise",
]

ArrayLike = Sequence[float] | np.ndarray | pd.Series


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def ensure_cash_flows(
    values: ArrayLike,
    *,
    name: str = "cash_flows",
    min_length: int = 1,
) -> np.ndarray:
    """Convert input to a 1-D float NumPy array with helpful error messages.

    The caller's sequence is never modified; a Series is read by position,
    so index 0 is always its first element regardless of labels.
    """
    if isinstance(values, pd.Series):
        values = values.to_numpy()
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} must be a sequence of real numbers ({exc}).") from exc
    if arr.ndim != 1:
        raise ValidationError(f"{name} must be 1-D, got shape {arr.shape}.")
    if arr.size == 0:
        raise ValidationError(
            f"{name} must not be empty. Index 0 is the time-zero flow and is always required."
        )
    if arr.size < min_length:
        raise InsufficientCashFlowsError(
            f"{name} needs at least {min_length} entries, got {arr.size}."
        )
    if not np.isfinite(arr).all():
        raise ValidationError(f"{name} must contain only finite values.")
    return arr


# ---------------------------------------------------------------------------
# Rounding helpers
# ---------------------------------------------------------------------------

def _round_half_away(value: float, decimals: int) -> float:
    # scaled - trunc(scaled) is exact: no second rounding near .5 or above 2**52.
    # NaN/inf fall through the comparison unchanged.
    scale = 10.0 ** decimals
    scaled = np.float64(value) * scale
    with np.errstate(invalid="ignore"):
        whole = np.trunc(scaled)
        if np.abs(scaled - whole) >= 0.5:
            whole = whole + np.copysign(1.0, scaled)
    return float(whole / scale)


def round_currency(value: float) -> float:
    """Round to 2 decimal places, halves away from zero (not banker's rounding)."""
    return _round_half_away(value, CURRENCY_DECIMALS)


def round_precise(value: float) -> float:
    """Round to 4 decimal places, halves away from zero."""
    return _round_half_away(value, PRECISE_DECIMALS)
