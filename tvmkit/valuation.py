"""
Discounting and valuation module for tvmkit.

Purpose
-------
Moves money through time at a simple periodic rate and values cash-flow
series. The NPV evaluator here is also the objective function handed to the
Newton-Raphson solver when computing the internal rate of return.

Key Mathematical Framework
--------------------------
- Present value:  PV = FV / (1 + r)^n
- Future value:   FV = PV * (1 + r)^n
- Net present value of CF_0 .. CF_{N-1}:

      NPV(r) = CF_0 + Σ_{i=1}^{N-1} CF_i / (1 + r)^i

  CF_0 happens at time zero and is never discounted.
- Internal rate of return: the r with NPV(r) = 0, found by
  ``solver.find_root``; None when the solver does not converge.

Design principles
-----------------
- Pure functions: inputs are borrowed read-only, nothing is cached.
- Vectorised NPV: per-period discount terms are computed as one numpy map
  and summed in a single reduction; each term only depends on its index.
- IEEE semantics: rates at or below -1 give NaN/inf instead of exceptions.

Example
-------
>>> net_present_value(0.1, [-500_000, 200_000, 300_000, 200_000])
80015.0262...
>>> internal_rate_of_return([-5000, 1700, 1900, 1600, 1500, 700])
0.1661...
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from .config import RootFinderConfig
from .solver import find_root
from .utils import ArrayLike, ensure_cash_flows

__all__ = [
    "present_value",
    "future_value",
    "net_present_value",
    "internal_rate_of_return",
    "discount_schedule",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Single amounts
# ---------------------------------------------------------------------------

def _growth(rate: float, num_periods: float) -> np.float64:
    return np.power(1.0 + np.float64(rate), np.float64(num_periods))


def present_value(rate: float, future_cash_flow: float, num_periods: float) -> float:
    """Discount ``future_cash_flow`` back ``num_periods`` periods: FV / (1 + r)^n."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(future_cash_flow) / _growth(rate, num_periods))


def future_value(rate: float, present_cash_flow: float, num_periods: float) -> float:
    """Compound ``present_cash_flow`` forward ``num_periods`` periods: PV * (1 + r)^n."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(present_cash_flow) * _growth(rate, num_periods))


# ---------------------------------------------------------------------------
# Cash-flow series
# ---------------------------------------------------------------------------

def _discount_factors(rate: float, n: int) -> np.ndarray:
    # (1 + r)^-i for i = 0..n-1; factor 0 is exactly 1 whatever the rate
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        factors = 1.0 / np.power(1.0 + np.float64(rate), np.arange(n, dtype=float))
    factors[0] = 1.0
    return factors


def _npv(rate: float, flows: np.ndarray) -> np.float64:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        terms = flows / np.power(1.0 + np.float64(rate), np.arange(flows.size, dtype=float))
        terms[0] = flows[0]
        return terms.sum()


def net_present_value(rate: float, cash_flows: ArrayLike) -> float:
    """
    Net present value of a cash-flow series at a periodic ``rate``.

    Parameters
    ----------
    rate : float
        Discount rate per period (0.05 for 5%). Unbounded; values <= -1
        yield NaN or inf.
    cash_flows : array-like
        Non-empty 1-D series. Entry i happens i periods from now; entry 0
        is added undiscounted.

    Returns
    -------
    float

    Raises
    ------
    ValidationError
        If ``cash_flows`` is empty, not 1-D, or contains NaN/inf.
    """
    flows = ensure_cash_flows(cash_flows)
    return float(_npv(rate, flows))


def internal_rate_of_return(
    cash_flows: ArrayLike,
    guess: Optional[float] = None,
    *,
    config: Optional[RootFinderConfig] = None,
) -> Optional[float]:
    """
    Rate at which the NPV of ``cash_flows`` is zero.

    Binds the NPV evaluator to the validated series and hands it to the
    Newton-Raphson solver.

    Parameters
    ----------
    cash_flows : array-like
        Non-empty 1-D series, usually an outlay at index 0 followed by inflows.
    guess : float, optional
        Starting rate for the solver (default 0.1).
    config : RootFinderConfig, optional
        Solver knobs; see ``solver.find_root``.

    Returns
    -------
    float or None
        The IRR, or None when the solver does not converge. Callers must
        branch on None; there is no best-effort fallback.
    """
    flows = ensure_cash_flows(cash_flows)

    def npv_at(rate: float) -> np.float64:
        return _npv(rate, flows)

    irr = find_root(npv_at, guess, config=config)
    if irr is None:
        logger.debug("IRR not found for %d cash flows (guess=%r)", flows.size, guess)
    return irr


def discount_schedule(rate: float, cash_flows: ArrayLike) -> pd.DataFrame:
    """
    Period-by-period breakdown of the NPV.

    Returns
    -------
    pd.DataFrame
        Indexed by ``period`` (0..N-1) with columns ``cash_flow``,
        ``discount_factor``, ``present_value`` and
        ``cumulative_present_value``. The last cumulative value is the NPV.

    Examples
    --------
    >>> discount_schedule(0.1, [-100.0, 60.0, 60.0])
            cash_flow  discount_factor  present_value  cumulative_present_value
    period
    0          -100.0         1.000000    -100.000000               -100.000000
    1            60.0         0.909091      54.545455                -45.454545
    2            60.0         0.826446      49.586777                  4.132231
    """
    flows = ensure_cash_flows(cash_flows)
    factors = _discount_factors(rate, flows.size)
    with np.errstate(invalid="ignore"):
        present = flows * factors
    present[0] = flows[0]

    df = pd.DataFrame(
        {
            "cash_flow": flows,
            "discount_factor": factors,
            "present_value": present,
            "cumulative_present_value": np.cumsum(present),
        },
        index=pd.RangeIndex(flows.size, name="period"),
    )
    return df
