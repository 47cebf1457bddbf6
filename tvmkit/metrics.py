"""Investment appraisal metrics for tvmkit

Contents
--------
- payback_period: periods needed for cumulative inflows to recover the outlay
- return_on_investment: simple ROI of earnings against the invested amount

Both are closed-form or single-pass calculations. Division by a zero flow or
a zero investment follows IEEE semantics (inf/NaN), it does not raise.
"""

from __future__ import annotations

import numpy as np

from .utils import ArrayLike, ensure_cash_flows

__all__ = [
    "payback_period",
    "return_on_investment",
]


def payback_period(cash_flows: ArrayLike, num_periods: float) -> float:
    """
    Time needed for cumulative cash inflows to recover the initial outlay.

    Parameters
    ----------
    cash_flows : array-like
        Index 0 is the initial outlay, the rest are periodic flows.
    num_periods : float
        Pass 0 to signal even (constant) flows: the payback is then
        ``abs(cash_flows[0] / cash_flows[1])``. Any other value selects the
        uneven scan.

    Returns
    -------
    float
        For uneven flows: with ``years`` starting at 1 and the running total
        starting at ``cash_flows[0]``, each flow from index 1 is added; on the
        first positive total the result is
        ``years + (total - flow) / flow``, otherwise ``years`` grows by one.
        A series that never pays back returns ``len(cash_flows)``.

    Raises
    ------
    ValidationError
        If ``cash_flows`` is empty or has non-finite entries.
    InsufficientCashFlowsError
        If even flows are requested with fewer than two entries.

    Examples
    --------
    >>> payback_period([105.0, 25.0], 0.0)
    4.2
    >>> round_precise(payback_period([-50, 10, 13, 16, 19, 22], 5.0))
    3.4211
    """
    if num_periods == 0:
        flows = ensure_cash_flows(cash_flows, min_length=2)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.abs(flows[0] / flows[1]))

    flows = ensure_cash_flows(cash_flows)
    cumulative = flows[0]
    years = 1.0
    with np.errstate(divide="ignore", invalid="ignore"):
        for flow in flows[1:]:
            cumulative += flow
            if cumulative > 0:
                return float(years + (cumulative - flow) / flow)
            years += 1.0
    return years


def return_on_investment(present_cash_flow: float, earnings: float) -> float:
    """ROI = (earnings - |investment|) / |investment|; the sign of the investment is ignored."""
    invested = np.abs(np.float64(present_cash_flow))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((np.float64(earnings) - invested) / invested)
