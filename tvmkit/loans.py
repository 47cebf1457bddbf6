"""
Loan amortization module for tvmkit.

Purpose
-------
Computes the level payment that repays a principal plus interest over a
fixed number of periods, and the matching payment-by-payment schedule.

Conventions
-----------
- ``rate`` is an annual percentage (7.5 means 7.5%). The periodic rate is
  monthly: r = rate / 12 / 100.
- ``num_periods`` counts months or years according to ``period_unit``;
  the number of payments is m = num_periods * (12 if "year" else 1).
- Paying at the beginning of each period (annuity due) removes one
  compounding step from the numerator: k = m - 1 instead of k = m.

      payment = principal * r (1 + r)^k / ((1 + r)^m - 1)

A zero rate makes the formula 0/0 and yields NaN, matching the rest of the
library's treatment of degenerate arithmetic.

Example
-------
>>> amortization(20_000, 7.5, 5, "year", False)
400.7589...
>>> amortization(20_000, 7.5, 60, "month", True)
398.2697...
"""

from __future__ import annotations

from typing import Literal

import numpy as np
import pandas as pd

from .constants import MONTHS_PER_YEAR, PERCENT
from .exceptions import ValidationError

__all__ = [
    "PeriodUnit",
    "amortization",
    "amortization_schedule",
]

PeriodUnit = Literal["month", "year"]

_MULTIPLIERS = {
    "month": 1,
    "year": MONTHS_PER_YEAR,
}


def _multiplier(period_unit: str) -> int:
    key = str(period_unit).lower()
    if key not in _MULTIPLIERS:
        raise ValidationError(
            f"period_unit must be 'month' or 'year', got {period_unit!r}."
        )
    return _MULTIPLIERS[key]


def _periodic_rate(rate: float) -> np.float64:
    return np.float64(rate) / MONTHS_PER_YEAR / PERCENT


def amortization(
    principal: float,
    rate: float,
    num_periods: float,
    period_unit: PeriodUnit = "month",
    pay_at_beginning: bool = False,
) -> float:
    """
    Level payment that amortizes ``principal`` over ``num_periods``.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    rate : float
        Annual interest rate in percent.
    num_periods : float
        Loan term, in ``period_unit``.
    period_unit : {"month", "year"}, default "month"
        Unit of ``num_periods``. Payments are always monthly, so 5 years and
        60 months give the same payment.
    pay_at_beginning : bool, default False
        Pay at the start of each period instead of the end.

    Returns
    -------
    float
        Monthly payment.

    Raises
    ------
    ValidationError
        If ``period_unit`` is not "month" or "year".
    """
    r = _periodic_rate(rate)
    payments = np.float64(num_periods) * _multiplier(period_unit)
    accruals = payments - 1.0 if pay_at_beginning else payments

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        numerator = r * np.power(1.0 + r, accruals)
        denominator = np.power(1.0 + r, payments) - 1.0
        return float(np.float64(principal) * (numerator / denominator))


def amortization_schedule(
    principal: float,
    rate: float,
    num_periods: float,
    period_unit: PeriodUnit = "month",
    pay_at_beginning: bool = False,
) -> pd.DataFrame:
    """
    Payment-by-payment breakdown of an amortizing loan.

    Returns
    -------
    pd.DataFrame
        Indexed by ``period`` (1..m) with columns ``payment``, ``interest``,
        ``principal`` and ``balance`` (remaining after the payment). The
        principal column sums to the loan amount and the final balance is
        zero up to rounding. With ``pay_at_beginning`` the first payment
        carries no interest.

    Raises
    ------
    ValidationError
        If ``period_unit`` is invalid or the number of payments is not a
        positive whole number.
    """
    total = float(num_periods) * _multiplier(period_unit)
    if total < 1 or not float(total).is_integer():
        raise ValidationError(
            f"Schedule needs a positive whole number of payments, got {total}."
        )
    m = int(total)

    payment = amortization(principal, rate, num_periods, period_unit, pay_at_beginning)
    r = float(_periodic_rate(rate))

    rows = []
    balance = float(principal)
    for period in range(1, m + 1):
        interest = 0.0 if (pay_at_beginning and period == 1) else balance * r
        repaid = payment - interest
        balance -= repaid
        rows.append(
            {
                "period": period,
                "payment": payment,
                "interest": interest,
                "principal": repaid,
                "balance": balance,
            }
        )

    return pd.DataFrame(rows).set_index("period")
