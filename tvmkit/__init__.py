"""
tvmkit — Time Value of Money Toolkit

Standard time-value-of-money calculations as a pure, stateless library:
present/future value, NPV, IRR (Newton-Raphson), payback period, ROI and
loan amortization.

Modules
-------
- valuation  : Present/future value, NPV, IRR, discount schedules
- solver     : Newton-Raphson root finder used for the IRR
- metrics    : Payback period and return on investment
- loans      : Amortization payment and schedule
- utils      : Shared utilities (validation, rounding)
- config     : Solver configuration and logging settings

"""

import logging

from .valuation import (
    present_value,
    future_value,
    net_present_value,
    internal_rate_of_return,
    discount_schedule,
)
from .solver import find_root
from .metrics import payback_period, return_on_investment
from .loans import amortization, amortization_schedule
from .utils import round_currency, round_precise
from . import utils

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
