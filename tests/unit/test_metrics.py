"""
Unit tests for metrics.py.

Tests payback period (even and uneven flows) and return on investment.
"""

import math

import pytest

from tvmkit.exceptions import InsufficientCashFlowsError, ValidationError
from tvmkit.metrics import payback_period, return_on_investment
from tvmkit.utils import round_precise


class TestPaybackEven:
    """Test payback period for even cash flows (num_periods == 0)."""

    def test_reference_case(self):
        """105 recovered at 25 per period takes exactly 4.2 periods."""
        assert payback_period([105.0, 25.0], 0.0) == 4.2

    def test_sign_of_outlay_ignored(self):
        """The ratio is taken in absolute value."""
        assert payback_period([-105.0, 25.0], 0.0) == 4.2

    def test_extra_flows_ignored(self):
        """Only the first two entries are used."""
        assert payback_period([-100.0, 40.0, 1000.0], 0) == 2.5

    def test_single_flow_raises(self):
        """Even payback needs an outlay and a periodic flow."""
        with pytest.raises(InsufficientCashFlowsError, match="at least 2"):
            payback_period([105.0], 0.0)

    def test_insufficient_is_validation_error(self):
        """InsufficientCashFlowsError is caught as a ValidationError."""
        with pytest.raises(ValidationError):
            payback_period([105.0], 0.0)

    def test_zero_periodic_flow(self):
        """A zero periodic flow never pays back: inf, not an exception."""
        assert math.isinf(payback_period([-100.0, 0.0], 0.0))


class TestPaybackUneven:
    """Test payback period for uneven cash flows."""

    def test_reference_case(self, uneven_payback_flows):
        """Cumulative total turns positive in the fourth inflow."""
        assert round_precise(payback_period(uneven_payback_flows, 5.0)) == 3.4211

    def test_exact_recovery(self):
        """Formula on a case that recovers within the first inflow."""
        # cumulative -100 + 150 = 50 > 0 -> 1 + (50 - 150) / 150
        assert payback_period([-100.0, 150.0], 1.0) == pytest.approx(1.0 - 100.0 / 150.0)

    def test_never_recovered(self):
        """A series that never turns positive returns the number of flows."""
        assert payback_period([-100.0, 10.0, 10.0], 2.0) == 3.0

    def test_single_outlay(self):
        """A lone outlay never pays back."""
        assert payback_period([-100.0], 3.0) == 1.0

    def test_empty_raises(self):
        """Empty series is rejected."""
        with pytest.raises(ValidationError):
            payback_period([], 3.0)


class TestReturnOnInvestment:
    """Test simple ROI."""

    def test_reference_case(self):
        """60,000 earned on 55,000 invested."""
        assert round_precise(return_on_investment(-55_000.0, 60_000.0)) == 0.0909

    def test_sign_of_investment_ignored(self):
        """Positive and negative investments give the same ROI."""
        assert return_on_investment(55_000.0, 60_000.0) == return_on_investment(-55_000.0, 60_000.0)

    def test_loss(self):
        """Earning less than invested gives a negative ROI."""
        assert return_on_investment(-200.0, 150.0) == pytest.approx(-0.25)

    def test_zero_investment(self):
        """Zero investment propagates inf instead of raising."""
        assert math.isinf(return_on_investment(0.0, 10.0))
