"""
Pytest configuration and fixtures for the tvmkit test suite.

Fixtures provide the reference cash-flow series and loan terms used across
unit and integration tests.
"""

from typing import Dict, List

import pytest


# ---------------------------------------------------------------------------
# Cash-flow Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def project_flows() -> List[float]:
    """
    Capital project: 500k outlay, three years of inflows.

    NPV at 10%: 80,015.0263
    """
    return [-500_000.0, 200_000.0, 300_000.0, 200_000.0]


@pytest.fixture
def irr_flows() -> List[float]:
    """
    Five-year investment with declining inflows.

    IRR: 0.1661
    """
    return [-5000.0, 1700.0, 1900.0, 1600.0, 1500.0, 700.0]


@pytest.fixture
def irr_flows_small() -> List[float]:
    """
    Smaller investment with an IRR close to 5%.

    IRR: 0.0523
    """
    return [-2000.0, 400.0, 700.0, 500.0, 400.0, 300.0]


@pytest.fixture
def uneven_payback_flows() -> List[float]:
    """
    Growing inflows that recover the outlay during year 4.

    Payback (4 decimals): 3.4211
    """
    return [-50.0, 10.0, 13.0, 16.0, 19.0, 22.0]


# ---------------------------------------------------------------------------
# Loan Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def loan() -> Dict[str, float]:
    """
    20,000 borrowed at 7.5% annual over 5 years (60 monthly payments).

    Payment: 400.759 (end of period), 398.2698 (beginning of period)
    """
    return {"principal": 20_000.0, "rate": 7.5}
