from dataclasses import replace

import pytest

from rent_vs_buy.schemas import DEFAULT_INPUTS, Inputs


@pytest.fixture
def default_inputs() -> Inputs:
    return DEFAULT_INPUTS


@pytest.fixture
def buy_friendly_inputs() -> Inputs:
    # Expensive rent, fast appreciation, weak market returns.
    return replace(
        DEFAULT_INPUTS,
        home_price=300_000.0,
        down_payment_pct=20.0,
        monthly_rent=6_000.0,
        home_appreciation=8.0,
        investment_return=2.0,
    )
