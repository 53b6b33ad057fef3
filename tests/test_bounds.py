from dataclasses import replace

from rent_vs_buy.bounds import (
    INPUT_BOUNDS,
    InputBound,
    clamp_and_snap,
    parse_input_value,
    sanitize_inputs,
)
from rent_vs_buy.schemas import Inputs


def test_every_input_field_has_a_bound():
    assert set(INPUT_BOUNDS) == set(Inputs.__dataclass_fields__)


def test_clamp_and_snap_rounds_to_step():
    bound = INPUT_BOUNDS["home_price"]
    assert clamp_and_snap(1_234_567, bound) == 1_235_000
    assert clamp_and_snap(5_000_000, bound) == 2_000_000
    assert clamp_and_snap(10, bound) == 100_000


def test_clamp_and_snap_keeps_step_precision():
    assert clamp_and_snap(6.93, INPUT_BOUNDS["mortgage_rate"]) == 6.95
    assert clamp_and_snap(1.04, INPUT_BOUNDS["maintenance_pct"]) == 1.0
    assert clamp_and_snap(13.2, INPUT_BOUNDS["down_payment_pct"]) == 13.0


def test_step_decimals():
    assert InputBound("x", 0, 1, 0.05).decimals == 2
    assert InputBound("x", 0, 1, 0.5).decimals == 1
    assert InputBound("x", 0, 10, 5).decimals == 0


def test_parse_input_value_accepts_thousands_separators():
    bound = INPUT_BOUNDS["home_price"]
    assert parse_input_value("450,000", bound, last_valid=420_000) == 450_000


def test_parse_input_value_reverts_on_bad_text():
    bound = INPUT_BOUNDS["monthly_rent"]
    assert parse_input_value("a lot", bound, last_valid=1_850) == 1_850
    assert parse_input_value("", bound, last_valid=1_850) == 1_850
    assert parse_input_value("nan", bound, last_valid=1_850) == 1_850


def test_parse_input_value_clamps_numbers():
    bound = INPUT_BOUNDS["monthly_rent"]
    assert parse_input_value("25000", bound, last_valid=1_850) == 10_000


def test_sanitize_inputs_clamps_every_field(default_inputs):
    wild = replace(
        default_inputs,
        years_to_analyze=45,
        loan_term_years=17,
        investment_return=0.0,
        hoa_monthly=130.0,
    )
    clean = sanitize_inputs(wild)

    assert clean.years_to_analyze == 30
    assert isinstance(clean.years_to_analyze, int)
    assert clean.loan_term_years == 15
    assert isinstance(clean.loan_term_years, int)
    assert clean.investment_return == 2.0
    assert clean.hoa_monthly == 125.0
    assert clean.home_price == default_inputs.home_price


def test_sanitize_inputs_leaves_defaults_unchanged(default_inputs):
    assert sanitize_inputs(default_inputs) == default_inputs
