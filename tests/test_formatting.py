from dataclasses import replace

from rent_vs_buy.formatting import format_currency, format_currency_full, verdict_text
from rent_vs_buy.model import calculate


def test_format_currency_compacts_millions():
    assert format_currency(1_234_567) == "$1.23M"
    assert format_currency(54_600) == "$54,600"


def test_format_currency_puts_sign_before_dollar():
    assert format_currency(-1_234_567) == "-$1.23M"
    assert format_currency(-54_600) == "-$54,600"


def test_format_currency_full():
    assert format_currency_full(1_234_567) == "$1,234,567"
    assert format_currency_full(-1_234.4) == "-$1,234"
    assert format_currency_full(0) == "$0"


def test_verdict_text_for_renting(default_inputs):
    result = calculate(default_inputs)
    headline, detail = verdict_text(result, default_inputs.years_to_analyze)

    assert headline == "Renting looks better"
    assert detail.startswith("Renting leaves you $")
    assert detail.endswith("better off over 10 years")


def test_verdict_text_for_buying(buy_friendly_inputs):
    inputs = replace(buy_friendly_inputs, years_to_analyze=5)
    headline, detail = verdict_text(calculate(inputs), 5)

    assert headline == "Buying looks better"
    assert detail.endswith("more net worth over 5 years")
