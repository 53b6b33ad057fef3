from __future__ import annotations

from typing import Tuple

from .schemas import CalculationResult


def format_currency(amount: float) -> str:
    """Compact dollars: millions as ``$1.25M``, everything else whole dollars."""
    if abs(amount) >= 1_000_000:
        sign = "-" if amount < 0 else ""
        return f"{sign}${abs(amount) / 1_000_000:.2f}M"
    return format_currency_full(amount)


def format_currency_full(amount: float) -> str:
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.0f}"


def verdict_text(result: CalculationResult, years: int) -> Tuple[str, str]:
    diff = format_currency(result.net_worth_difference)
    if result.recommendation == "buy":
        return (
            "Buying looks better",
            f"Buying builds {diff} more net worth over {years} years",
        )
    return (
        "Renting looks better",
        f"Renting leaves you {diff} better off over {years} years",
    )
