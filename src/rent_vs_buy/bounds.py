from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional

from .schemas import Inputs


@dataclass(frozen=True)
class InputBound:
    """Allowed range and increment for one input field."""

    label: str
    minimum: float
    maximum: float
    step: float

    @property
    def decimals(self) -> int:
        text = repr(float(self.step))
        if "e" in text or text.endswith(".0"):
            return 0
        return len(text.split(".")[1])


INPUT_BOUNDS: Dict[str, InputBound] = {
    "home_price": InputBound("Home Price", 100_000, 2_000_000, 5_000),
    "down_payment_pct": InputBound("Down Payment", 3, 50, 0.5),
    "mortgage_rate": InputBound("Mortgage Rate", 2, 12, 0.05),
    "loan_term_years": InputBound("Loan Term", 10, 30, 5),
    "property_tax_rate": InputBound("Property Tax Rate", 0.3, 3.5, 0.05),
    "home_insurance": InputBound("Home Insurance", 500, 5_000, 100),
    "maintenance_pct": InputBound("Maintenance", 0.5, 3, 0.1),
    "hoa_monthly": InputBound("HOA Fees", 0, 1_000, 25),
    "monthly_rent": InputBound("Monthly Rent", 500, 10_000, 50),
    "rent_increase": InputBound("Annual Rent Increase", 0, 10, 0.25),
    "home_appreciation": InputBound("Home Appreciation", 0, 8, 0.25),
    "investment_return": InputBound("Investment Return", 2, 12, 0.25),
    "years_to_analyze": InputBound("Years to Analyze", 1, 30, 1),
}


def clamp_and_snap(value: float, bound: InputBound) -> float:
    clamped = min(bound.maximum, max(bound.minimum, value))
    snapped = round(clamped / bound.step) * bound.step
    return round(snapped, bound.decimals)


def parse_input_value(raw: str, bound: InputBound, last_valid: float) -> float:
    """Turn user text into an in-range value, or fall back to ``last_valid``."""
    try:
        value = float(raw.replace(",", "").strip())
    except ValueError:
        return last_valid
    if value != value:  # NaN
        return last_valid
    return clamp_and_snap(value, bound)


def sanitize_inputs(inputs: Inputs, bounds: Optional[Dict[str, InputBound]] = None) -> Inputs:
    """Clamp and snap every field that has a bound."""
    bounds = INPUT_BOUNDS if bounds is None else bounds
    values = inputs.to_dict()
    for f in fields(Inputs):
        bound = bounds.get(f.name)
        if bound is None:
            continue
        snapped = clamp_and_snap(float(values[f.name]), bound)
        values[f.name] = int(snapped) if f.type == "int" else snapped
    return Inputs(**values)
