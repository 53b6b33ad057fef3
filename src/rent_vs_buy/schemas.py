from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, List, Literal, Mapping, Optional

logger = logging.getLogger(__name__)

Recommendation = Literal["buy", "rent", "neutral"]


@dataclass(frozen=True)
class Inputs:
    """Household parameters for one buy-versus-rent projection.

    Rates are annual percentages (6.9 means 6.9%), money is in a single
    implicit currency unit.
    """

    home_price: float
    down_payment_pct: float
    mortgage_rate: float
    loan_term_years: int
    property_tax_rate: float
    home_insurance: float  # annual
    maintenance_pct: float  # of current home value, annual
    hoa_monthly: float
    home_appreciation: float
    monthly_rent: float
    rent_increase: float
    investment_return: float
    years_to_analyze: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], base: Optional["Inputs"] = None
    ) -> "Inputs":
        """Merge a partial mapping over ``base`` field by field.

        Unknown keys are ignored, and a value that is not a number keeps the
        ``base`` value for that field only.
        """
        base = base or DEFAULT_INPUTS
        updates: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            try:
                number = float(value)
            except (TypeError, ValueError):
                logger.warning("Ignoring %s=%r: not a number", f.name, value)
                continue
            if not math.isfinite(number):
                logger.warning("Ignoring %s=%r: not a number", f.name, value)
                continue
            updates[f.name] = int(number) if f.type == "int" else number
        return replace(base, **updates)


# U.S. national averages, 2024-2025.
DEFAULT_INPUTS = Inputs(
    home_price=420_000.0,
    down_payment_pct=13.0,
    mortgage_rate=6.9,
    loan_term_years=30,
    property_tax_rate=1.1,
    home_insurance=2_200.0,
    maintenance_pct=1.0,
    hoa_monthly=0.0,
    home_appreciation=4.0,
    monthly_rent=1_850.0,
    rent_increase=3.5,
    investment_return=7.0,
    years_to_analyze=10,
)


@dataclass(frozen=True)
class YearlySnapshot:
    year: int
    cumulative_buy_cost: float
    cumulative_rent_cost: float
    cumulative_true_buy_cost: float  # excludes principal
    buy_net_worth: float
    rent_net_worth: float
    home_value: float
    remaining_balance: float


@dataclass(frozen=True)
class CostLine:
    label: str
    monthly_amount: float
    share: float  # of the first-month buy total


@dataclass(frozen=True)
class CalculationResult:
    monthly_mortgage: float
    monthly_buy_total: float
    monthly_rent_total: float
    breakeven_year: Optional[int]
    total_buy_cost: float
    total_rent_cost: float
    buy_net_worth_final: float
    rent_net_worth_final: float
    recommendation: Recommendation
    down_payment: float
    yearly_data: List[YearlySnapshot] = field(default_factory=list)

    @property
    def net_worth_difference(self) -> float:
        return abs(self.buy_net_worth_final - self.rent_net_worth_final)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
