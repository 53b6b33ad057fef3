from __future__ import annotations

from typing import List, Optional

from .schemas import CalculationResult, CostLine, Inputs, YearlySnapshot

SELLING_COST_RATE = 0.06


def calculate(inputs: Inputs) -> CalculationResult:
    """Project owning versus renting year by year.

    Whichever side is cheaper in a given month invests the difference. Each
    contribution gets a one-month ``(1 + r/12)`` bump when it is made and the
    whole pool then compounds by the full annual return at year end.

    A zero-year horizon produces no snapshots, and summarizing it raises
    ``IndexError``.
    """
    down_payment = inputs.home_price * (inputs.down_payment_pct / 100)
    loan_amount = inputs.home_price - down_payment
    monthly_rate = annual_to_monthly_rate(inputs.mortgage_rate)
    num_payments = inputs.loan_term_years * 12

    monthly_mortgage = monthly_mortgage_payment(
        loan_amount, inputs.mortgage_rate, num_payments
    )

    monthly_property_tax = inputs.home_price * (inputs.property_tax_rate / 100) / 12
    monthly_insurance = inputs.home_insurance / 12
    monthly_maintenance = inputs.home_price * (inputs.maintenance_pct / 100) / 12
    monthly_buy_total = (
        monthly_mortgage
        + monthly_property_tax
        + monthly_insurance
        + monthly_maintenance
        + inputs.hoa_monthly
    )

    annual_appreciation = inputs.home_appreciation / 100
    annual_investment = inputs.investment_return / 100
    annual_rent_increase = inputs.rent_increase / 100
    contribution_factor = 1 + annual_investment / 12

    # The down payment counts as an immediate outflow.
    cumulative_buy_cost = down_payment
    cumulative_rent_cost = 0.0
    cumulative_true_buy_cost = 0.0
    balance = loan_amount
    home_value = inputs.home_price
    rent = inputs.monthly_rent
    rent_savings = 0.0
    buy_savings = 0.0
    breakeven_year: Optional[int] = None
    yearly_data: List[YearlySnapshot] = []

    for year in range(1, inputs.years_to_analyze + 1):
        for _ in range(12):
            interest_payment = balance * monthly_rate
            principal_payment = monthly_mortgage - interest_payment
            balance = max(0.0, balance - principal_payment)

            maintenance = home_value * (inputs.maintenance_pct / 100) / 12
            total_monthly_buy = (
                monthly_mortgage
                + monthly_property_tax
                + monthly_insurance
                + maintenance
                + inputs.hoa_monthly
            )
            total_monthly_rent = rent

            cumulative_buy_cost += total_monthly_buy
            cumulative_rent_cost += total_monthly_rent
            # Unrecoverable spend only; principal excluded.
            cumulative_true_buy_cost += (
                interest_payment
                + monthly_property_tax
                + monthly_insurance
                + maintenance
                + inputs.hoa_monthly
            )

            diff = total_monthly_buy - total_monthly_rent
            if diff > 0:
                rent_savings += diff * contribution_factor
            else:
                buy_savings += -diff * contribution_factor

        home_value *= 1 + annual_appreciation
        rent *= 1 + annual_rent_increase
        rent_savings *= 1 + annual_investment
        # Not part of the recorded buy-side net worth.
        buy_savings *= 1 + annual_investment

        home_equity = home_value - balance - home_value * SELLING_COST_RATE
        invested_down_payment = down_payment * (1 + annual_investment) ** year
        rent_net_worth = invested_down_payment + rent_savings

        yearly_data.append(
            YearlySnapshot(
                year=year,
                cumulative_buy_cost=cumulative_buy_cost,
                cumulative_rent_cost=cumulative_rent_cost,
                cumulative_true_buy_cost=cumulative_true_buy_cost,
                buy_net_worth=home_equity,
                rent_net_worth=rent_net_worth,
                home_value=home_value,
                remaining_balance=balance,
            )
        )

        if breakeven_year is None and home_equity > rent_net_worth:
            breakeven_year = year

    final = yearly_data[-1]
    recommendation = "buy" if final.buy_net_worth > final.rent_net_worth else "rent"

    return CalculationResult(
        monthly_mortgage=monthly_mortgage,
        monthly_buy_total=monthly_buy_total,
        monthly_rent_total=inputs.monthly_rent,
        breakeven_year=breakeven_year,
        total_buy_cost=cumulative_buy_cost,
        total_rent_cost=cumulative_rent_cost,
        buy_net_worth_final=final.buy_net_worth,
        rent_net_worth_final=final.rent_net_worth,
        recommendation=recommendation,
        down_payment=down_payment,
        yearly_data=yearly_data,
    )


def monthly_cost_breakdown(inputs: Inputs, result: CalculationResult) -> List[CostLine]:
    """First-month buying costs, each with its share of the monthly total."""
    items = [
        ("Principal & Interest", result.monthly_mortgage),
        ("Property Tax", inputs.home_price * inputs.property_tax_rate / 100 / 12),
        ("Insurance", inputs.home_insurance / 12),
        ("Maintenance", inputs.home_price * inputs.maintenance_pct / 100 / 12),
    ]
    if inputs.hoa_monthly > 0:
        items.append(("HOA", inputs.hoa_monthly))

    total = result.monthly_buy_total
    return [
        CostLine(label=label, monthly_amount=amount, share=amount / total if total else 0.0)
        for label, amount in items
    ]


def monthly_mortgage_payment(
    principal: float, annual_rate_pct: float, term_months: int
) -> float:
    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    if monthly_rate == 0:
        return principal / term_months
    growth = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * growth / (growth - 1)


def annual_to_monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100.0 / 12.0
