from __future__ import annotations

import json
import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from .bounds import INPUT_BOUNDS, parse_input_value, sanitize_inputs
from .formatting import format_currency, format_currency_full, verdict_text
from .model import calculate, monthly_cost_breakdown
from .store import InputStore, StoreError

logger = logging.getLogger(__name__)

app = typer.Typer(help="Compare the long-run wealth of buying a home versus renting.")


def _default_store_path() -> str:
    return os.environ.get(
        "RVB_STORE_PATH", str(Path.home() / ".rent_vs_buy" / "inputs.json")
    )


@app.callback()
def main(
    ctx: typer.Context,
    store: str = typer.Option(
        default_factory=_default_store_path,
        help="Saved-inputs file (env RVB_STORE_PATH if omitted).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = InputStore(store)


@app.command()
def run(
    ctx: typer.Context,
    home_price: Optional[str] = typer.Option(None, help="Purchase price, e.g. 450,000."),
    down_payment_pct: Optional[str] = typer.Option(
        None, help="Down payment as a percent of the price."
    ),
    mortgage_rate: Optional[str] = typer.Option(None, help="Annual mortgage rate, %."),
    loan_term_years: Optional[str] = typer.Option(None, help="Loan term in years."),
    property_tax_rate: Optional[str] = typer.Option(
        None, help="Annual property tax, % of price."
    ),
    home_insurance: Optional[str] = typer.Option(None, help="Annual insurance premium."),
    maintenance_pct: Optional[str] = typer.Option(
        None, help="Annual maintenance, % of home value."
    ),
    hoa_monthly: Optional[str] = typer.Option(None, help="Monthly HOA fees."),
    home_appreciation: Optional[str] = typer.Option(
        None, help="Annual home appreciation, %."
    ),
    monthly_rent: Optional[str] = typer.Option(None, help="Current monthly rent."),
    rent_increase: Optional[str] = typer.Option(None, help="Annual rent increase, %."),
    investment_return: Optional[str] = typer.Option(
        None, help="Annual return on invested savings, %."
    ),
    years: Optional[str] = typer.Option(None, help="Years to analyze."),
    save: bool = typer.Option(True, help="Remember these inputs for the next run."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
) -> None:
    """
    Project both paths and print the recommendation with its supporting numbers.

    Values are clamped to each field's range and snapped to its step; text that
    is not a number keeps the saved value.
    """
    store: InputStore = ctx.obj
    raw_values = {
        "home_price": home_price,
        "down_payment_pct": down_payment_pct,
        "mortgage_rate": mortgage_rate,
        "loan_term_years": loan_term_years,
        "property_tax_rate": property_tax_rate,
        "home_insurance": home_insurance,
        "maintenance_pct": maintenance_pct,
        "hoa_monthly": hoa_monthly,
        "home_appreciation": home_appreciation,
        "monthly_rent": monthly_rent,
        "rent_increase": rent_increase,
        "investment_return": investment_return,
        "years_to_analyze": years,
    }
    saved = sanitize_inputs(store.load())
    overrides = {}
    for name, raw in raw_values.items():
        if raw is None:
            continue
        overrides[name] = parse_input_value(
            raw, INPUT_BOUNDS[name], last_valid=getattr(saved, name)
        )
    inputs = sanitize_inputs(replace(saved, **overrides))
    logger.debug("Running projection with %s", inputs)

    if save:
        try:
            store.save(inputs)
        except StoreError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2)

    result = calculate(inputs)

    if as_json:
        typer.echo(json.dumps({"inputs": inputs.to_dict(), "result": result.to_dict()}, indent=2))
        return

    headline, detail = verdict_text(result, inputs.years_to_analyze)
    typer.echo(headline)
    typer.echo(detail)
    if result.breakeven_year is not None:
        typer.echo(f"Breakeven: year {result.breakeven_year}")
    typer.echo("")
    typer.echo(
        f"Monthly buying cost: {format_currency_full(result.monthly_buy_total)}"
        f" ({format_currency_full(result.monthly_mortgage)} P&I)"
    )
    typer.echo(f"Monthly rent: {format_currency_full(result.monthly_rent_total)}")
    typer.echo(f"Down payment: {format_currency_full(result.down_payment)}")
    typer.echo("")
    typer.echo("Monthly cost breakdown (buying)")
    for line in monthly_cost_breakdown(inputs, result):
        typer.echo(
            f"  {line.label:<22}{format_currency_full(line.monthly_amount):>10}/mo"
            f"  {line.share:6.1%}"
        )
    typer.echo("")
    typer.echo(
        f"{'Year':>4}  {'Buy net worth':>14}  {'Rent net worth':>14}"
        f"  {'Unrecoverable':>14}  {'Rent paid':>14}"
    )
    for snap in result.yearly_data:
        typer.echo(
            f"{snap.year:>4}  {format_currency(snap.buy_net_worth):>14}"
            f"  {format_currency(snap.rent_net_worth):>14}"
            f"  {format_currency(snap.cumulative_true_buy_cost):>14}"
            f"  {format_currency(snap.cumulative_rent_cost):>14}"
        )
    typer.echo("")
    typer.echo(f"Total paid buying: {format_currency_full(result.total_buy_cost)}")
    typer.echo(f"Total rent paid: {format_currency_full(result.total_rent_cost)}")


@app.command()
def reset(ctx: typer.Context) -> None:
    """
    Forget saved inputs and go back to the national-average defaults.
    """
    store: InputStore = ctx.obj
    try:
        store.reset()
    except StoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    typer.echo("Saved inputs cleared.")


if __name__ == "__main__":
    app()
