"""
Rent vs. Buy projection toolkit.

This package projects, year by year, the wealth of buying a home with a
fixed-rate mortgage against renting and investing the difference, and
recommends whichever path ends the horizon with more net worth.
"""

from .schemas import (
    DEFAULT_INPUTS,
    CalculationResult,
    Inputs,
    YearlySnapshot,
)
from .model import calculate

__all__ = [
    "DEFAULT_INPUTS",
    "CalculationResult",
    "Inputs",
    "YearlySnapshot",
    "calculate",
]
