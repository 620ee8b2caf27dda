# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Loan installment (EMI) calculations"""

from ..core.calculations import FinancialCalculations


def calculate_emi(
    principal: float,
    annual_rate_percent: float,
    tenure_years: int,
    places: int = 2,
) -> float:
    """
    Fixed monthly installment that fully amortizes a loan.

    Standard reducing-balance formula M = P * r(1+r)^n / ((1+r)^n - 1), with
    r the monthly decimal rate and n the number of months. A zero rate
    repays the principal in equal parts (M = P / n).

    Args:
        principal: Loan amount (>= 0)
        annual_rate_percent: Annual interest rate in percent, e.g. 10 for 10%
        tenure_years: Loan tenure in years (> 0)
        places: Decimal places for the rounded installment

    Returns:
        Monthly installment rounded half-up to ``places`` decimals

    Raises:
        ValueError: If any precondition is violated

    Example:
        >>> calculate_emi(1_000_000, 0, 4)
        20833.33
    """
    if principal < 0:
        raise ValueError(f"Principal cannot be negative, got {principal}")

    factor = FinancialCalculations.payment_factor(annual_rate_percent, tenure_years)
    return FinancialCalculations.round_currency(principal * factor, places)
