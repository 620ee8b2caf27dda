# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the amortization arithmetic shared by the debt
modules. These functions are pure (math-only); other modules should delegate
to these to ensure a single source of truth for rate and rounding handling.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

import numpy as np
from pyxirr import pmt


class FinancialCalculations:
    """
    Pure mathematical functions for loan calculations.

    Rates are annual percentages as entered by users (10 means 10%), tenures
    are whole years with monthly payments.
    """

    @staticmethod
    def monthly_rate(annual_rate_percent: float) -> float:
        """Convert an annual percentage rate to a monthly decimal rate."""
        return annual_rate_percent / (12 * 100)

    @staticmethod
    def total_months(tenure_years: int) -> int:
        """Number of monthly installments over the tenure."""
        return tenure_years * 12

    @staticmethod
    def payment_factor(annual_rate_percent: float, tenure_years: int) -> float:
        """
        Installment per unit of principal under reducing-balance amortization.

        Formula: f = r(1+r)^n / ((1+r)^n - 1)
        Where:
            r = Monthly interest rate
            n = Number of payments

        A zero rate makes the general formula 0/0, so it is handled as
        straight-line repayment (f = 1/n). When (1+r)^n overflows a float the
        factor is indistinguishable from its limit r and that value is used.

        Args:
            annual_rate_percent: Annual interest rate in percent (>= 0)
            tenure_years: Loan tenure in years (> 0)

        Returns:
            Monthly installment for a principal of 1.0

        Raises:
            ValueError: If the rate is negative or the tenure is not positive
        """
        if annual_rate_percent < 0:
            raise ValueError(f"Interest rate cannot be negative, got {annual_rate_percent}")
        if tenure_years <= 0:
            raise ValueError(f"Tenure must be positive, got {tenure_years}")

        monthly_rate = FinancialCalculations.monthly_rate(annual_rate_percent)
        months = FinancialCalculations.total_months(tenure_years)
        if monthly_rate == 0:
            return 1 / months
        payment = pmt(monthly_rate, months, 1.0)
        if payment is None or not np.isfinite(payment):
            # (1+r)^n overflows; the factor has converged to r
            return monthly_rate
        return -payment

    @staticmethod
    def round_currency(value: float, places: int = 2) -> float:
        """
        Round a currency amount half-up to a fixed number of decimals.

        Rounding goes through ``Decimal`` on the shortest float repr so that
        values such as 1.005 round to 1.01 rather than to the binary
        neighbour below. Non-finite values are returned unchanged.
        """
        if not np.isfinite(value):
            return value
        quantum = Decimal(1).scaleb(-places)
        amount = Decimal(repr(float(value)))
        with localcontext() as ctx:
            # quantize needs every integer digit plus the decimals in precision
            ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
            rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
        return float(rounded) + 0.0
