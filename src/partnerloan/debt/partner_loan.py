# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Partner loan sizing.

A partner loan is a separately rated loan between the partners that moves
part of Partner A's bank installment onto Partners B/C/D without touching
the bank loan itself. Its principal is sized so that its own installment
equals the monthly amount being moved.
"""

from pydantic import Field

from ..core.calculations import FinancialCalculations
from ..core.primitives import Model


class PartnerLoan(Model):
    """Bridging loan that moves Partner A from the current to the target share."""

    partner_loan_principal: float = Field(
        ..., description="Principal whose installment equals the monthly payment"
    )
    monthly_payment: float = Field(
        ..., description="Monthly amount moved from Partner A to Partners B/C/D"
    )
    share_difference: float = Field(
        ..., description="Current share minus target share, in percentage points"
    )


def calculate_partner_loan(
    current_emi: float,
    current_share: float,
    target_share: float,
    partner_loan_rate: float,
    tenure_years: int,
    places: int = 2,
) -> PartnerLoan:
    """
    Solve the amortization formula backwards for the partner loan principal.

    Reverse payment formula: P = M / f, with f = r(1+r)^n / ((1+r)^n - 1)
    (f = 1/n at a zero rate) and M the monthly amount moved between partners.

    Args:
        current_emi: Installment the shares refer to (the bank EMI)
        current_share: Partner A's current installment share, in percent
        target_share: Partner A's desired installment share, in percent
        partner_loan_rate: Annual partner loan rate in percent
        tenure_years: Partner loan tenure in years
        places: Decimal places for the rounded principal

    Returns:
        PartnerLoan with principal, monthly payment and share difference

    Raises:
        ValueError: If the target share is above the current share, which
            would size a loan with a negative principal
    """
    share_difference = current_share - target_share
    if share_difference < 0:
        raise ValueError(
            f"Target share ({target_share:.2f}%) must not exceed the current "
            f"share ({current_share:.2f}%) to size a partner loan"
        )

    monthly_difference = (current_emi * share_difference) / 100

    factor = FinancialCalculations.payment_factor(partner_loan_rate, tenure_years)
    partner_loan_principal = monthly_difference / factor

    return PartnerLoan(
        partner_loan_principal=FinancialCalculations.round_currency(
            partner_loan_principal, places
        ),
        monthly_payment=monthly_difference,
        share_difference=share_difference,
    )
