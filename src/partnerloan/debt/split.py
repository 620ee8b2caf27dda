# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Premium-adjusted split of a single bank loan between Partner A and
Partners B, C and D.

The bank sees one loan and one installment. Partners B/C/D pay for their
portion at the bank rate plus a collateral premium; Partner A pays whatever
remains of the bank installment.
"""

import logging

from pydantic import Field

from ..core.primitives import Model
from .amortization import calculate_emi

logger = logging.getLogger(__name__)


class SubLoanSplit(Model):
    """Installments and installment shares of the two parties."""

    partner_a_emi: float = Field(..., description="Partner A's residual monthly installment")
    partner_bcd_emi: float = Field(
        ..., description="Partners B/C/D's installment at bank rate plus premium"
    )
    total_emi: float = Field(..., description="Installment on the undivided bank loan")
    partner_a_share: float = Field(..., description="Partner A's share of total EMI, in percent")
    partner_bcd_share: float = Field(..., description="Partners B/C/D's share of total EMI, in percent")


def calculate_sub_loan_split(
    total_loan: float,
    partner_a_principal: float,
    bank_rate: float,
    premium_rate: float,
    tenure_years: int,
    places: int = 2,
) -> SubLoanSplit:
    """
    Split the bank installment with a premium charged on the non-A portion.

    Partner A's installment is the residual ``total_emi - partner_bcd_emi``,
    not an installment computed on A's own principal, so A absorbs the
    compounding difference between the two rates.

    Args:
        total_loan: Bank loan amount (> 0)
        partner_a_principal: Portion attributed to Partner A, 0 <= x <= total_loan
        bank_rate: Annual bank rate in percent
        premium_rate: Annual premium in percent added for Partners B/C/D
        tenure_years: Loan tenure in years
        places: Decimal places for the rounded installments

    Returns:
        SubLoanSplit with both installments and their percentage shares

    Raises:
        ValueError: If the loan is zero or A's principal is outside [0, total_loan]
    """
    if total_loan <= 0:
        raise ValueError(
            f"Total loan must be positive to split installments, got {total_loan}"
        )
    if not 0 <= partner_a_principal <= total_loan:
        raise ValueError(
            f"Partner A principal must be between 0 and the total loan "
            f"({total_loan}), got {partner_a_principal}"
        )

    total_emi = calculate_emi(total_loan, bank_rate, tenure_years, places)
    if total_emi == 0:
        raise ValueError(f"Total loan {total_loan} is too small to produce an installment")

    partner_bcd_principal = total_loan - partner_a_principal
    partner_bcd_emi = calculate_emi(
        partner_bcd_principal, bank_rate + premium_rate, tenure_years, places
    )

    partner_a_emi = total_emi - partner_bcd_emi

    partner_a_share = (partner_a_emi / total_emi) * 100
    partner_bcd_share = 100 - partner_a_share

    if partner_a_emi < 0:
        # Premium large enough that B/C/D pay more than the whole bank EMI
        logger.warning(
            f"Premium-loaded installment ({partner_bcd_emi:,.2f}) exceeds the bank "
            f"installment ({total_emi:,.2f}); Partner A's residual is negative"
        )

    return SubLoanSplit(
        partner_a_emi=partner_a_emi,
        partner_bcd_emi=partner_bcd_emi,
        total_emi=total_emi,
        partner_a_share=partner_a_share,
        partner_bcd_share=partner_bcd_share,
    )
