# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calculator API

Public entry points for one calculation: ``validate_inputs`` (raw values to
``LoanInputs``), ``evaluate`` (``LoanInputs`` to ``CalculationResult``) and
``calculate`` which composes the two. All three are pure; presentation code
calls them and owns whatever state it keeps between runs.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.primitives import GlobalSettings
from ..debt import calculate_emi, calculate_partner_loan, calculate_sub_loan_split
from .funding import resolve_partner_a_principal
from .inputs import LoanInputs, check_installment, validate_inputs
from .results import CalculationResult

logger = logging.getLogger(__name__)


def evaluate(
    inputs: LoanInputs, settings: Optional[GlobalSettings] = None
) -> CalculationResult:
    """
    Run the installment split and partner loan sizing for validated inputs.

    Workflow:
      1) Attribute Partner A's principal under the configured funding policy
      2) Bank EMI on the full loan, then the premium-adjusted split
      3) Effective ownership cost and total outflow for Partner A
      4) Partner loan, only when the target share is below A's current share

    Args:
        inputs: Validated calculator inputs
        settings: Optional global settings; defaults are used if not provided

    Returns:
        A new CalculationResult

    Raises:
        InvalidInputError: If the bank EMI rounds to zero at the configured precision
    """
    if settings is None:
        settings = GlobalSettings()
    calc = settings.calculation
    places = calc.decimal_precision

    check_installment(inputs, places)

    partner_a_principal = resolve_partner_a_principal(inputs, calc)

    bank_emi = calculate_emi(inputs.bank_loan, inputs.bank_rate, inputs.tenure_years, places)
    split = calculate_sub_loan_split(
        inputs.bank_loan,
        partner_a_principal,
        inputs.bank_rate,
        inputs.premium_rate,
        inputs.tenure_years,
        places,
    )

    partner_a_loan_share = (split.partner_a_share / 100) * inputs.bank_loan
    effective_ownership_cost = (partner_a_loan_share / inputs.project_capex) * 100
    total_outflow = split.partner_a_emi * inputs.total_months

    partner_loan = None
    final_partner_a_share = split.partner_a_share
    final_partner_a_emi = split.partner_a_emi
    final_partner_bcd_total_emi = split.partner_bcd_emi

    if inputs.target_share < split.partner_a_share:
        partner_loan = calculate_partner_loan(
            bank_emi,
            split.partner_a_share,
            inputs.target_share,
            inputs.partner_loan_rate,
            inputs.tenure_years,
            places,
        )
        final_partner_a_share = inputs.target_share
        final_partner_a_emi = (inputs.target_share / 100) * bank_emi
        final_partner_bcd_total_emi = split.partner_bcd_emi + partner_loan.monthly_payment
    else:
        logger.info(
            f"Target share {inputs.target_share:.2f}% is not below Partner A's "
            f"current share {split.partner_a_share:.2f}%; no partner loan needed"
        )

    logger.debug(
        f"Evaluated {calc.funding_policy} split: bank EMI {bank_emi:,.2f}, "
        f"Partner A {split.partner_a_share:.2f}% / B,C,D {split.partner_bcd_share:.2f}%"
    )

    return CalculationResult(
        bank_emi=bank_emi,
        partner_a_emi=split.partner_a_emi,
        partner_bcd_emi=split.partner_bcd_emi,
        partner_a_share=split.partner_a_share,
        partner_bcd_share=split.partner_bcd_share,
        effective_ownership_cost=effective_ownership_cost,
        total_outflow=total_outflow,
        partner_a_principal=partner_a_principal,
        funding_policy=calc.funding_policy,
        partner_loan_principal=partner_loan.partner_loan_principal if partner_loan else None,
        partner_loan_emi=partner_loan.monthly_payment if partner_loan else None,
        final_partner_a_share=final_partner_a_share,
        final_partner_a_emi=final_partner_a_emi,
        final_partner_bcd_total_emi=final_partner_bcd_total_emi,
    )


def calculate(
    raw: Mapping[str, Any], settings: Optional[GlobalSettings] = None
) -> CalculationResult:
    """
    Validate raw form values and evaluate them.

    Raises:
        InvalidInputError: If validation fails; nothing is computed
    """
    return evaluate(validate_inputs(raw), settings)
