# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Funding policies: how much of the bank loan is Partner A's principal.

- proportional: Partner A's equity requirement (capex x equity share),
  raised to the configured floor and capped at the bank loan
- fixed80: a fixed usage ratio of the bank loan (80% unless configured)
"""

import logging

from ..core.primitives import CalculationSettings, FundingPolicyEnum
from .inputs import LoanInputs

logger = logging.getLogger(__name__)


def equity_requirement(inputs: LoanInputs) -> float:
    """Partner A's capex-proportional equity requirement."""
    return inputs.project_capex * inputs.equity_share / 100


def resolve_partner_a_principal(
    inputs: LoanInputs, settings: CalculationSettings
) -> float:
    """
    Attribute part of the bank loan to Partner A under the configured policy.

    Args:
        inputs: Validated calculator inputs
        settings: Calculation settings carrying the funding policy

    Returns:
        Partner A's principal, always within [0, bank_loan]
    """
    policy = FundingPolicyEnum(settings.funding_policy)

    if policy == FundingPolicyEnum.FIXED80:
        return inputs.bank_loan * settings.fixed_usage_ratio

    requirement = equity_requirement(inputs)
    principal = max(requirement, settings.minimum_partner_a_principal)
    if principal > inputs.bank_loan:
        logger.warning(
            f"Partner A's funding requirement ({principal:,.2f}) exceeds the bank "
            f"loan ({inputs.bank_loan:,.2f}); capping at the loan amount"
        )
        principal = inputs.bank_loan
    return principal
