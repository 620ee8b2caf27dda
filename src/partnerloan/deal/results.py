# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Calculation result record."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..core.primitives import FundingPolicyEnum, Model


class CalculationResult(Model):
    """
    Outcome of one evaluation. Built in full on every run and never updated.

    Shares are percentages of the bank EMI. The ``final_*`` fields describe
    the arrangement after the partner loan; without one they repeat the
    initial split.
    """

    bank_emi: float
    partner_a_emi: float
    partner_bcd_emi: float
    partner_a_share: float
    partner_bcd_share: float
    effective_ownership_cost: float = Field(
        ..., description="Partner A's loan-funded share as a percent of project capex"
    )
    total_outflow: float = Field(
        ..., description="Partner A's installments summed over the tenure"
    )
    partner_a_principal: float
    funding_policy: FundingPolicyEnum

    # Partner loan (only when the target share is below the current share)
    partner_loan_principal: Optional[float] = None
    partner_loan_emi: Optional[float] = None

    final_partner_a_share: Optional[float] = None
    final_partner_a_emi: Optional[float] = None
    final_partner_bcd_total_emi: Optional[float] = None

    @property
    def has_partner_loan(self) -> bool:
        """Whether a partner loan was sized for this result."""
        return self.partner_loan_principal is not None
