# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .amortization import calculate_emi
from .partner_loan import PartnerLoan, calculate_partner_loan
from .split import SubLoanSplit, calculate_sub_loan_split

__all__ = [
    # Payment calculations
    "calculate_emi",
    # Premium split
    "SubLoanSplit",
    "calculate_sub_loan_split",
    # Partner loan sizing
    "PartnerLoan",
    "calculate_partner_loan",
]
