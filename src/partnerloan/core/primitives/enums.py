# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class FundingPolicyEnum(str, Enum):
    """How much of the bank loan is attributed to Partner A."""

    PROPORTIONAL = "proportional"  # Capex x equity share, clamped to the loan
    FIXED80 = "fixed80"  # Fixed usage ratio of the loan (80% by default)


class CalculationState(str, Enum):
    """Outcome of the most recent calculator invocation."""

    IDLE = "idle"
    REJECTED = "rejected"
    COMPUTED = "computed"


class DigitGroupingEnum(str, Enum):
    """Thousands separator style for currency display."""

    INDIAN = "indian"  # 1,00,00,000
    WESTERN = "western"  # 10,000,000
