# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .enums import DigitGroupingEnum, FundingPolicyEnum
from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt


class CalculationSettings(Model):
    """
    Configuration settings for the calculation engine behavior.

    The funding policy decides how much of the bank loan is treated as
    Partner A's principal before the premium split is applied.

    Usage Examples:
        # Default: principal follows Partner A's equity requirement
        calc_settings = CalculationSettings()

        # Fixed 80% usage assumption
        calc_settings = CalculationSettings(funding_policy="fixed80")

        # Proportional, but never attribute less than 2,500,000 to Partner A
        calc_settings = CalculationSettings(minimum_partner_a_principal=2_500_000)
    """

    funding_policy: FundingPolicyEnum = Field(
        default=FundingPolicyEnum.PROPORTIONAL,
        description="Policy for attributing bank loan principal to Partner A.",
    )
    fixed_usage_ratio: FloatBetween0And1 = Field(
        default=0.80,
        description="Share of the bank loan used by Partner A under the fixed80 policy.",
    )
    minimum_partner_a_principal: PositiveFloat = Field(
        default=0.0,
        description=(
            "Floor for Partner A's principal under the proportional policy. "
            "The result is still capped at the bank loan amount."
        ),
    )
    decimal_precision: PositiveInt = Field(
        default=2, description="Decimal places for rounded currency amounts."
    )


class ReportingSettings(Model):
    """Settings related to report generation and display."""

    currency_symbol: str = Field(default="₹", description="Prefix for currency values.")
    digit_grouping: DigitGroupingEnum = Field(
        default=DigitGroupingEnum.INDIAN,
        description="Thousands separator style for currency values.",
    )
    currency_decimals: PositiveInt = Field(
        default=2, description="Decimal places shown for currency values."
    )
    percentage_decimals: PositiveInt = Field(
        default=2, description="Decimal places shown for percentages."
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global model settings

    Groups calculation and reporting configuration. Instances are immutable;
    derive variants with ``model_copy(update=...)``.
    """

    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
