# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .calculations import FinancialCalculations
from .primitives import (
    CalculationSettings,
    CalculationState,
    DigitGroupingEnum,
    FundingPolicyEnum,
    GlobalSettings,
    Model,
    ReportingSettings,
)

__all__ = [
    "FinancialCalculations",
    "Model",
    "GlobalSettings",
    "CalculationSettings",
    "ReportingSettings",
    "CalculationState",
    "DigitGroupingEnum",
    "FundingPolicyEnum",
]
