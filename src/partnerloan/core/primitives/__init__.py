# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core primitives: the immutable model base, constrained types, enums and
settings shared by every calculation module.
"""

from .enums import CalculationState, DigitGroupingEnum, FundingPolicyEnum
from .model import Model
from .settings import CalculationSettings, GlobalSettings, ReportingSettings
from .types import (
    FloatBetween0And1,
    Percentage,
    PositiveFloat,
    PositiveInt,
    PositiveIntGt0,
    StrictlyPositiveFloat,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "CalculationSettings",
    "ReportingSettings",
    # Enums
    "CalculationState",
    "DigitGroupingEnum",
    "FundingPolicyEnum",
    # Types
    "FloatBetween0And1",
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGt0",
    "StrictlyPositiveFloat",
]
