# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .api import calculate, evaluate
from .funding import equity_requirement, resolve_partner_a_principal
from .inputs import (
    FIELD_LABELS,
    INVALID_INPUT_MESSAGE,
    InvalidInputError,
    LoanInputs,
    validate_inputs,
)
from .results import CalculationResult
from .session import LoanCalculator

__all__ = [
    # Public API
    "calculate",
    "evaluate",
    "validate_inputs",
    # Models
    "LoanInputs",
    "CalculationResult",
    "LoanCalculator",
    # Errors
    "InvalidInputError",
    "INVALID_INPUT_MESSAGE",
    "FIELD_LABELS",
    # Funding
    "equity_requirement",
    "resolve_partner_a_principal",
]
