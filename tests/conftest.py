# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for calculator tests.
"""

from __future__ import annotations

from typing import Dict

import pytest

from partnerloan.core.primitives import CalculationSettings, GlobalSettings
from partnerloan.deal import LoanInputs


@pytest.fixture
def default_inputs() -> LoanInputs:
    """The form defaults: 1 Cr capex and loan, 10% bank rate over 4 years."""
    return LoanInputs()


@pytest.fixture
def raw_form() -> Dict[str, str]:
    """Form values as they arrive from text inputs."""
    return {
        "project_capex": "10000000",
        "equity_share": "20",
        "bank_loan": "10000000",
        "bank_rate": "10",
        "tenure_years": "4",
        "premium_rate": "2.5",
        "partner_loan_rate": "12",
        "target_share": "50",
    }


@pytest.fixture
def fixed80_settings() -> GlobalSettings:
    return GlobalSettings(calculation=CalculationSettings(funding_policy="fixed80"))


@pytest.fixture
def proportional_settings() -> GlobalSettings:
    return GlobalSettings(calculation=CalculationSettings(funding_policy="proportional"))
