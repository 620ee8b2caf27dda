# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calculator inputs and their validation.

Form values arrive as loosely typed data (strings, blanks, numbers).
``validate_inputs`` turns them into an immutable ``LoanInputs`` or rejects
them with a single ``InvalidInputError`` before any calculation runs.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np
from pydantic import Field, ValidationError

from ..core.primitives import (
    Model,
    Percentage,
    PositiveFloat,
    PositiveIntGt0,
    StrictlyPositiveFloat,
)
from ..debt import calculate_emi

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter valid positive numbers for all fields"

# Field name -> form label, in form order
FIELD_LABELS: Dict[str, str] = {
    "project_capex": "Project CAPEX (₹)",
    "equity_share": "Partner A's Equity Share (%)",
    "bank_loan": "Bank Loan Amount (₹)",
    "bank_rate": "Bank Interest Rate (%)",
    "tenure_years": "Tenure (Years)",
    "premium_rate": "Collateral Premium Rate (%)",
    "partner_loan_rate": "Partner Loan Rate (%)",
    "target_share": "Target EMI Share of A (%)",
}

_STRICTLY_POSITIVE_FIELDS = ("project_capex", "bank_loan", "tenure_years")
_PERCENT_FIELDS = ("equity_share", "target_share")


class InvalidInputError(ValueError):
    """Raised when calculator inputs are missing, non-numeric or out of range.

    Carries one human-readable message plus the offending field names.
    """

    def __init__(self, message: str, fields: Tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.fields = fields


class LoanInputs(Model):
    """Validated calculator inputs. Rates and shares are percentages (10 = 10%)."""

    project_capex: StrictlyPositiveFloat = Field(
        default=10_000_000.0, description="Total project cost"
    )
    equity_share: Percentage = Field(
        default=20.0, description="Partner A's nominal equity share"
    )
    bank_loan: StrictlyPositiveFloat = Field(
        default=10_000_000.0, description="Total amount borrowed from the bank"
    )
    bank_rate: PositiveFloat = Field(default=10.0, description="Annual bank interest rate")
    tenure_years: PositiveIntGt0 = Field(default=4, description="Loan tenure in years")
    premium_rate: PositiveFloat = Field(
        default=2.5, description="Extra annual rate charged on the non-A portion"
    )
    partner_loan_rate: PositiveFloat = Field(
        default=12.0, description="Annual rate of the bridging partner loan"
    )
    target_share: Percentage = Field(
        default=50.0, description="Partner A's desired installment share"
    )

    @property
    def total_months(self) -> int:
        """Loan tenure in months."""
        return self.tenure_years * 12


def _coerce_number(value: Any) -> Tuple[float, str]:
    """Convert one raw form value to float, returning (value, problem)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return np.nan, "is required"
    if isinstance(value, bool):
        return np.nan, "must be a number"
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return np.nan, "must be a number"
    if not np.isfinite(number):
        return np.nan, "must be a number"
    if number < 0:
        return number, "must not be negative"
    return number, ""


def validate_inputs(raw: Mapping[str, Any]) -> LoanInputs:
    """
    Validate raw form values and build ``LoanInputs``.

    All eight fields must be present, numeric, finite and non-negative.
    Project capex, bank loan and tenure must also be strictly positive,
    tenure must be a whole number of years and shares may not exceed 100.
    The bank loan must be large enough to produce a non-zero installment.

    Args:
        raw: Mapping of field name to raw value (numbers or numeric strings)

    Returns:
        LoanInputs ready for evaluation

    Raises:
        InvalidInputError: With a single message naming every offending field
    """
    if isinstance(raw, LoanInputs):
        return raw

    values: Dict[str, Any] = {}
    problems: List[Tuple[str, str]] = []

    for name in FIELD_LABELS:
        number, problem = _coerce_number(raw.get(name))
        if not problem:
            if name in _STRICTLY_POSITIVE_FIELDS and number == 0:
                problem = "must be greater than zero"
            elif name in _PERCENT_FIELDS and number > 100:
                problem = "must not exceed 100"
            elif name == "tenure_years" and not float(number).is_integer():
                problem = "must be a whole number of years"
        if problem:
            problems.append((name, problem))
        else:
            values[name] = int(number) if name == "tenure_years" else number

    if problems:
        raise _rejection(problems)

    try:
        inputs = LoanInputs(**values)
    except ValidationError as e:
        raise InvalidInputError(f"{INVALID_INPUT_MESSAGE} ({e})") from e

    check_installment(inputs)
    return inputs


def check_installment(inputs: LoanInputs, places: int = 2) -> None:
    """
    Reject a bank loan whose installment rounds to zero.

    Installment shares are fractions of the bank EMI, so a loan too small to
    produce a non-zero rounded EMI cannot be split.

    Raises:
        InvalidInputError: If the rounded bank EMI is zero
    """
    bank_emi = calculate_emi(inputs.bank_loan, inputs.bank_rate, inputs.tenure_years, places)
    if bank_emi == 0:
        raise _rejection(
            [("bank_loan", "is too small to produce a monthly installment")]
        )


def _rejection(problems: List[Tuple[str, str]]) -> InvalidInputError:
    details = "; ".join(f"{FIELD_LABELS[name]} {problem}" for name, problem in problems)
    logger.debug(f"Rejected calculator inputs: {details}")
    return InvalidInputError(
        f"{INVALID_INPUT_MESSAGE} ({details})",
        fields=tuple(name for name, _ in problems),
    )
