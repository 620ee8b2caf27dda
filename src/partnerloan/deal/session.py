# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calculator session.

Keeps the latest result for one interactive session. Each ``calculate`` call
either replaces the result in full or leaves it untouched and records the
validation message.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.primitives import CalculationState, GlobalSettings
from .api import evaluate
from .inputs import InvalidInputError, LoanInputs, validate_inputs
from .results import CalculationResult

logger = logging.getLogger(__name__)


class LoanCalculator:
    """
    Holds the current inputs, result and error message of a session.

    States: IDLE until the first run, then REJECTED or COMPUTED depending on
    the most recent run.
    """

    def __init__(self, settings: Optional[GlobalSettings] = None):
        self._settings = settings or GlobalSettings()
        self._state = CalculationState.IDLE
        self._inputs: Optional[LoanInputs] = None
        self._result: Optional[CalculationResult] = None
        self._error: Optional[str] = None

    @property
    def settings(self) -> GlobalSettings:
        return self._settings

    @property
    def state(self) -> CalculationState:
        return self._state

    @property
    def inputs(self) -> Optional[LoanInputs]:
        """Inputs behind the current result."""
        return self._inputs

    @property
    def result(self) -> Optional[CalculationResult]:
        return self._result

    @property
    def error(self) -> Optional[str]:
        """Validation message of the last run, if it was rejected."""
        return self._error

    def configure(self, settings: GlobalSettings) -> None:
        """Use new settings for subsequent runs. The current result is kept."""
        self._settings = settings

    def calculate(self, raw: Mapping[str, Any]) -> CalculationState:
        """
        Validate and evaluate raw form values.

        Args:
            raw: Mapping of field name to raw value

        Returns:
            The state reached: COMPUTED or REJECTED
        """
        try:
            inputs = validate_inputs(raw)
            result = evaluate(inputs, self._settings)
        except InvalidInputError as e:
            logger.info(f"Calculation rejected: {e.message}")
            self._error = e.message
            self._state = CalculationState.REJECTED
            return self._state

        self._inputs = inputs
        self._result = result
        self._error = None
        self._state = CalculationState.COMPUTED
        return self._state
