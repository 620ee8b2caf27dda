# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting: display formatting and the results panel for calculation
results. Reports operate on final ``CalculationResult`` objects.
"""

from .formatting import format_currency, format_percent
from .summary import ResultsReport

__all__ = [
    "ResultsReport",
    "format_currency",
    "format_percent",
]
