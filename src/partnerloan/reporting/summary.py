# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Results panel report.

Translates a ``CalculationResult`` into the sections shown to users. Reports
only format and present data, never perform calculations.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pandas as pd

from ..core.primitives import ReportingSettings
from ..deal.results import CalculationResult
from .formatting import format_currency, format_percent

# (item label, value, kind) rows; kind is "currency" or "percent"
Row = Tuple[str, float, str]


class ResultsReport:
    """
    Presentation-ready view of one calculation.

    Sections:
    - Bank Loan Details
    - Initial Split with Premium (Partner A and Partners B, C, D)
    - Final Arrangement (only when a partner loan was sized)
    """

    def __init__(
        self, result: CalculationResult, settings: Optional[ReportingSettings] = None
    ):
        self._result = result
        self._settings = settings or ReportingSettings()

    @property
    def result(self) -> CalculationResult:
        return self._result

    def _rows(self) -> Dict[str, List[Row]]:
        r = self._result
        sections: Dict[str, List[Row]] = {
            "Bank Loan Details": [
                ("Monthly EMI", r.bank_emi, "currency"),
                ("Partner A Principal", r.partner_a_principal, "currency"),
            ],
            "Initial Split with Premium": [
                ("Partner A Share", r.partner_a_share, "percent"),
                ("Partner A EMI", r.partner_a_emi, "currency"),
                ("Effective Ownership Cost", r.effective_ownership_cost, "percent"),
                ("Partner A Total Outflow", r.total_outflow, "currency"),
                ("Partners B, C, D Share", r.partner_bcd_share, "percent"),
                ("Partners B, C, D EMI", r.partner_bcd_emi, "currency"),
            ],
        }
        if r.has_partner_loan:
            sections["Final Arrangement"] = [
                ("Partner Loan Amount", r.partner_loan_principal, "currency"),
                ("Partner Loan EMI", r.partner_loan_emi, "currency"),
                ("Partner A Final Share", r.final_partner_a_share, "percent"),
                ("Partner A Final Bank EMI", r.final_partner_a_emi, "currency"),
                ("Partners B, C, D Bank EMI with Premium", r.partner_bcd_emi, "currency"),
                ("Partners B, C, D Total Monthly Payment", r.final_partner_bcd_total_emi, "currency"),
            ]
        return sections

    def _format(self, value: float, kind: str) -> str:
        s = self._settings
        if kind == "percent":
            return format_percent(value, s.percentage_decimals)
        return format_currency(
            value,
            symbol=s.currency_symbol,
            grouping=s.digit_grouping,
            decimals=s.currency_decimals,
        )

    def sections(self) -> Dict[str, Dict[str, str]]:
        """Formatted display strings keyed by section and item label."""
        return {
            section: {label: self._format(value, kind) for label, value, kind in rows}
            for section, rows in self._rows().items()
        }

    def generate(self) -> pd.DataFrame:
        """
        Build the results table.

        Returns:
            DataFrame indexed by (Section, Item) with the raw ``Value`` and
            its formatted ``Display`` string
        """
        records = [
            (section, label, value, self._format(value, kind))
            for section, rows in self._rows().items()
            for label, value, kind in rows
        ]
        df = pd.DataFrame(records, columns=["Section", "Item", "Value", "Display"])
        return df.set_index(["Section", "Item"])
