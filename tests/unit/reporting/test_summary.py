# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the results panel report.
"""

import pytest

from partnerloan.core.primitives import ReportingSettings
from partnerloan.deal import LoanInputs, evaluate
from partnerloan.reporting import ResultsReport, format_currency, format_percent


@pytest.fixture
def loan_result(fixed80_settings):
    return evaluate(LoanInputs(), fixed80_settings)


@pytest.fixture
def no_loan_result():
    return evaluate(LoanInputs())


class TestResultsReport:
    def test_sections_without_partner_loan(self, no_loan_result):
        sections = ResultsReport(no_loan_result).sections()
        assert list(sections) == ["Bank Loan Details", "Initial Split with Premium"]

    def test_sections_with_partner_loan(self, loan_result):
        sections = ResultsReport(loan_result).sections()
        assert list(sections) == [
            "Bank Loan Details",
            "Initial Split with Premium",
            "Final Arrangement",
        ]
        final = sections["Final Arrangement"]
        assert final["Partner Loan Amount"] == format_currency(
            loan_result.partner_loan_principal
        )
        assert final["Partner A Final Share"] == "50.00%"

    def test_formatted_values(self, no_loan_result):
        sections = ResultsReport(no_loan_result).sections()
        assert sections["Bank Loan Details"]["Monthly EMI"] == format_currency(
            no_loan_result.bank_emi
        )
        split = sections["Initial Split with Premium"]
        assert split["Partner A Share"] == format_percent(no_loan_result.partner_a_share)
        assert split["Partner A Total Outflow"] == format_currency(
            no_loan_result.total_outflow
        )

    def test_reporting_settings(self, no_loan_result):
        settings = ReportingSettings(
            currency_symbol="$", digit_grouping="western", percentage_decimals=1
        )
        sections = ResultsReport(no_loan_result, settings).sections()
        assert sections["Bank Loan Details"]["Partner A Principal"] == "$2,000,000.00"
        assert sections["Initial Split with Premium"]["Partner A Share"] == format_percent(
            no_loan_result.partner_a_share, 1
        )

    def test_generate(self, loan_result):
        df = ResultsReport(loan_result).generate()

        assert list(df.index.names) == ["Section", "Item"]
        assert list(df.columns) == ["Value", "Display"]
        assert len(df) == 14
        assert df.loc[("Bank Loan Details", "Monthly EMI"), "Value"] == loan_result.bank_emi
        assert df.loc[("Final Arrangement", "Partner Loan EMI"), "Display"] == (
            format_currency(loan_result.partner_loan_emi)
        )

    def test_generate_without_partner_loan(self, no_loan_result):
        df = ResultsReport(no_loan_result).generate()
        assert "Final Arrangement" not in df.index.get_level_values("Section")
        assert len(df) == 8
