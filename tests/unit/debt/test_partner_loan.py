# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Partner loan sizing tests, checked by re-amortizing the solved principal.
"""

import pytest

from partnerloan.debt import calculate_emi, calculate_partner_loan


def manual_principal_for_payment(
    monthly_payment: float, annual_rate_percent: float, tenure_years: int
) -> float:
    """Reverse payment formula: P = M * [(1+r)^n - 1] / [r(1+r)^n]."""
    n = tenure_years * 12
    if annual_rate_percent == 0:
        return monthly_payment * n
    r = annual_rate_percent / 1200
    return monthly_payment * ((1 + r) ** n - 1) / (r * (1 + r) ** n)


class TestPartnerLoan:
    """Tests for calculate_partner_loan."""

    def test_monthly_payment_is_share_of_current_emi(self):
        loan = calculate_partner_loan(253_625.80, 79.0, 50.0, 12, 4)
        assert loan.share_difference == pytest.approx(29.0)
        assert loan.monthly_payment == pytest.approx(253_625.80 * 0.29)

    def test_principal_matches_reverse_formula(self):
        loan = calculate_partner_loan(253_625.80, 79.0, 50.0, 12, 4)
        expected = manual_principal_for_payment(loan.monthly_payment, 12, 4)
        assert loan.partner_loan_principal == pytest.approx(expected, abs=0.01)

    @pytest.mark.parametrize(
        "current_share,target_share,rate,tenure",
        [(79.04, 50, 12, 4), (60, 10, 8.5, 10), (35.5, 35, 18, 2), (90, 0, 0, 3)],
    )
    def test_inverse_law(self, current_share, target_share, rate, tenure):
        """Re-amortizing the principal gives back the monthly payment."""
        loan = calculate_partner_loan(180_000, current_share, target_share, rate, tenure)
        assert calculate_emi(loan.partner_loan_principal, rate, tenure) == pytest.approx(
            loan.monthly_payment, abs=0.01
        )

    def test_zero_rate(self):
        loan = calculate_partner_loan(100_000, 60, 50, 0, 4)
        assert loan.monthly_payment == pytest.approx(10_000)
        assert loan.partner_loan_principal == pytest.approx(480_000)

    def test_equal_shares_need_no_principal(self):
        loan = calculate_partner_loan(100_000, 42.5, 42.5, 12, 4)
        assert loan.share_difference == 0
        assert loan.partner_loan_principal == 0

    def test_target_above_current_rejected(self):
        with pytest.raises(ValueError, match="must not exceed the current share"):
            calculate_partner_loan(100_000, 40, 55, 12, 4)

    def test_principal_rounded(self):
        loan = calculate_partner_loan(123_456.78, 71.234, 33.333, 11.1, 6)
        assert round(loan.partner_loan_principal, 2) == loan.partner_loan_principal
