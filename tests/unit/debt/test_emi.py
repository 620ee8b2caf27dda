# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
EMI tests validated against an independent implementation of the
standard reducing-balance formula.
"""

import pytest

from partnerloan.debt import calculate_emi


def manual_monthly_payment_calculation(
    principal: float, annual_rate_percent: float, tenure_years: int
) -> float:
    """
    Formula: M = P * [r(1+r)^n] / [(1+r)^n - 1]
    Where:
        M = Monthly payment
        P = Principal loan amount
        r = Monthly interest rate
        n = Number of payments
    """
    term_months = tenure_years * 12
    if annual_rate_percent == 0:
        return principal / term_months

    monthly_rate = annual_rate_percent / 1200
    numerator = principal * monthly_rate * (1 + monthly_rate) ** term_months
    denominator = (1 + monthly_rate) ** term_months - 1
    return numerator / denominator


class TestCalculateEmi:
    """Tests for the fixed monthly installment."""

    def test_one_crore_at_ten_percent_over_four_years(self):
        """1 Cr at 10% for 4 years is about 2.54 lakh a month."""
        emi = calculate_emi(10_000_000, 10, 4)

        expected = manual_monthly_payment_calculation(10_000_000, 10, 4)
        assert emi == pytest.approx(expected, abs=0.01)
        assert emi == pytest.approx(253_626, rel=1e-3)

    @pytest.mark.parametrize(
        "principal,rate,tenure",
        [
            (8_000_000, 12.5, 4),
            (2_000_000, 10, 4),
            (500_000, 8.75, 15),
            (1_234_567.89, 11, 7),
        ],
    )
    def test_matches_manual_formula(self, principal, rate, tenure):
        expected = manual_monthly_payment_calculation(principal, rate, tenure)
        assert calculate_emi(principal, rate, tenure) == pytest.approx(expected, abs=0.01)

    def test_zero_rate_divides_principal_evenly(self):
        assert calculate_emi(1_200_000, 0, 5) == 20_000.0
        assert calculate_emi(1_000_000, 0, 4) == 20_833.33

    def test_zero_principal(self):
        assert calculate_emi(0, 10, 4) == 0

    @pytest.mark.parametrize("rate", [0, 0.5, 10, 35])
    def test_non_negative(self, rate):
        assert calculate_emi(750_000, rate, 3) >= 0

    def test_rounded_to_two_decimals(self):
        emi = calculate_emi(1_234_567.89, 11, 7)
        assert round(emi, 2) == emi

    def test_custom_precision(self):
        assert calculate_emi(1_000_000, 0, 4, places=0) == 20_833.0

    def test_higher_rate_means_higher_installment(self):
        assert calculate_emi(1_000_000, 12, 4) > calculate_emi(1_000_000, 10, 4)

    def test_preconditions(self):
        with pytest.raises(ValueError, match="Principal"):
            calculate_emi(-1, 10, 4)
        with pytest.raises(ValueError, match="negative"):
            calculate_emi(1_000, -0.5, 4)
        with pytest.raises(ValueError, match="Tenure"):
            calculate_emi(1_000, 10, 0)


class TestCalculateEmiExtremeInputs:
    """Installments stay finite once (1+r)^n overflows."""

    def test_very_high_rate_long_tenure(self):
        """At 1000% over 100 years the installment is interest only."""
        emi = calculate_emi(10_000_000, 1000, 100)
        assert emi == pytest.approx(10_000_000 * 1000 / 1200, abs=0.01)

    def test_astronomical_rate(self):
        emi = calculate_emi(10_000_000, 1e300, 4)
        assert emi == pytest.approx(10_000_000 * 1e300 / 1200, rel=1e-12)
