# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Streamlit front end.

Run with ``streamlit run src/partnerloan/app.py``.
"""

import streamlit as st

from partnerloan.core.primitives import (
    CalculationSettings,
    CalculationState,
    FundingPolicyEnum,
    GlobalSettings,
)
from partnerloan.deal import FIELD_LABELS, LoanCalculator, LoanInputs
from partnerloan.reporting import ResultsReport

DEFAULTS = LoanInputs()

st.title("Collateral Premium & Partner Loan Calculator")
st.caption(
    "Calculate EMI splits and partner loan details based on collateral premium arrangements"
)

# Initialize session_state if it doesn't exist
if "calculator" not in st.session_state:
    st.session_state["calculator"] = LoanCalculator()

calculator: LoanCalculator = st.session_state["calculator"]

policy = st.selectbox(
    "Funding policy",
    options=[p.value for p in FundingPolicyEnum],
    help="proportional: capex x equity share, capped at the loan; fixed80: 80% of the loan",
)

raw = {}
left, right = st.columns(2)
for i, (name, label) in enumerate(FIELD_LABELS.items()):
    column = left if i % 2 == 0 else right
    default = getattr(DEFAULTS, name)
    # No min_value: negative entries are rejected by validation, not the widget
    raw[name] = column.number_input(
        label,
        value=float(default),
        step=1.0 if name == "tenure_years" else None,
        key=name,
    )

if st.button("Calculate", use_container_width=True):
    calculator.configure(
        GlobalSettings(calculation=CalculationSettings(funding_policy=policy))
    )
    if calculator.calculate(raw) == CalculationState.REJECTED:
        st.error(calculator.error)

if calculator.result is not None:
    report = ResultsReport(calculator.result, calculator.settings.reporting)
    st.header("Results")
    for section, items in report.sections().items():
        st.subheader(section)
        for label, display in items.items():
            st.write(f"**{label}:** {display}")
    with st.expander("Results table"):
        st.dataframe(report.generate())
