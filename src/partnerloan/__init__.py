# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
partnerloan - Collateral Premium & Partner Loan Calculator

Splits a shared bank loan installment between Partner A and Partners B/C/D
when B/C/D pay a collateral premium, and sizes the partner loan that moves
Partner A to a target installment share.

Key Entry Points:
- partnerloan.deal.calculate() - Validate raw values and evaluate them
- partnerloan.deal.evaluate() - Evaluate validated LoanInputs
- partnerloan.deal.LoanCalculator - Session holding the latest result
- partnerloan.debt.* - EMI, premium split and partner loan formulas
- partnerloan.reporting.* - Results panel and display formatting

Example Usage:
    ```python
    from partnerloan.deal import LoanInputs, evaluate

    result = evaluate(LoanInputs(bank_loan=10_000_000, target_share=50))
    print(f"Partner A share: {result.partner_a_share:.2f}%")
    ```
"""

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "deal",
    "debt",
    "reporting",
]


_LAZY_MODULES = {
    "core": "partnerloan.core",
    "deal": "partnerloan.deal",
    "debt": "partnerloan.debt",
    "reporting": "partnerloan.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'partnerloan' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
