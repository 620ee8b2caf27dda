# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display formatting for currency and percentage values.

Currency supports Indian (1,00,00,000) and western (10,000,000) digit
grouping; Indian grouping is the default for rupee amounts.
"""

from __future__ import annotations

import numpy as np

from ..core.primitives import DigitGroupingEnum


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,56,789."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(
    value: float,
    symbol: str = "₹",
    grouping: DigitGroupingEnum = DigitGroupingEnum.INDIAN,
    decimals: int = 2,
) -> str:
    """
    Format an amount with a currency symbol and thousands separators.

    Example:
        >>> format_currency(10_000_000)
        '₹1,00,00,000.00'
        >>> format_currency(-1234.5, symbol="$", grouping="western")
        '-$1,234.50'
    """
    if not np.isfinite(value):
        return f"{symbol}{value}"

    sign = "-" if value < 0 and round(abs(value), decimals) != 0 else ""
    if DigitGroupingEnum(grouping) == DigitGroupingEnum.WESTERN:
        body = f"{abs(value):,.{decimals}f}"
    else:
        plain = f"{abs(value):.{decimals}f}"
        integer, _, fraction = plain.partition(".")
        body = _group_indian(integer) + (f".{fraction}" if fraction else "")
    return f"{sign}{symbol}{body}"


def format_percent(value: float, decimals: int = 2) -> str:
    """Format a 0-100 percentage, e.g. 23.4567 -> '23.46%'."""
    return f"{value:.{decimals}f}%"
