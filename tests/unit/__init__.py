# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for partnerloan components.

Formulas are checked against independent re-implementations rather than
against the library itself.
"""
