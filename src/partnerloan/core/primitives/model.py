# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: every evaluation builds new instances instead of
    updating existing ones.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Catches typos in field names immediately
        use_enum_values=True,
        validate_default=True,  # Enum defaults are stored as values too
    )
