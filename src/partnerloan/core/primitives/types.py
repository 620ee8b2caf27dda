# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGt0 = Annotated[int, Field(strict=True, gt=0)]
PositiveFloat = Annotated[float, Field(ge=0)]
StrictlyPositiveFloat = Annotated[float, Field(gt=0)]
FloatBetween0And1 = Annotated[float, Field(ge=0, le=1)]
# Percentages are carried as 0-100 values, the way they are entered
Percentage = Annotated[float, Field(ge=0, le=100)]
