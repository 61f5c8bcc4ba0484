"""Bracket schedule models.

A schedule describes how one vehicle dimension (engine power or weight) is
taxed: a flat allowance is subtracted from the raw value, the remainder is
clamped to a minimum taxable base, and the result is spread across
progressive brackets.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from vehicletax.models.enums import TaxDimension


class TaxBracket(BaseModel):
    """One tier of a progressive schedule.

    ``end`` is None for the unbounded top bracket.
    """

    start: Decimal = Field(ge=0)
    end: Decimal | None = None
    rate: Decimal = Field(ge=0, description="Amount per unit of value within the bracket")
    label: str
    rate_precision: Literal[2, 3] = Field(
        default=2, description="Decimal places used to render the rate"
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "TaxBracket":
        if self.end is not None and self.end <= self.start:
            raise ValueError(f"Bracket end {self.end} must be greater than start {self.start}")
        return self

    @property
    def width(self) -> Decimal | None:
        if self.end is None:
            return None
        return self.end - self.start

    def format_rate(self) -> str:
        return f"{self.rate:.{self.rate_precision}f}"


class DimensionSchedule(BaseModel):
    """Reduction, floor and brackets for one taxed dimension."""

    dimension: TaxDimension
    unit: str
    reduction: Decimal = Field(ge=0, description="Tax-free allowance subtracted from the raw value")
    floor: Decimal = Field(ge=0, description="Minimum taxable base after the reduction")
    brackets: list[TaxBracket]

    @model_validator(mode="after")
    def _check_contiguous(self) -> "DimensionSchedule":
        if not self.brackets:
            raise ValueError(f"{self.dimension} schedule has no brackets")
        if self.brackets[0].start != Decimal("0"):
            raise ValueError(f"{self.dimension} schedule must start at 0")
        for prev, bracket in zip(self.brackets, self.brackets[1:]):
            if prev.end is None:
                raise ValueError(f"Only the last {self.dimension} bracket may be unbounded")
            if bracket.start != prev.end:
                raise ValueError(
                    f"{self.dimension} brackets are not contiguous: "
                    f"{prev.end} != {bracket.start}"
                )
        if self.brackets[-1].end is not None:
            raise ValueError(f"Top {self.dimension} bracket must be unbounded")
        return self
