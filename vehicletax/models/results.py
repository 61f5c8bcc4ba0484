"""Calculation output models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, computed_field

from vehicletax.models.enums import TaxDimension


class CalculationStep(BaseModel):
    """One line of the breakdown. ``detail`` is empty for the summary line."""

    model_config = ConfigDict(frozen=True)

    label: str
    detail: str = ""


class BracketPortion(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    applicable: Decimal
    rate: Decimal
    tax: Decimal


class TaxComputationResult(BaseModel):
    dimension: TaxDimension | None = None
    effective: Decimal
    total: Decimal
    portions: list[BracketPortion]
    steps: list[CalculationStep]


class CombinedTaxResult(BaseModel):
    power: TaxComputationResult
    weight: TaxComputationResult
    # Sum of both dimension totals, unrounded
    monthly_total: Decimal

    @computed_field
    @property
    def power_steps(self) -> list[CalculationStep]:
        return self.power.steps

    @computed_field
    @property
    def weight_steps(self) -> list[CalculationStep]:
        return self.weight.steps
