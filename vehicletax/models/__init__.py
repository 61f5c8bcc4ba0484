"""Data models for vehicletax."""

from vehicletax.models.enums import TaxDimension
from vehicletax.models.results import (
    BracketPortion,
    CalculationStep,
    CombinedTaxResult,
    TaxComputationResult,
)
from vehicletax.models.schedule import DimensionSchedule, TaxBracket

__all__ = [
    "BracketPortion",
    "CalculationStep",
    "CombinedTaxResult",
    "DimensionSchedule",
    "TaxBracket",
    "TaxComputationResult",
    "TaxDimension",
]
