"""vehicletax: engine-related vehicle insurance tax calculator."""

from vehicletax.engines.aggregator import TaxResultAggregator, compute_combined
from vehicletax.engines.calculator import BracketTaxCalculator
from vehicletax.models import CombinedTaxResult, TaxComputationResult

__all__ = [
    "BracketTaxCalculator",
    "CombinedTaxResult",
    "TaxComputationResult",
    "TaxResultAggregator",
    "compute_combined",
]
