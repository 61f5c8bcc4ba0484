"""Tax computation engines."""

from vehicletax.engines.aggregator import TaxResultAggregator, compute_combined
from vehicletax.engines.calculator import BracketTaxCalculator

__all__ = [
    "BracketTaxCalculator",
    "TaxResultAggregator",
    "compute_combined",
]
