"""Combines the power and weight components into the monthly tax."""

import logging
from decimal import Decimal

from vehicletax.engines.brackets import POWER_SCHEDULE, WEIGHT_SCHEDULE
from vehicletax.engines.calculator import BracketTaxCalculator
from vehicletax.formatting import DEFAULT_LOCALE, NumberFormatter
from vehicletax.models.results import CombinedTaxResult
from vehicletax.models.schedule import DimensionSchedule

logger = logging.getLogger(__name__)


class TaxResultAggregator:
    """Runs the bracket calculator once per dimension and merges the totals."""

    def __init__(
        self,
        formatter: NumberFormatter | None = None,
        power_schedule: DimensionSchedule = POWER_SCHEDULE,
        weight_schedule: DimensionSchedule = WEIGHT_SCHEDULE,
    ) -> None:
        self.calculator = BracketTaxCalculator(formatter)
        self.power_schedule = power_schedule
        self.weight_schedule = weight_schedule

    @property
    def formatter(self) -> NumberFormatter:
        return self.calculator.formatter

    def compute_combined(
        self,
        power_value: Decimal | float | int,
        weight_value: Decimal | float | int,
    ) -> CombinedTaxResult:
        """Compute both components and the combined monthly total."""
        power = self.calculator.compute_schedule(power_value, self.power_schedule)
        weight = self.calculator.compute_schedule(weight_value, self.weight_schedule)
        monthly_total = power.total + weight.total
        logger.debug(
            "Monthly tax for power=%s weight=%s: %s", power_value, weight_value, monthly_total
        )
        return CombinedTaxResult(power=power, weight=weight, monthly_total=monthly_total)


def compute_combined(
    power: Decimal | float | int,
    weight: Decimal | float | int,
    locale: str = DEFAULT_LOCALE,
) -> CombinedTaxResult:
    """Compute the monthly tax for a vehicle's engine power (kW) and weight (kg)."""
    return TaxResultAggregator(NumberFormatter(locale)).compute_combined(power, weight)
