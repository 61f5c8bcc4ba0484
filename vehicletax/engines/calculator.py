"""Bracket tax calculation engine.

Applies a reduction and a floor to a raw value, spreads the resulting
effective value across progressive brackets and records every stage as a
labeled calculation step:

  1. Basis line: the effective value
  2. One line per bracket, in bracket order
  3. Total line, with an empty detail
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from vehicletax.engines.brackets import BASIS_LABEL, TOTAL_LABEL
from vehicletax.exceptions import InvalidInputError
from vehicletax.formatting import NumberFormatter
from vehicletax.models.results import BracketPortion, CalculationStep, TaxComputationResult
from vehicletax.models.schedule import DimensionSchedule, TaxBracket

logger = logging.getLogger(__name__)


def to_decimal(value: Decimal | float | int | str, field: str) -> Decimal:
    """Coerce a raw input to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidInputError(field, "expected a number, got a boolean")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except ArithmeticError as exc:
        raise InvalidInputError(field, f"not a number: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidInputError(field, f"must be finite, got {value!r}")
    return amount


class BracketTaxCalculator:
    """Computes one dimension's tax and its step trace."""

    def __init__(self, formatter: NumberFormatter | None = None) -> None:
        self.formatter = formatter or NumberFormatter()

    def compute(
        self,
        value: Decimal | float | int,
        reduction: Decimal | float | int,
        floor: Decimal | float | int,
        brackets: Sequence[TaxBracket],
        unit: str = "",
    ) -> TaxComputationResult:
        """Compute the tax for ``value`` under ``brackets``.

        Negative or small values are not errors: the floor clamp makes them
        indistinguishable from any other value below ``reduction + floor``.
        """
        value = to_decimal(value, "value")
        reduction = to_decimal(reduction, "reduction")
        floor = to_decimal(floor, "floor")

        effective = max(value - reduction, floor)
        basis = self.formatter.format_number(effective)
        if unit:
            basis = f"{basis} {unit}"
        steps = [CalculationStep(label=BASIS_LABEL, detail=basis)]

        portions: list[BracketPortion] = []
        total = Decimal("0")
        for bracket in brackets:
            applicable = self.applicable_amount(effective, bracket)
            tax = applicable * bracket.rate
            total += tax
            portions.append(
                BracketPortion(
                    label=bracket.label,
                    applicable=applicable,
                    rate=bracket.rate,
                    tax=tax,
                )
            )
            steps.append(
                CalculationStep(
                    label=bracket.label,
                    detail=self._bracket_detail(applicable, bracket, tax),
                )
            )

        total_label = f"{TOTAL_LABEL} {self.formatter.format_currency(total)}"
        steps.append(CalculationStep(label=total_label))

        logger.debug(
            "Bracket tax: value=%s reduction=%s floor=%s effective=%s total=%s",
            value, reduction, floor, effective, total,
        )
        return TaxComputationResult(
            effective=effective,
            total=total,
            portions=portions,
            steps=steps,
        )

    def compute_schedule(
        self, value: Decimal | float | int, schedule: DimensionSchedule
    ) -> TaxComputationResult:
        """Compute the tax for one configured dimension."""
        result = self.compute(
            value,
            schedule.reduction,
            schedule.floor,
            schedule.brackets,
            unit=schedule.unit,
        )
        return result.model_copy(update={"dimension": schedule.dimension})

    @staticmethod
    def applicable_amount(effective: Decimal, bracket: TaxBracket) -> Decimal:
        """Portion of ``effective`` that falls within ``[start, end)``.

        A value exactly at ``end`` fills this bracket and leaves nothing for
        the next one.
        """
        above_start = effective - bracket.start
        if bracket.end is None:
            return max(Decimal("0"), above_start)
        return max(Decimal("0"), min(above_start, bracket.end - bracket.start))

    def _bracket_detail(self, applicable: Decimal, bracket: TaxBracket, tax: Decimal) -> str:
        rate = bracket.format_rate()
        if applicable > 0:
            return (
                f"{self.formatter.format_number(applicable)} × {rate} = "
                f"{self.formatter.format_currency(tax)}"
            )
        return f"0 × {rate} = {self.formatter.format_currency(Decimal('0'))}"
