"""Tax bracket configuration.

Monthly engine-related insurance tax (motorbezogene Versicherungssteuer) for
passenger cars with a combustion engine, first registered from October 2020.
Keyed by taxed dimension. Never hardcode brackets in computation functions.

Source:
  - Versicherungssteuergesetz 1953, Section 6 (3)
"""

from decimal import Decimal

from vehicletax.models.enums import TaxDimension
from vehicletax.models.schedule import DimensionSchedule, TaxBracket

# ---------------------------------------------------------------------------
# Step labels shared by both dimensions
# ---------------------------------------------------------------------------
BASIS_LABEL = "Berechnungsgrundlage:"
TOTAL_LABEL = "Gesamt:"

# ---------------------------------------------------------------------------
# Engine power in kW: 45 kW allowance, at least 10 kW taxable.
# ---------------------------------------------------------------------------
POWER_SCHEDULE = DimensionSchedule(
    dimension=TaxDimension.POWER,
    unit="kW",
    reduction=Decimal("45"),
    floor=Decimal("10"),
    brackets=[
        TaxBracket(
            start=Decimal("0"),
            end=Decimal("35"),
            rate=Decimal("0.25"),
            label="Erste 35 kW um 0,25 €:",
        ),
        TaxBracket(
            start=Decimal("35"),
            end=Decimal("60"),
            rate=Decimal("0.35"),
            label="Nächste 25 kW um 0,35 €:",
        ),
        TaxBracket(
            start=Decimal("60"),
            end=None,
            rate=Decimal("0.45"),
            label="Restliche kW um 0,45 €:",
        ),
    ],
)

# ---------------------------------------------------------------------------
# Vehicle weight in kg: 900 kg allowance, at least 200 kg taxable.
# Rates are fractions of a cent, rendered with three decimals.
# ---------------------------------------------------------------------------
WEIGHT_SCHEDULE = DimensionSchedule(
    dimension=TaxDimension.WEIGHT,
    unit="kg",
    reduction=Decimal("900"),
    floor=Decimal("200"),
    brackets=[
        TaxBracket(
            start=Decimal("0"),
            end=Decimal("500"),
            rate=Decimal("0.015"),
            label="Erste 500 kg um 0,015 €:",
            rate_precision=3,
        ),
        TaxBracket(
            start=Decimal("500"),
            end=Decimal("1200"),
            rate=Decimal("0.030"),
            label="Nächste 700 kg um 0,030 €:",
            rate_precision=3,
        ),
        TaxBracket(
            start=Decimal("1200"),
            end=None,
            rate=Decimal("0.045"),
            label="Restliche kg um 0,045 €:",
            rate_precision=3,
        ),
    ],
)

SCHEDULES: dict[TaxDimension, DimensionSchedule] = {
    TaxDimension.POWER: POWER_SCHEDULE,
    TaxDimension.WEIGHT: WEIGHT_SCHEDULE,
}
