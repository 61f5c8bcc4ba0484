"""Shared test fixtures for vehicletax."""

from decimal import Decimal

import pytest

from vehicletax.engines.aggregator import TaxResultAggregator
from vehicletax.engines.calculator import BracketTaxCalculator
from vehicletax.formatting import NumberFormatter
from vehicletax.models.enums import TaxDimension
from vehicletax.models.schedule import DimensionSchedule, TaxBracket


@pytest.fixture
def formatter() -> NumberFormatter:
    return NumberFormatter("de-AT")


@pytest.fixture
def en_formatter() -> NumberFormatter:
    return NumberFormatter("en-US")


@pytest.fixture
def calculator(formatter: NumberFormatter) -> BracketTaxCalculator:
    return BracketTaxCalculator(formatter)


@pytest.fixture
def aggregator(formatter: NumberFormatter) -> TaxResultAggregator:
    return TaxResultAggregator(formatter)


@pytest.fixture
def two_tier_schedule() -> DimensionSchedule:
    return DimensionSchedule(
        dimension=TaxDimension.POWER,
        unit="kW",
        reduction=Decimal("0"),
        floor=Decimal("0"),
        brackets=[
            TaxBracket(start=Decimal("0"), end=Decimal("100"), rate=Decimal("1"), label="Low:"),
            TaxBracket(start=Decimal("100"), end=None, rate=Decimal("2"), label="High:"),
        ],
    )
