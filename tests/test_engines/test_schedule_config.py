"""Tests for bracket schedule data completeness and consistency."""

from decimal import Decimal

from vehicletax.engines.brackets import (
    BASIS_LABEL,
    POWER_SCHEDULE,
    SCHEDULES,
    TOTAL_LABEL,
    WEIGHT_SCHEDULE,
)
from vehicletax.models.enums import TaxDimension


class TestScheduleRegistry:
    def test_all_dimensions_present(self):
        for dimension in TaxDimension:
            assert dimension in SCHEDULES, f"Missing {dimension}"

    def test_registry_entries_match_dimension(self):
        for dimension, schedule in SCHEDULES.items():
            assert schedule.dimension == dimension

    def test_step_labels(self):
        assert BASIS_LABEL == "Berechnungsgrundlage:"
        assert TOTAL_LABEL == "Gesamt:"


class TestPowerSchedule:
    def test_reduction_and_floor(self):
        assert POWER_SCHEDULE.reduction == Decimal("45")
        assert POWER_SCHEDULE.floor == Decimal("10")
        assert POWER_SCHEDULE.unit == "kW"

    def test_known_values(self):
        brackets = POWER_SCHEDULE.brackets
        assert [(b.start, b.end, b.rate) for b in brackets] == [
            (Decimal("0"), Decimal("35"), Decimal("0.25")),
            (Decimal("35"), Decimal("60"), Decimal("0.35")),
            (Decimal("60"), None, Decimal("0.45")),
        ]

    def test_labels(self):
        assert [b.label for b in POWER_SCHEDULE.brackets] == [
            "Erste 35 kW um 0,25 €:",
            "Nächste 25 kW um 0,35 €:",
            "Restliche kW um 0,45 €:",
        ]

    def test_rates_render_with_two_decimals(self):
        assert [b.format_rate() for b in POWER_SCHEDULE.brackets] == ["0.25", "0.35", "0.45"]


class TestWeightSchedule:
    def test_reduction_and_floor(self):
        assert WEIGHT_SCHEDULE.reduction == Decimal("900")
        assert WEIGHT_SCHEDULE.floor == Decimal("200")
        assert WEIGHT_SCHEDULE.unit == "kg"

    def test_known_values(self):
        brackets = WEIGHT_SCHEDULE.brackets
        assert [(b.start, b.end, b.rate) for b in brackets] == [
            (Decimal("0"), Decimal("500"), Decimal("0.015")),
            (Decimal("500"), Decimal("1200"), Decimal("0.030")),
            (Decimal("1200"), None, Decimal("0.045")),
        ]

    def test_rates_render_with_three_decimals(self):
        assert [b.format_rate() for b in WEIGHT_SCHEDULE.brackets] == ["0.015", "0.030", "0.045"]


class TestBracketShape:
    def test_bracket_monotonicity(self):
        for dimension, schedule in SCHEDULES.items():
            prev = Decimal("-1")
            for bracket in schedule.brackets:
                assert bracket.start > prev, f"Non-monotonic bracket for {dimension}"
                prev = bracket.start

    def test_contiguous(self):
        for schedule in SCHEDULES.values():
            for lower, upper in zip(schedule.brackets, schedule.brackets[1:]):
                assert lower.end == upper.start

    def test_top_bracket_is_unbounded(self):
        for schedule in SCHEDULES.values():
            assert schedule.brackets[-1].end is None
            assert schedule.brackets[-1].width is None
