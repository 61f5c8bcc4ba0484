"""Report generation for vehicletax."""

from vehicletax.reports.breakdown import BreakdownReportGenerator

__all__ = [
    "BreakdownReportGenerator",
]
