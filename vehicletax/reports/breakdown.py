"""Monthly tax breakdown report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from vehicletax.formatting import NumberFormatter
from vehicletax.models.results import CombinedTaxResult

TEMPLATE_DIR = Path(__file__).parent / "templates"


class BreakdownReportGenerator:
    """Generates a human-readable breakdown of both tax components."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, result: CombinedTaxResult, formatter: NumberFormatter | None = None) -> str:
        """Render the step traces and the monthly total."""
        formatter = formatter or NumberFormatter()
        template = self.env.get_template("breakdown.txt")
        return template.render(
            sections=[
                ("Leistungskomponente", result.power_steps),
                ("Gewichtskomponente", result.weight_steps),
            ],
            monthly_total=formatter.format_currency(result.monthly_total),
        )
