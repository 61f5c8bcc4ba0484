"""Locale-aware number and currency formatting for calculation steps.

Formatting only ever touches the strings embedded in steps; computed totals
stay unrounded.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from pydantic import BaseModel, ConfigDict

from vehicletax.exceptions import UnsupportedLocaleError

DEFAULT_LOCALE = "de-AT"
CURRENCY_DECIMALS = 2


class LocaleConventions(BaseModel):
    model_config = ConfigDict(frozen=True)

    decimal_separator: str
    group_separator: str
    # Some locales group currency amounts differently from plain numbers
    currency_group_separator: str | None = None
    currency_symbol: str = "€"
    symbol_before: bool = False
    symbol_spacing: str = "\u00a0"


LOCALES: dict[str, LocaleConventions] = {
    "de-AT": LocaleConventions(
        decimal_separator=",",
        group_separator="\u00a0",
        currency_group_separator=".",
        symbol_before=True,
    ),
    "de-DE": LocaleConventions(decimal_separator=",", group_separator="."),
    "en-US": LocaleConventions(
        decimal_separator=".", group_separator=",", symbol_before=True, symbol_spacing=""
    ),
    "en-GB": LocaleConventions(
        decimal_separator=".", group_separator=",", symbol_before=True, symbol_spacing=""
    ),
}

# Bare language tags resolve to these regional conventions
LANGUAGE_DEFAULTS = {"de": "de-AT", "en": "en-US"}


def resolve_locale(locale: str) -> str:
    """Normalize a locale tag (``de_AT``, ``de``) to a supported key."""
    tag = locale.strip().replace("_", "-")
    for key in LOCALES:
        if key.lower() == tag.lower():
            return key
    language = tag.split("-")[0].lower()
    if language in LANGUAGE_DEFAULTS:
        return LANGUAGE_DEFAULTS[language]
    raise UnsupportedLocaleError(locale)


class NumberFormatter:
    """Formats numbers and EUR amounts using one locale's conventions.

    Rounds half away from zero, matching browser ``Intl.NumberFormat``.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self.locale = resolve_locale(locale)
        self.conventions = LOCALES[self.locale]

    def format_number(self, value: Decimal | float | int, decimals: int = 0) -> str:
        return self._format(value, decimals, self.conventions.group_separator)

    def format_currency(self, value: Decimal | float | int) -> str:
        conv = self.conventions
        group = conv.currency_group_separator or conv.group_separator
        number = self._format(value, CURRENCY_DECIMALS, group)
        sign = ""
        if number.startswith("-"):
            sign, number = "-", number[1:]
        if conv.symbol_before:
            return f"{sign}{conv.currency_symbol}{conv.symbol_spacing}{number}"
        return f"{sign}{number}{conv.symbol_spacing}{conv.currency_symbol}"

    def _format(self, value: Decimal | float | int, decimals: int, group_separator: str) -> str:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        with localcontext() as ctx:
            # Every integer digit plus the requested decimals must fit the coefficient
            ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
            quantized = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
            sign = "-" if quantized < 0 else ""
            text = f"{abs(quantized):,.{decimals}f}"
        table = str.maketrans({
            ",": group_separator,
            ".": self.conventions.decimal_separator,
        })
        return sign + text.translate(table)
