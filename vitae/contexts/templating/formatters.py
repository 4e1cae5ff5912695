"""
Display Formatters

Pure functions turning raw profile scalars into localized display strings.
Both degrade instead of raising on missing or malformed input:
- format_currency: None/NaN/non-numeric -> ""
- format_date: None/"" -> "", unparseable -> the input unchanged
"""

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union

from babel.core import Locale
from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency as babel_format_currency

DEFAULT_LOCALE = "es_CO"
DEFAULT_CURRENCY = "COP"
DEFAULT_DATE_FORMAT = "d MMM y"

FRACTION_PATTERN = re.compile(r"\.[0#]+")


def _integer_currency_pattern(locale: str) -> str:
    """Locale's standard currency pattern with the fraction part removed."""
    pattern = Locale.parse(locale).currency_formats["standard"].pattern
    return FRACTION_PATTERN.sub("", pattern)


def _round_half_up(amount: float) -> Decimal:
    return Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP)


def format_currency(
    value: Any, currency: str = DEFAULT_CURRENCY, locale: str = DEFAULT_LOCALE
) -> str:
    """
    Format an amount as a whole-unit currency string.

    Args:
        value: Amount (int, float, or numeric string)
        currency: ISO 4217 code
        locale: Babel locale identifier

    Returns:
        Formatted string (e.g., "$5.000.000" for es_CO/COP), or "" if value
        is missing or not a finite number. Halves round away from zero.

    Examples:
        format_currency(5000000)         # "$5.000.000"
        format_currency(2.5)             # "$3"
        format_currency(float("nan"))    # ""
    """
    if value is None or isinstance(value, bool):
        return ""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return ""
    if math.isnan(amount) or math.isinf(amount):
        return ""

    return babel_format_currency(
        _round_half_up(amount),
        currency,
        format=_integer_currency_pattern(locale),
        locale=locale,
        currency_digits=False,
    )


def parse_iso_date(text: str) -> date:
    """
    Parse an ISO 8601 date or timestamp (trailing "Z" allowed) to a date.

    Raises:
        ValueError: If text is not ISO 8601
    """
    text = text.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def format_date(
    value: Union[str, date, None],
    locale: str = DEFAULT_LOCALE,
    pattern: str = DEFAULT_DATE_FORMAT,
) -> str:
    """
    Format an ISO-ish date as "day month year" with a short month name.

    Args:
        value: ISO date/timestamp string or date
        locale: Babel locale identifier
        pattern: CLDR date pattern

    Returns:
        Formatted date (e.g., "15 mar 2024"); "" for empty input; the original
        string when it cannot be parsed

    Examples:
        format_date("2024-03-15")    # "15 mar 2024"
        format_date("not-a-date")    # "not-a-date"
    """
    if value is None:
        return ""
    if isinstance(value, date):
        return babel_format_date(value, format=pattern, locale=locale)

    text = str(value)
    if not text.strip():
        return ""

    try:
        parsed = parse_iso_date(text)
    except ValueError:
        # Return original if parsing fails
        return text

    return babel_format_date(parsed, format=pattern, locale=locale)
