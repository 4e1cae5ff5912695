"""Unit tests for currency and date display formatters."""

import pytest

from vitae.contexts.templating.formatters import format_currency, format_date, parse_iso_date


@pytest.mark.unit
def test_currency_groups_thousands_without_decimals():
    """Test that 5,000,000 COP is grouped per es_CO rules with no fraction."""
    result = format_currency(5000000)

    assert result
    assert "5" in result
    assert "000.000" in result
    assert "," not in result
    assert "$" in result


@pytest.mark.unit
def test_currency_rounds_to_whole_units():
    """Test that fractional amounts are rendered as whole currency units."""
    result = format_currency(12345.6)

    assert "12.346" in result
    assert "," not in result


@pytest.mark.unit
@pytest.mark.parametrize(
    "amount, expected",
    [(2.5, "$3"), (0.5, "$1"), (1.4, "$1"), (-2.5, "-$3"), (1999.5, "$2,000")],
)
def test_currency_rounds_halves_away_from_zero(amount, expected):
    """Test that .5 amounts round up in magnitude rather than to the even neighbour."""
    assert format_currency(amount, currency="USD", locale="en_US") == expected


@pytest.mark.unit
def test_currency_accepts_numeric_strings():
    """Test that numeric strings from the backend are formatted."""
    assert "4.500.000" in format_currency("4500000")


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, float("nan"), float("inf"), "abc", True, [1]])
def test_currency_missing_or_invalid_is_empty(value):
    """Test that missing, NaN, infinite and non-numeric amounts render as empty string."""
    assert format_currency(value) == ""


@pytest.mark.unit
def test_currency_other_locale():
    """Test formatting with a different locale and currency."""
    result = format_currency(1500, currency="USD", locale="en_US")
    assert result == "$1,500"


@pytest.mark.unit
def test_date_iso_date():
    """Test that an ISO date becomes day, short month and year."""
    result = format_date("2024-03-15")

    assert "15" in result
    assert "2024" in result
    assert "mar" in result.lower()
    assert "-" not in result


@pytest.mark.unit
def test_date_iso_timestamp_with_offset():
    """Test that backend timestamps (with offset or Z suffix) are formatted."""
    assert "2025" in format_date("2025-03-02T18:30:00+00:00")
    assert "2025" in format_date("2025-03-02T18:30:00Z")


@pytest.mark.unit
@pytest.mark.parametrize("value", ["not-a-date", "2024-13-45", "Enero 2020"])
def test_date_unparseable_returns_original(value):
    """Test that unparseable input is returned unchanged rather than raising."""
    assert format_date(value) == value


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "   "])
def test_date_empty_is_empty(value):
    """Test that empty input produces empty output."""
    assert format_date(value) == ""


@pytest.mark.unit
def test_parse_iso_date_raises_on_garbage():
    """Test the strict parser used by format_date."""
    with pytest.raises(ValueError):
        parse_iso_date("yesterday")
