import pytest

from mortgage_quotes.utils.parsing import format_currency, format_percent, parse_number


@pytest.mark.parametrize(
    "raw,expected",
    [
        (250000, 250000.0),
        ("250000", 250000.0),
        ("£250,000", 250000.0),
        (" 4.85% ", 4.85),
        ("90%", 90.0),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        (float("nan"), None),
        ([], None),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_format_currency():
    assert format_currency(1151.77) == "£1,151.77"
    assert format_currency(1148.1) == "£1,148.10"
    assert format_currency(0) == "£0.00"
    assert format_currency(-5, "$") == "-$5.00"


def test_format_percent():
    assert format_percent(4.85) == "4.85%"
    assert format_percent(4.70) == "4.7%"
    assert format_percent(90.0) == "90%"
    assert format_percent(None) == "N/A"
