import pytest

from mortgage_quotes.services.amortization import amortize, calculate_monthly_payment


def test_standard_repayment_figures():
    result = amortize(200_000, 25, 4.85)

    assert result.monthly_payment == pytest.approx(1151.77, abs=0.05)
    assert result.total_amount == pytest.approx(result.monthly_payment * 300)
    assert result.total_interest == pytest.approx(result.total_amount - 200_000)
    assert not result.used_default_rate
    assert result.rate_used_label == "4.85%"


def test_zero_rate_spreads_principal_evenly():
    result = amortize(200_000, 25, 0)

    assert result.monthly_payment == 200_000 / 300
    assert result.total_interest == pytest.approx(0)


def test_missing_rate_uses_default_and_says_so():
    result = amortize(200_000, 25, None)

    assert result.used_default_rate
    assert result.annual_rate_percent == 4.85
    assert "default rate" in result.rate_used_label
    assert result.monthly_payment == pytest.approx(amortize(200_000, 25, 4.85).monthly_payment)


def test_custom_default_rate():
    result = amortize(100_000, 10, None, default_rate_percent=3.0)

    assert result.annual_rate_percent == 3.0
    assert result.rate_used_label == "3% (default rate)"


def test_label_names_rate_source():
    result = amortize(150_000, 20, 4.38, rate_source="FTB 4.38% Fixed to 28.02.29")

    assert result.rate_used_label == "4.38% - FTB 4.38% Fixed to 28.02.29"


def test_monthly_payment_guards_degenerate_inputs():
    assert calculate_monthly_payment(0, 0.004, 300) == 0.0
    assert calculate_monthly_payment(100_000, 0.004, 0) == 0.0


def test_one_year_term():
    result = amortize(12_000, 1, 0)
    assert result.monthly_payment == 1_000
