import pytest

from mortgage_quotes.exceptions import ConfigurationError
from mortgage_quotes.services.fallback_catalog import (
    fallback_catalog_version,
    fallback_quotes,
    load_fallback_catalog,
)


def test_catalog_has_three_reference_products():
    quotes = fallback_quotes()

    assert [q.id for q in quotes] == ["ftb-4-85-fixed", "ftb-4-70-fixed", "ftb-4-38-fixed"]
    assert [q.interest_rate_percent for q in quotes] == [4.85, 4.70, 4.38]
    assert [q.max_loan_to_value_percent for q in quotes] == [90, 90, 75]
    assert quotes[0].features == [
        "No ERC",
        "New build property eligible",
        "First time buyer exclusive",
    ]


def test_catalog_is_versioned():
    assert fallback_catalog_version() == "2025.02"


def test_each_call_returns_a_fresh_list():
    first = fallback_quotes()
    first.clear()
    assert len(fallback_quotes()) == 3


def test_missing_catalog_file_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_fallback_catalog(tmp_path / "missing.yaml")


def test_malformed_catalog_file_is_a_configuration_error(tmp_path):
    path = tmp_path / "catalog.yaml"
    path.write_text("version: 1\nproducts: {}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_fallback_catalog(path)
