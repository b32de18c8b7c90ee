import pytest
from unittest.mock import patch

from apps.exchange.application.tasks import (
    convert_currency,
    lookup_historical_rate,
)
from apps.exchange.domain.exceptions import NetworkError, RemoteApiError


@pytest.fixture
def mock_provider(settings):
    settings.EXCHANGE_PROVIDER = "mock"


class TestConvertCurrencyTask:
    """Tests for the convert_currency task."""

    def test_convert_success(self, mock_provider):
        """Test the task returns a tagged success payload with currency details."""
        result = convert_currency("USD", "KZT", "10")

        assert result["success"] is True
        assert result["base_currency"] == "USD"
        assert result["target_currency"] == "KZT"
        assert result["target_currency_name"] == "Kazakhstani Tenge"
        assert result["target_country"] == "Kazakhstan"
        assert result["rate"] == "450.000000"
        assert result["converted_amount"] == "4500.00"

    def test_convert_invalid_amount(self, mock_provider):
        result = convert_currency("USD", "EUR", "ten")

        assert result["success"] is False
        assert result["error"] == "invalid_input"
        assert set(result) == {"success", "error", "message"}

    @patch('apps.exchange.infrastructure.providers.mock.MockProvider.get_conversion_rate')
    def test_convert_network_error(self, mock_rate, mock_provider):
        """Test provider failures are returned, not raised."""
        mock_rate.side_effect = NetworkError("Request failed: connection refused")

        result = convert_currency("USD", "EUR", "10")

        assert result["success"] is False
        assert result["error"] == "network_error"
        assert "connection refused" in result["message"]

    @patch('apps.exchange.infrastructure.providers.mock.MockProvider.get_conversion_rate')
    def test_convert_remote_error(self, mock_rate, mock_provider):
        mock_rate.side_effect = RemoteApiError("invalid-key")

        result = convert_currency("USD", "EUR", "10")

        assert result["success"] is False
        assert result["error"] == "remote_api_error"
        assert "invalid-key" in result["message"]


class TestLookupHistoricalRateTask:
    """Tests for the lookup_historical_rate task."""

    @pytest.fixture(autouse=True)
    def historical_file(self, settings, rates_workbook):
        settings.HISTORICAL_RATES_PATH = rates_workbook

    def test_lookup_success(self):
        result = lookup_historical_rate("2017", "11.02.17", "eur")

        assert result == {
            "success": True,
            "year": "2017",
            "date": "11.02.17",
            "currency": "EUR",
            "rate": "3.99",
            "sheet": "2017",
        }

    def test_lookup_in_later_sheet(self):
        result = lookup_historical_rate("2018", "05.03.18", "CNY")

        assert result["success"] is True
        assert result["rate"] == "0.5531"
        assert result["sheet"] == "2018"

    def test_lookup_not_found(self):
        result = lookup_historical_rate("2017", "01.01.17", "USD")

        assert result["success"] is False
        assert result["error"] == "not_found"

    def test_lookup_unsupported_currency(self):
        result = lookup_historical_rate("2017", "11.02.17", "JPY")

        assert result["success"] is False
        assert result["error"] == "unsupported_currency"

    def test_lookup_resource_missing(self, settings, tmp_path):
        settings.HISTORICAL_RATES_PATH = tmp_path / "missing.xlsx"

        result = lookup_historical_rate("2017", "11.02.17", "USD")

        assert result["success"] is False
        assert result["error"] == "resource_missing"
