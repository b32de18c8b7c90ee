import pytest
from decimal import Decimal

import requests

from apps.exchange.domain.exceptions import (
    DecodeError,
    NetworkError,
    RemoteApiError,
    RequestConstructionError,
)
from apps.exchange.infrastructure.providers.exchange_rate import (
    ExchangeRateProvider,
    PairConversionResponseSerializer,
)


@pytest.fixture
def provider():
    return ExchangeRateProvider()


@pytest.fixture(autouse=True)
def api_settings(settings):
    settings.EXCHANGERATE_URL = "https://v6.exchangerate-api.com/v6"
    settings.EXCHANGERATE_API_KEY = "test-key"
    settings.EXCHANGERATE_TIMEOUT = 10
    return settings


@pytest.fixture
def mock_requests_get(mocker):
    return mocker.patch("requests.get")


def test_get_conversion_rate_success(provider, mock_requests_get, make_response, pair_payload):
    """
    Test that get_conversion_rate returns the conversion rate as Decimal
    when the API call is successful using the /pair endpoint.
    """
    mock_requests_get.return_value = make_response(pair_payload)

    rate = provider.get_conversion_rate("USD", "EUR", Decimal("100"))

    assert rate == Decimal("0.9213")
    mock_requests_get.assert_called_once()

    # Verify URL embeds key, codes and amount as path segments
    url = mock_requests_get.call_args[0][0]
    assert url == "https://v6.exchangerate-api.com/v6/test-key/pair/USD/EUR/100"
    assert mock_requests_get.call_args[1]["timeout"] == 10


def test_get_conversion_rate_without_metadata(provider, mock_requests_get, make_response):
    """
    Test that only the core fields are required in the response.
    """
    mock_requests_get.return_value = make_response({
        "result": "success",
        "base_code": "USD",
        "target_code": "USD",
        "conversion_rate": 1,
    })

    assert provider.get_conversion_rate("USD", "USD", Decimal("5")) == Decimal("1")


def test_amount_is_rendered_without_exponent(provider):
    url = provider.build_url("USD", "EUR", Decimal("1E+2"))

    assert url.endswith("/pair/USD/EUR/100")


def test_missing_api_key(provider, api_settings, mock_requests_get):
    """
    Test that a missing API key fails before any request is issued.
    """
    api_settings.EXCHANGERATE_API_KEY = ""

    with pytest.raises(RequestConstructionError):
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))

    mock_requests_get.assert_not_called()


def test_malformed_base_url(provider, api_settings, mock_requests_get):
    api_settings.EXCHANGERATE_URL = "not a url"

    with pytest.raises(RequestConstructionError):
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))

    mock_requests_get.assert_not_called()


@pytest.mark.parametrize("exception", [
    requests.exceptions.ConnectionError("connection refused"),
    requests.exceptions.Timeout("timed out"),
])
def test_network_failure(provider, mock_requests_get, exception):
    """
    Test that transport failures raise NetworkError carrying the cause.
    """
    mock_requests_get.side_effect = exception

    with pytest.raises(NetworkError) as excinfo:
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))

    assert str(exception) in excinfo.value.message
    mock_requests_get.assert_called_once()


def test_http_error_without_json(provider, mock_requests_get, make_response):
    mock_requests_get.return_value = make_response(
        status_code=503, content=b"<html>down</html>", json_error=ValueError("no json")
    )

    with pytest.raises(NetworkError, match="503"):
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))


def test_malformed_json(provider, mock_requests_get, make_response):
    """
    Test that a body which is not JSON raises DecodeError.
    """
    mock_requests_get.return_value = make_response(content=b"{oops", json_error=ValueError("bad json"))

    with pytest.raises(DecodeError):
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))


def test_empty_body(provider, mock_requests_get, make_response):
    mock_requests_get.return_value = make_response(content=b"")

    with pytest.raises(DecodeError, match="Empty"):
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))


@pytest.mark.parametrize("body", [
    [],
    {"result": "success"},
    {"result": "success", "base_code": "USD", "target_code": "EUR"},
    {"result": "success", "base_code": "USD", "target_code": "EUR", "conversion_rate": "abc"},
    {"result": "success", "base_code": "USD", "target_code": "EUR", "conversion_rate": -1},
    {"result": "pending", "base_code": "USD", "target_code": "EUR", "conversion_rate": 0.9},
])
def test_unexpected_shape(provider, mock_requests_get, make_response, body):
    """
    Test that a JSON body with the wrong shape raises DecodeError.
    """
    mock_requests_get.return_value = make_response(body)

    with pytest.raises(DecodeError):
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))


def test_api_error_result(provider, mock_requests_get, make_response):
    """
    Test that ``"result": "error"`` raises RemoteApiError with the error type.
    """
    mock_requests_get.return_value = make_response(
        {"result": "error", "error-type": "unsupported-code"}, status_code=404
    )

    with pytest.raises(RemoteApiError) as excinfo:
        provider.get_conversion_rate("USD", "EUR", Decimal("10"))

    assert excinfo.value.error_type == "unsupported-code"
    assert excinfo.value.as_dict()["error_type"] == "unsupported-code"


def test_response_serializer_accepts_full_payload(pair_payload):
    serializer = PairConversionResponseSerializer(data=pair_payload)

    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["conversion_rate"] == Decimal("0.9213")
    assert serializer.validated_data["time_last_update_unix"] == 1716249601
