import logging
from decimal import Decimal

import requests
from django.conf import settings
from rest_framework import serializers

from apps.exchange.domain.exceptions import (
    DecodeError,
    NetworkError,
    RemoteApiError,
    RequestConstructionError,
)
from apps.exchange.domain.interfaces import BaseExchangeRateProvider


logger = logging.getLogger(__name__)


class PairConversionResponseSerializer(serializers.Serializer):
    """
    Shape of a successful /pair response.
    Only ``result`` and ``conversion_rate`` are used; the metadata is accepted
    when present.
    """

    result = serializers.CharField()
    base_code = serializers.CharField(max_length=3)
    target_code = serializers.CharField(max_length=3)
    conversion_rate = serializers.DecimalField(max_digits=None, decimal_places=None, min_value=Decimal("0"))
    conversion_result = serializers.DecimalField(max_digits=None, decimal_places=None, required=False)
    documentation = serializers.CharField(required=False)
    terms_of_use = serializers.CharField(required=False)
    time_last_update_unix = serializers.IntegerField(required=False)
    time_last_update_utc = serializers.CharField(required=False)
    time_next_update_unix = serializers.IntegerField(required=False)
    time_next_update_utc = serializers.CharField(required=False)


class ExchangeRateProvider(BaseExchangeRateProvider):
    """
    ExchangeRate API provider.
    Uses the /pair endpoint to fetch today's conversion rate for an amount.
    One GET per call: no retry, no cache.
    """

    def build_url(self, base_currency: str, target_currency: str, amount: Decimal) -> str:
        base_url = getattr(settings, "EXCHANGERATE_URL", "")
        api_key = getattr(settings, "EXCHANGERATE_API_KEY", "")

        if not base_url or not api_key:
            raise RequestConstructionError(
                "EXCHANGERATE_URL or EXCHANGERATE_API_KEY is not configured. Cannot build request URL."
            )

        # Format: https://v6.exchangerate-api.com/v6/YOUR-API-KEY/pair/USD/EUR/100
        url = (
            f"{base_url.rstrip('/')}/{api_key}/pair/"
            f"{base_currency}/{target_currency}/{format(amount, 'f')}"
        )
        try:
            requests.Request("GET", url).prepare()
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise RequestConstructionError(f"Malformed request URL: {e}") from e
        return url

    def get_conversion_rate(
        self,
        base_currency: str,
        target_currency: str,
        amount: Decimal
    ) -> Decimal:
        """
        Fetch the conversion rate from ExchangeRate API.

        Args:
            base_currency: Base currency code (e.g. USD)
            target_currency: Target currency code (e.g. EUR)
            amount: Amount being converted (embedded in the URL)

        Returns:
            Conversion rate as Decimal

        Raises:
            RequestConstructionError: missing configuration or malformed URL
            NetworkError: the request did not complete
            DecodeError: the body did not match the expected JSON shape
            RemoteApiError: the API reported ``"result": "error"``
        """
        url = self.build_url(base_currency, target_currency, amount)
        pair = f"{base_currency}/{target_currency}"
        timeout = getattr(settings, "EXCHANGERATE_TIMEOUT", 10)

        try:
            response = requests.get(url, timeout=timeout)
        except requests.exceptions.Timeout as e:
            logger.warning("Timeout calling ExchangeRate API for %s", pair)
            raise NetworkError(f"Timeout calling ExchangeRate API: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.warning("Request to ExchangeRate API failed for %s: %s", pair, e)
            raise NetworkError(f"Request failed: {e}") from e

        data = self._decode_body(response, pair)

        # Response format: {"result": "error", "error-type": "unsupported-code"}
        if data.get("result") == "error":
            error_type = str(data.get("error-type") or "unknown")
            logger.warning("ExchangeRate API error for %s: %s", pair, error_type)
            raise RemoteApiError(error_type)

        serializer = PairConversionResponseSerializer(data=data)
        if not serializer.is_valid():
            logger.warning("Invalid response from ExchangeRate API for %s: %s", pair, serializer.errors)
            raise DecodeError(f"Unexpected response shape: {dict(serializer.errors)}")

        payload = serializer.validated_data
        if payload["result"] != "success":
            raise DecodeError(f"Unexpected result value '{payload['result']}'")

        rate = payload["conversion_rate"]
        logger.debug("ExchangeRate API rate for %s: %s", pair, rate)
        return rate

    def _decode_body(self, response, pair: str) -> dict:
        status_code = response.status_code

        if not response.content:
            if status_code >= 400:
                raise NetworkError(f"HTTP {status_code} from ExchangeRate API")
            raise DecodeError("Empty response body from ExchangeRate API")

        try:
            data = response.json(parse_float=Decimal)
        except ValueError as e:
            if status_code >= 400:
                raise NetworkError(f"HTTP {status_code} from ExchangeRate API") from e
            logger.warning("Non-JSON response from ExchangeRate API for %s", pair)
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError("Response body is not a JSON object")
        return data
