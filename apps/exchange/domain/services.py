"""
Domain services - Core business logic.
Live conversion of an amount through the configured exchange rate provider.
"""

import asyncio
import logging
from decimal import Decimal

from apps.exchange.domain.interfaces import BaseExchangeRateProvider
from apps.exchange.domain.models import ConversionRequest, ConversionResult


logger = logging.getLogger(__name__)


class ConversionService:
    """
    Domain service that converts an amount between two currencies.

    Flow:
    1. Validate the request (known codes, positive amount) before any I/O
    2. Ask the provider for the conversion rate (exactly one upstream call)
    3. Compute ``amount * rate`` rounded to 2 decimal places

    Errors raised by the provider propagate unchanged; nothing is retried
    and nothing is cached.
    """

    def __init__(self, provider: BaseExchangeRateProvider | None = None):
        if provider is None:
            from apps.exchange.infrastructure.providers.registry import get_configured_provider
            provider = get_configured_provider()
        self.provider = provider

    def convert(self, base_currency: str, target_currency: str, amount) -> ConversionResult:
        """
        Convert an amount from one currency to another.

        Args:
            base_currency: Source currency code (e.g. "USD")
            target_currency: Target currency code (e.g. "EUR")
            amount: Amount to convert, as a Decimal, number or numeric string

        Returns:
            ConversionResult with the rate and the converted amount

        Raises:
            InvalidInput: invalid amount or unknown currency code (no network call is made)
            RequestConstructionError, NetworkError, DecodeError, RemoteApiError: from the provider

        Example:
            >>> result = ConversionService().convert("USD", "EUR", "100")
            >>> result.display
            '92.31'
        """
        request = ConversionRequest(base_currency, target_currency, amount)
        logger.info(
            "Converting %s %s to %s",
            request.amount, request.base_code, request.target_code,
        )

        rate = self.provider.get_conversion_rate(
            request.base_code,
            request.target_code,
            request.amount,
        )
        result = ConversionResult.from_rate(request, Decimal(rate))

        logger.info(
            "Converted %s %s -> %s %s (rate=%s)",
            result.amount, result.base_code, result.converted_amount, result.target_code, result.rate,
        )
        return result

    async def aconvert(self, base_currency: str, target_currency: str, amount) -> ConversionResult:
        """Run ``convert`` in a worker thread so the event loop is not blocked."""
        return await asyncio.to_thread(self.convert, base_currency, target_currency, amount)
