"""
Mock provider for tests and offline development.
Computes cross rates from a fixed table of rates relative to USD.
"""

import logging
from decimal import Decimal

from apps.exchange.domain.exceptions import RemoteApiError
from apps.exchange.domain.interfaces import BaseExchangeRateProvider


logger = logging.getLogger(__name__)


class MockProvider(BaseExchangeRateProvider):
    """
    Mock provider that never touches the network.
    Useful for:
    - Testing without external API calls
    - Development without an API key
    """

    # Base rates relative to USD (approximate real-world values)
    BASE_RATES = {
        "USD": Decimal("1.0"),
        "EUR": Decimal("0.92"),
        "GBP": Decimal("0.79"),
        "CHF": Decimal("0.88"),
        "RUB": Decimal("92.5"),
        "KZT": Decimal("450.0"),
        "CNY": Decimal("7.2"),
        "JPY": Decimal("150.0"),
    }

    def get_conversion_rate(
        self,
        base_currency: str,
        target_currency: str,
        amount: Decimal
    ) -> Decimal:
        """
        Return the cross rate ``target / base`` rounded to 6 decimal places.

        Raises:
            RemoteApiError: ``unsupported-code`` for currencies outside BASE_RATES,
                mirroring the real API
        """
        base_rate = self.BASE_RATES.get(base_currency)
        target_rate = self.BASE_RATES.get(target_currency)

        if base_rate is None or target_rate is None:
            logger.info("MockProvider: Unsupported currency pair %s/%s", base_currency, target_currency)
            raise RemoteApiError("unsupported-code")

        return (target_rate / base_rate).quantize(Decimal("0.000001"))
