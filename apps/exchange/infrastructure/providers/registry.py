"""
Provider Registry - Maps ProviderName enum to adapter classes.
The active provider is chosen by the EXCHANGE_PROVIDER setting.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import models

from apps.exchange.domain.interfaces import BaseExchangeRateProvider
from apps.exchange.infrastructure.providers.exchange_rate import ExchangeRateProvider
from apps.exchange.infrastructure.providers.mock import MockProvider


logger = logging.getLogger(__name__)


class ProviderName(models.TextChoices):
    """
    Enum with available providers.
    To add a new provider:
    1. Add an entry here
    2. Implement the BaseExchangeRateProvider interface
    3. Register in PROVIDER_REGISTRY
    """

    EXCHANGE_RATE = "exchange_rate", "ExchangeRate"
    MOCK = "mock", "Mock"


# Registry: Maps ProviderName enum to the corresponding adapter class
PROVIDER_REGISTRY: dict[str, type[BaseExchangeRateProvider]] = {
    ProviderName.EXCHANGE_RATE: ExchangeRateProvider,
    ProviderName.MOCK: MockProvider,
}


def get_provider_instance(provider_name: str) -> BaseExchangeRateProvider | None:
    """
    Get an instance of a provider by its name.

    Args:
        provider_name: The provider name from ProviderName enum

    Returns:
        Instance of the provider adapter, or None if not found
    """
    provider_class = PROVIDER_REGISTRY.get(provider_name)

    if provider_class is None:
        logger.warning("Provider '%s' not found in registry", provider_name)
        return None

    return provider_class()


def get_configured_provider() -> BaseExchangeRateProvider:
    """
    Instantiate the provider named by settings.EXCHANGE_PROVIDER.

    Raises:
        ImproperlyConfigured: the setting names an unregistered provider
    """
    provider_name = getattr(settings, "EXCHANGE_PROVIDER", ProviderName.EXCHANGE_RATE)
    instance = get_provider_instance(provider_name)
    if instance is None:
        raise ImproperlyConfigured(
            f"EXCHANGE_PROVIDER '{provider_name}' is not registered. "
            f"Allowed: {', '.join(ProviderName.values)}"
        )
    return instance
