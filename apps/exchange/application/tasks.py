"""
Celery tasks for background processing.

Both operations return tagged result dictionaries so they can cross the
Celery JSON boundary: ``{"success": True, ...}`` on success, or
``{"success": False, "error": <tag>, "message": <text>}`` on failure.
"""

import logging
from typing import Dict

from celery import shared_task

from apps.exchange.domain.currencies import get_currency_details
from apps.exchange.domain.exceptions import ExchangeError
from apps.exchange.domain.historical import HistoricalRateResolver
from apps.exchange.domain.models import ConversionResult
from apps.exchange.domain.services import ConversionService


logger = logging.getLogger(__name__)


def error_result(error: ExchangeError) -> Dict:
    return {
        "success": False,
        "error": error.code,
        "message": error.message,
    }


def conversion_payload(result: ConversionResult) -> Dict:
    base_name, base_country = get_currency_details(result.base_code)
    target_name, target_country = get_currency_details(result.target_code)
    return {
        "base_currency": result.base_code,
        "base_currency_name": base_name,
        "base_country": base_country,
        "target_currency": result.target_code,
        "target_currency_name": target_name,
        "target_country": target_country,
        "amount": str(result.amount),
        "rate": str(result.rate),
        "converted_amount": result.display,
    }


@shared_task(name="convert_currency")
def convert_currency(base_currency: str, target_currency: str, amount: str) -> Dict:
    """
    Convert an amount through the configured provider.

    Args:
        base_currency: Base currency code (e.g. USD)
        target_currency: Target currency code (e.g. EUR)
        amount: Amount as a string, to keep Decimal precision across the broker

    Returns:
        Dict with operation results
    """
    try:
        result = ConversionService().convert(base_currency, target_currency, amount)
    except ExchangeError as e:
        logger.warning("Conversion %s -> %s failed: %s", base_currency, target_currency, e.code)
        return error_result(e)

    return {"success": True, **conversion_payload(result)}


@shared_task(name="lookup_historical_rate")
def lookup_historical_rate(year: str, date: str, currency: str) -> Dict:
    """
    Look up a historical daily rate in the bundled spreadsheet.

    Args:
        year: Requested year (e.g. "2017")
        date: Date in DD.MM.YY format (e.g. "11.02.17")
        currency: One of USD, EUR, RUB, KZT, CNY

    Returns:
        Dict with operation results
    """
    try:
        found = HistoricalRateResolver().resolve(year, date, currency)
    except ExchangeError as e:
        logger.warning("Historical lookup %s on %s failed: %s", currency, date, e.code)
        return error_result(e)

    return {
        "success": True,
        "year": found.query.year,
        "date": found.query.date,
        "currency": found.query.currency_code,
        "rate": str(found.rate),
        "sheet": found.sheet,
    }
