"""
Historical daily rate lookup over a spreadsheet of rates.

The spreadsheet holds one row per day: column 0 is the date (a spreadsheet
serial number or a date cell), columns 1-5 hold the rates for USD, EUR, RUB,
KZT and CNY as numbers or decimal-comma text ("3,75").

Lookup policy:
- every sheet is scanned in stored order, whatever its name
- the date cell is normalised to ``DD.MM.YY`` and compared for exact equality
- the first matching row with a parsable rate wins
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from datetime import date as calendar_date
from decimal import Decimal, InvalidOperation
from typing import Any

from apps.exchange.domain.exceptions import NotFound, UnsupportedCurrency
from apps.exchange.domain.interfaces import TableSource
from apps.exchange.domain.models import HistoricalRate, HistoricalRateQuery


logger = logging.getLogger(__name__)

# Column holding each currency in the historical spreadsheet
CURRENCY_COLUMNS = {
    "USD": 1,
    "EUR": 2,
    "RUB": 3,
    "KZT": 4,
    "CNY": 5,
}

DATE_FORMAT = "%d.%m.%y"

# Serial day 25569 is 1970-01-01; one serial unit is 86400 seconds
UNIX_EPOCH_SERIAL = 25569
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def serial_to_datetime(serial: float) -> datetime:
    return UNIX_EPOCH + timedelta(days=serial - UNIX_EPOCH_SERIAL)


def format_date_cell(value: Any) -> str | None:
    """
    Convert a date cell into its canonical ``DD.MM.YY`` string.

    Accepts spreadsheet serial numbers (int, float or numeric text) and
    ``datetime``/``date`` values. Returns None for anything else.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, calendar_date):
        return value.strftime(DATE_FORMAT)
    try:
        serial = float(str(value).strip())
    except ValueError:
        return None
    try:
        return serial_to_datetime(serial).strftime(DATE_FORMAT)
    except (OverflowError, ValueError):
        return None


def parse_rate_cell(value: Any) -> Decimal | None:
    """Parse a rate cell, accepting a decimal comma. Returns None if unparsable."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip().replace(",", ".")
    if not text:
        return None
    try:
        rate = Decimal(text)
    except InvalidOperation:
        return None
    return rate if rate.is_finite() else None


class HistoricalRateResolver:
    """
    Resolves a historical daily rate from the bundled spreadsheet.

    The resource is opened on every call; nothing is cached between calls.
    """

    def __init__(self, table_source: TableSource | None = None, resource_path: str | None = None):
        if table_source is None:
            from apps.exchange.infrastructure.spreadsheets.xlsx import XlsxTableSource
            table_source = XlsxTableSource()
        if resource_path is None:
            from django.conf import settings
            resource_path = str(settings.HISTORICAL_RATES_PATH)
        self.table_source = table_source
        self.resource_path = resource_path

    def resolve(self, year: str, date: str, currency_code: str) -> HistoricalRate:
        """
        Find the rate for ``currency_code`` on ``date``.

        Args:
            year: Requested year (kept on the query; sheets are not filtered by it)
            date: Date in ``DD.MM.YY`` format, e.g. "11.02.17"
            currency_code: One of USD, EUR, RUB, KZT, CNY

        Raises:
            UnsupportedCurrency: currency has no column in the spreadsheet
            ResourceMissing, CorruptResource: from the table source
            NotFound: no row matches the date
        """
        query = HistoricalRateQuery(year=year, date=date, currency_code=currency_code)

        column = CURRENCY_COLUMNS.get(query.currency_code)
        if column is None:
            raise UnsupportedCurrency(
                f"Currency '{query.currency_code}' is not available in historical data. "
                f"Supported: {', '.join(CURRENCY_COLUMNS)}"
            )

        logger.info(
            "Looking up %s on %s (year %s) in %s",
            query.currency_code, query.date, query.year, self.resource_path,
        )
        table = self.table_source.open_table(self.resource_path)

        for sheet in table.sheets:
            for row in sheet.rows:
                if not row or format_date_cell(row[0]) != query.date:
                    continue
                if column >= len(row):
                    continue
                rate = parse_rate_cell(row[column])
                if rate is None:
                    logger.warning(
                        "Unparsable %s rate %r on sheet '%s' for %s",
                        query.currency_code, row[column], sheet.name, query.date,
                    )
                    continue
                logger.info("Found %s rate %s on sheet '%s'", query.currency_code, rate, sheet.name)
                return HistoricalRate(query=query, rate=rate, sheet=sheet.name)

        raise NotFound(f"No {query.currency_code} rate found for {query.date}")

    def lookup(self, year: str, date: str, currency_code: str) -> Decimal:
        return self.resolve(year, date, currency_code).rate

    async def alookup(self, year: str, date: str, currency_code: str) -> Decimal:
        """Run ``lookup`` in a worker thread; the file read blocks."""
        return await asyncio.to_thread(self.lookup, year, date, currency_code)
