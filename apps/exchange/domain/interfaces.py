from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Sequence


class BaseExchangeRateProvider(ABC):
    @abstractmethod
    def get_conversion_rate(self, base_currency: str, target_currency: str, amount: Decimal) -> Decimal:
        """
        Return the conversion rate for ``base_currency -> target_currency``.

        Implementations raise ``ConversionError`` subclasses on failure and never
        return None.
        """


@dataclass(frozen=True)
class Sheet:

    name: str
    rows: Sequence[Sequence[Any]] = field(default_factory=tuple)


@dataclass(frozen=True)
class Table:

    sheets: Sequence[Sheet] = field(default_factory=tuple)


class TableSource(ABC):
    @abstractmethod
    def open_table(self, resource_path: str) -> Table:
        """
        Load a tabular resource.

        Raises:
            ResourceMissing: the resource does not exist
            CorruptResource: the resource exists but is not readable tabular data
        """
