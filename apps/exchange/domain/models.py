"""
Pure domain entities (POPOs).
No dependency on Django or the HTTP client.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from apps.exchange.domain.currencies import is_known_currency, normalize_code
from apps.exchange.domain.exceptions import InvalidInput


TWO_PLACES = Decimal("0.01")

# Amounts at or above 10**MAX_AMOUNT_DIGITS are rejected
MAX_AMOUNT_DIGITS = 100


def parse_amount(value) -> Decimal:
    """
    Parse a user supplied amount into a finite, positive Decimal.

    Raises:
        InvalidInput: for non-numeric, non-finite or non-positive values.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"Invalid amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInput(f"Invalid amount: {value!r}. Must be a number")

    if not amount.is_finite():
        raise InvalidInput(f"Invalid amount: {value!r}. Must be a finite number")
    if amount <= 0:
        raise InvalidInput(f"Amount must be positive, got {amount}")
    if amount.adjusted() >= MAX_AMOUNT_DIGITS:
        raise InvalidInput(f"Amount is too large: {value!r}")
    return amount


def multiply_to_cents(amount: Decimal, rate: Decimal) -> Decimal:
    """Exact product of amount and rate, rounded half-up to 2 places."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + len(rate.as_tuple().digits))
        product = amount * rate
        ctx.prec = max(ctx.prec, product.adjusted() + 3)
        return product.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ConversionRequest:

    base_code: str
    target_code: str
    amount: Decimal

    def __post_init__(self):
        for field_name in ("base_code", "target_code"):
            code = normalize_code(getattr(self, field_name))
            if not is_known_currency(code):
                raise InvalidInput(f"Unknown currency code '{getattr(self, field_name)}'")
            object.__setattr__(self, field_name, code)
        object.__setattr__(self, "amount", parse_amount(self.amount))


@dataclass(frozen=True)
class ConversionResult:

    base_code: str
    target_code: str
    amount: Decimal
    rate: Decimal
    converted_amount: Decimal

    @classmethod
    def from_rate(cls, request: ConversionRequest, rate: Decimal) -> "ConversionResult":
        converted = multiply_to_cents(request.amount, rate)
        return cls(
            base_code=request.base_code,
            target_code=request.target_code,
            amount=request.amount,
            rate=rate,
            converted_amount=converted,
        )

    @property
    def display(self) -> str:
        return f"{self.converted_amount:.2f}"


@dataclass(frozen=True)
class HistoricalRateQuery:

    year: str
    date: str
    currency_code: str

    def __post_init__(self):
        object.__setattr__(self, "year", str(self.year or "").strip())
        object.__setattr__(self, "date", str(self.date or "").strip())
        object.__setattr__(self, "currency_code", normalize_code(self.currency_code))


@dataclass(frozen=True)
class HistoricalRate:

    query: HistoricalRateQuery
    rate: Decimal
    sheet: str
