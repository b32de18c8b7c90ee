"""
Domain errors.
Every error carries a stable ``code`` tag so callers (API views, Celery tasks,
management commands) can surface it as a tagged result.
"""


class ExchangeError(Exception):
    """Base class for every error raised by the exchange domain."""

    code = "exchange_error"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def as_dict(self) -> dict:
        return {"error": self.code, "detail": self.message}


# ---------------------------------------------------------------------------
# Live conversion
# ---------------------------------------------------------------------------

class ConversionError(ExchangeError):
    code = "conversion_error"


class InvalidInput(ConversionError):
    code = "invalid_input"


class RequestConstructionError(ConversionError):
    code = "request_construction_error"


class NetworkError(ConversionError):
    code = "network_error"


class DecodeError(ConversionError):
    code = "decode_error"


class RemoteApiError(ConversionError):
    """The API answered with ``"result": "error"``."""

    code = "remote_api_error"

    def __init__(self, error_type: str):
        super().__init__(f"Exchange rate API returned an error: {error_type}")
        self.error_type = error_type

    def as_dict(self) -> dict:
        return {**super().as_dict(), "error_type": self.error_type}


# ---------------------------------------------------------------------------
# Historical lookup
# ---------------------------------------------------------------------------

class HistoricalLookupError(ExchangeError):
    code = "historical_lookup_error"


class ResourceMissing(HistoricalLookupError):
    code = "resource_missing"


class CorruptResource(HistoricalLookupError):
    code = "corrupt_resource"


class NotFound(HistoricalLookupError):
    code = "not_found"


class UnsupportedCurrency(HistoricalLookupError):
    code = "unsupported_currency"
