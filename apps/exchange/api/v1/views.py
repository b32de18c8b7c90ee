"""
ViewSets for the exchange API v1.
Domain errors are returned as tagged payloads: {"error": <tag>, "detail": <message>}.
"""

import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.exchange.api.v1.serializers import (
    ConversionResultSerializer,
    ConvertQuerySerializer,
    CurrencySerializer,
    ErrorSerializer,
    HistoricalQuerySerializer,
    HistoricalRateSerializer,
)
from apps.exchange.application.tasks import conversion_payload
from apps.exchange.domain import exceptions as exchange_errors
from apps.exchange.domain.currencies import CURRENCIES, get_currency
from apps.exchange.domain.historical import HistoricalRateResolver
from apps.exchange.domain.services import ConversionService


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    exchange_errors.InvalidInput: status.HTTP_400_BAD_REQUEST,
    exchange_errors.UnsupportedCurrency: status.HTTP_400_BAD_REQUEST,
    exchange_errors.NotFound: status.HTTP_404_NOT_FOUND,
    exchange_errors.NetworkError: status.HTTP_502_BAD_GATEWAY,
    exchange_errors.DecodeError: status.HTTP_502_BAD_GATEWAY,
    exchange_errors.RemoteApiError: status.HTTP_502_BAD_GATEWAY,
    exchange_errors.RequestConstructionError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    exchange_errors.ResourceMissing: status.HTTP_500_INTERNAL_SERVER_ERROR,
    exchange_errors.CorruptResource: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: exchange_errors.ExchangeError) -> Response:
    status_code = ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(error.as_dict(), status=status_code)


def invalid_query_response(errors) -> Response:
    return Response(
        {"error": exchange_errors.InvalidInput.code, "detail": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


@extend_schema(tags=['Currencies'])
class CurrencyViewSet(viewsets.ViewSet):
    """Read-only access to the static currency reference table."""

    lookup_field = 'code'

    @extend_schema(responses=CurrencySerializer(many=True))
    def list(self, request):
        serializer = CurrencySerializer(list(CURRENCIES.values()), many=True)
        return Response(serializer.data)

    @extend_schema(responses={200: CurrencySerializer, 404: ErrorSerializer})
    def retrieve(self, request, code=None):
        currency = get_currency(code)
        if currency is None:
            return Response(
                {"error": "not_found", "detail": f"Currency {code} not found"},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(CurrencySerializer(currency).data)


@extend_schema(tags=['Rates'])
class ExchangeRateViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("base_currency", OpenApiTypes.STR, required=True, description="Base currency code (e.g. USD)"),
            OpenApiParameter("target_currency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. EUR)"),
            OpenApiParameter("amount", OpenApiTypes.DECIMAL, required=True, description="Positive amount to convert"),
        ],
        responses={200: ConversionResultSerializer, 400: ErrorSerializer, 502: ErrorSerializer},
        description="Convert an amount using today's rate from the exchange rate API"
    )
    @action(detail=False, methods=['get'], url_path='convert')
    def convert(self, request):
        query = ConvertQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return invalid_query_response(query.errors)
        params = query.validated_data

        try:
            result = ConversionService().convert(
                params['base_currency'],
                params['target_currency'],
                params['amount'],
            )
        except exchange_errors.ConversionError as e:
            logger.info("Conversion failed: %s (%s)", e.code, e.message)
            return error_response(e)

        return Response(ConversionResultSerializer(conversion_payload(result)).data)

    @extend_schema(
        parameters=[
            OpenApiParameter("year", OpenApiTypes.STR, required=True, description="Year (e.g. 2017)"),
            OpenApiParameter("date", OpenApiTypes.STR, required=True, description="Date in DD.MM.YY format (e.g. 11.02.17)"),
            OpenApiParameter("currency", OpenApiTypes.STR, required=True, description="One of USD, EUR, RUB, KZT, CNY"),
        ],
        responses={200: HistoricalRateSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
        description="Look up a historical daily rate in the bundled spreadsheet"
    )
    @action(detail=False, methods=['get'], url_path='historical')
    def historical(self, request):
        query = HistoricalQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return invalid_query_response(query.errors)
        params = query.validated_data

        try:
            found = HistoricalRateResolver().resolve(
                params['year'],
                params['date'],
                params['currency'],
            )
        except exchange_errors.HistoricalLookupError as e:
            logger.info("Historical lookup failed: %s (%s)", e.code, e.message)
            return error_response(e)

        return Response(HistoricalRateSerializer({
            "year": found.query.year,
            "date": found.query.date,
            "currency": found.query.currency_code,
            "rate": str(found.rate),
            "sheet": found.sheet,
        }).data)
