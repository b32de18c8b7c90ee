"""
Serializers for the exchange API.
Validate query parameters and describe response payloads.
"""

from rest_framework import serializers


class CurrencySerializer(serializers.Serializer):
    code = serializers.CharField(max_length=3)
    name = serializers.CharField()
    country = serializers.CharField()


class ConvertQuerySerializer(serializers.Serializer):
    """
    Query parameters of the convert action.
    ``amount`` stays a string: the domain parses it and reports InvalidInput.
    """

    base_currency = serializers.CharField(max_length=3)
    target_currency = serializers.CharField(max_length=3)
    amount = serializers.CharField()

    def validate_base_currency(self, value: str) -> str:
        return value.strip().upper()

    def validate_target_currency(self, value: str) -> str:
        return value.strip().upper()


class ConversionResultSerializer(serializers.Serializer):
    base_currency = serializers.CharField()
    base_currency_name = serializers.CharField()
    base_country = serializers.CharField()
    target_currency = serializers.CharField()
    target_currency_name = serializers.CharField()
    target_country = serializers.CharField()
    amount = serializers.CharField()
    rate = serializers.CharField()
    converted_amount = serializers.CharField()


class HistoricalQuerySerializer(serializers.Serializer):
    year = serializers.RegexField(r"^\d{4}$", error_messages={"invalid": "Year must have 4 digits, e.g. 2017"})
    date = serializers.RegexField(r"^\d{2}\.\d{2}\.\d{2}$", error_messages={"invalid": "Date must use DD.MM.YY, e.g. 11.02.17"})
    currency = serializers.CharField()

    def validate_currency(self, value: str) -> str:
        return value.strip().upper()


class HistoricalRateSerializer(serializers.Serializer):
    year = serializers.CharField()
    date = serializers.CharField()
    currency = serializers.CharField()
    rate = serializers.CharField()
    sheet = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
    detail = serializers.JSONField()
