from django.core.management.base import BaseCommand, CommandError

from apps.exchange.application.tasks import convert_currency


class Command(BaseCommand):
    help = 'Convert an amount between two currencies using the live exchange rate API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--from',
            dest='base_currency',
            type=str,
            required=True,
            help='Base currency code, e.g. USD'
        )
        parser.add_argument(
            '--to',
            dest='target_currency',
            type=str,
            required=True,
            help='Target currency code, e.g. EUR'
        )
        parser.add_argument(
            '--amount',
            dest='amount',
            type=str,
            required=True,
            help='Positive amount to convert'
        )

    def handle(self, **options):
        result = convert_currency(
            options['base_currency'],
            options['target_currency'],
            options['amount'],
        )

        if not result['success']:
            raise CommandError(f"{result['error']}: {result['message']}")

        self.stdout.write(
            f"{result['base_currency']} ({result['base_currency_name']}, {result['base_country']}) -> "
            f"{result['target_currency']} ({result['target_currency_name']}, {result['target_country']})"
        )
        self.stdout.write(
            self.style.SUCCESS(
                f"{result['amount']} {result['base_currency']} = "
                f"{result['converted_amount']} {result['target_currency']} (rate {result['rate']})"
            )
        )
