from django.core.management.base import BaseCommand, CommandError

from apps.exchange.application.tasks import lookup_historical_rate


class Command(BaseCommand):
    help = 'Look up a historical daily exchange rate in the bundled spreadsheet'

    def add_arguments(self, parser):
        parser.add_argument(
            '--year',
            dest='year',
            type=str,
            required=True,
            help='Year of the rate, e.g. 2017'
        )
        parser.add_argument(
            '--date',
            dest='date',
            type=str,
            required=True,
            help='Date in DD.MM.YY format, e.g. 11.02.17'
        )
        parser.add_argument(
            '--currency',
            dest='currency',
            type=str,
            required=True,
            help='Currency code: USD, EUR, RUB, KZT or CNY'
        )
        parser.add_argument(
            '--sync',
            action='store_true',
            help='Execute synchronously instead of using Celery task queue'
        )

    def handle(self, **options):
        year = options['year']
        date_str = options['date']
        currency = options['currency']

        if options['sync']:
            result = lookup_historical_rate(year, date_str, currency)

            if not result['success']:
                raise CommandError(f"{result['error']}: {result['message']}")

            self.stdout.write(
                self.style.SUCCESS(
                    f"Rate on {result['date']} for {result['currency']}: {result['rate']} "
                    f"(sheet {result['sheet']})"
                )
            )
        else:
            self.stdout.write('Dispatching Celery task...')
            task = lookup_historical_rate.delay(year, date_str, currency)

            self.stdout.write(
                self.style.SUCCESS(
                    f'Task dispatched with ID: {task.id}'
                )
            )
