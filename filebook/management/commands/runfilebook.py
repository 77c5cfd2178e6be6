"""
Management команда запуска картотеки: миграция базы и сервер на FILEBOOK_PORT.
"""
import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

logger = logging.getLogger('filebook')


class Command(BaseCommand):
    help = 'Применяет миграции и запускает File Book (по умолчанию 0.0.0.0:FILEBOOK_PORT)'

    def add_arguments(self, parser):
        parser.add_argument(
            'addrport',
            nargs='?',
            help='Адрес и порт, например 127.0.0.1:8080'
        )
        parser.add_argument(
            '--skip-migrate',
            action='store_true',
            help='Не применять миграции перед запуском'
        )

    def handle(self, *args, **options):
        addrport = options['addrport'] or f"0.0.0.0:{settings.FILEBOOK_PORT}"
        port = addrport.rsplit(':', 1)[-1]

        if not options['skip_migrate']:
            call_command('migrate', interactive=False, verbosity=0)

        logger.info("FileBook Started!")
        logger.info("Listening on: http://localhost:%s", port)
        call_command('runserver', addrport, use_reloader=False)
