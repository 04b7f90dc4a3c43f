from django.core.management.base import BaseCommand, CommandError  # type: ignore

from apps.insights.services.crime import CrimeDataService
from shared.exceptions import ExternalServiceError


class Command(BaseCommand):
    help = 'Загружает статистику преступлений за последние 12 месяцев из Statistics Finland'

    def handle(self, *args, **options):
        self.stdout.write("Синхронизация статистики преступлений...")
        try:
            records = CrimeDataService().sync()
        except ExternalServiceError as exc:
            raise CommandError(f"Синхронизация не удалась: {exc.detail}") from exc
        self.stdout.write(self.style.SUCCESS(f"Сохранено записей: {records}"))
