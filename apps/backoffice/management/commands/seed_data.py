from django.core.management.base import BaseCommand  # type: ignore

from apps.backoffice.seed import seed_demo_data


class Command(BaseCommand):
    help = 'Заполняет базу демо-данными: пользователи, локации, объекты, районы, статьи'

    def add_arguments(self, parser):
        parser.add_argument(
            '--keep-existing',
            action='store_true',
            help='Не удалять существующие объекты, локации и контент перед заполнением',
        )
        parser.add_argument('--seed', type=int, default=42, help='Seed генератора случайных чисел')

    def handle(self, *args, **options):
        clear_existing = not options['keep_existing']
        if clear_existing:
            self.stdout.write(self.style.WARNING("Существующие объекты и контент будут удалены"))
        summary = seed_demo_data(clear_existing=clear_existing, seed=options['seed'])
        for name, count in summary.items():
            self.stdout.write(f"  {name}: {count}")
        self.stdout.write(self.style.SUCCESS("Демо-данные загружены"))
