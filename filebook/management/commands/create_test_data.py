from django.core.management.base import BaseCommand
from django.db import transaction

from filebook.models import (
    Organization, Branch, Department, Seat, User, Address, Inward, Sender
)
from filebook.utils.credentials import encode_password


class Command(BaseCommand):
    help = 'Создание демонстрационной структуры и входящих для проверки картотеки'

    def add_arguments(self, parser):
        parser.add_argument(
            '--inwards',
            type=int,
            default=4,
            help='Сколько входящих создать (по одному на каждый статус по кругу)'
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("=" * 60)
        self.stdout.write(self.style.SUCCESS("Создание тестовых данных"))
        self.stdout.write("=" * 60)

        # 1. Организация и филиал
        org, created = Organization.objects.get_or_create(
            name='Head Office',
            defaults={'address': 'Main Road 1', 'contact': '0471-200100', 'website': 'example.org'}
        )
        self.stdout.write(f"  {'Создана' if created else 'Существует'}: {org.name}")

        branch, created = Branch.objects.get_or_create(
            name='City Branch',
            defaults={'address': 'Market Street 5', 'contact': '0471-200200'}
        )
        self.stdout.write(f"  {'Создан' if created else 'Существует'}: {branch.name}")

        # 2. Отделы и места
        seats = []
        for dept_name, seat_names in [
            ('Finance', ['Accountant', 'Cashier']),
            ('Registry', ['Clerk', 'Section Officer']),
        ]:
            dept, created = Department.objects.get_or_create(
                name=dept_name,
                defaults={'email': f'{dept_name.lower()}@example.org'}
            )
            self.stdout.write(f"  {'Создан' if created else 'Существует'}: {dept.name}")
            for index, seat_name in enumerate(seat_names, start=1):
                seat, _ = Seat.objects.get_or_create(
                    name=seat_name,
                    department=dept,
                    defaults={
                        'code': f'{dept_name[:3].upper()}-{index}',
                        'branch': branch,
                        'organization': org,
                    }
                )
                seats.append(seat)

        # 3. Пользователи
        user, created = User.objects.get_or_create(
            name='Registry Clerk',
            defaults={
                'email': 'clerk@example.org',
                'password': encode_password('clerk'),
                'gender': 'Female',
                'role': 'Inward User',
                'seat': seats[2],
                'department': seats[2].department,
                'branch': branch,
                'organization': org,
            }
        )
        if created:
            Address.objects.create(user=user, address='Quarters 12', city='Trivandrum', pincode='695001')
        self.stdout.write(f"  {'Создан' if created else 'Существует'}: {user.name}")

        # 4. Входящие
        statuses = [choice for choice, _ in Inward.STATUS_CHOICES]
        types = [choice for choice, _ in Inward.TYPE_CHOICES]
        modes = [choice for choice, _ in Inward.MODE_CHOICES]
        for index in range(options['inwards']):
            title = f'Demo inward #{index + 1}'
            inward, created = Inward.objects.get_or_create(
                title=title,
                defaults={
                    'inward_type': types[index % len(types)],
                    'mode': modes[index % len(modes)],
                    'status': statuses[index % len(statuses)],
                }
            )
            if created:
                Sender.objects.create(inward=inward, name=f'Sender {index + 1}', sender_type='Individual')

        self.stdout.write(self.style.SUCCESS(
            f"\n[STATS] Входящих: {Inward.objects.count()}, пользователей: {User.objects.count()}"
        ))
