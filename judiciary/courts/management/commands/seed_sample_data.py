"""
Management command to seed an empty database with a starter court tree.

Usage: python manage.py seed_sample_data
"""
from datetime import date

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from core.user_accounts.models import UserAccount, RoleChoices
from judiciary.courts.dtos import CourtCreateDTO
from judiciary.courts.models import CourtType
from judiciary.courts.services import CourtService
from judiciary.staff.dtos import StaffCreateDTO
from judiciary.staff.models import EmploymentStatus
from judiciary.staff.services import StaffService


class Command(BaseCommand):
    help = 'Seeds an empty database with an admin account, sample courts and staff'

    def handle(self, *args, **options):
        if UserAccount.objects.exists():
            self.stdout.write(self.style.WARNING('Users already exist, skipping seed.'))
            return

        with transaction.atomic():
            admin = UserAccount.objects.create_user(
                username=settings.SEED_ADMIN_USERNAME,
                name='System Administrator',
                password=settings.SEED_ADMIN_PASSWORD,
                role=RoleChoices.ADMIN
            )
            first_circuit = CourtService.create(admin, CourtCreateDTO(
                name='First Circuit Court', type=CourtType.CIRCUIT, location='Downtown', city='Capital City'
            ))
            second_circuit = CourtService.create(admin, CourtCreateDTO(
                name='Second Circuit Court', type=CourtType.CIRCUIT, location='Riverside', city='Port Town'
            ))
            central = CourtService.create(admin, CourtCreateDTO(
                name='Central Magisterial Court', type=CourtType.MAGISTERIAL,
                circuit_court_id=first_circuit.pk, city='Capital City'
            ))
            east = CourtService.create(admin, CourtCreateDTO(
                name='East Magisterial Court', type=CourtType.MAGISTERIAL,
                circuit_court_id=second_circuit.pk, city='Port Town'
            ))

            staff = [
                StaffCreateDTO(name='John Smith', position='Judge', court_id=first_circuit.pk,
                               court_type=CourtType.CIRCUIT, department='Bench'),
                StaffCreateDTO(name='Mary Johnson', position='Clerk', court_id=first_circuit.pk,
                               court_type=CourtType.CIRCUIT, department='Registry'),
                StaffCreateDTO(name='Robert Brown', position='Magistrate', court_id=central.pk,
                               court_type=CourtType.MAGISTERIAL, employment_status=EmploymentStatus.ON_LEAVE,
                               status_date=date(2024, 3, 1), leave_end_date=date(2024, 6, 1)),
                StaffCreateDTO(name='Linda Davis', position='Bailiff', court_id=central.pk,
                               court_type=CourtType.MAGISTERIAL, employment_status=EmploymentStatus.RETIRED,
                               status_date=date(2023, 12, 31)),
                StaffCreateDTO(name='James Wilson', position='Clerk', court_id=east.pk,
                               court_type=CourtType.MAGISTERIAL),
            ]
            for dto in staff:
                StaffService.create(admin, dto)

        self.stdout.write(self.style.SUCCESS('=' * 60))
        self.stdout.write(self.style.SUCCESS('SEEDING COMPLETED'))
        self.stdout.write(self.style.SUCCESS(f'Admin login: {admin.username}'))
        self.stdout.write(self.style.SUCCESS('Courts: 2 circuit, 2 magisterial. Staff: 5'))
        self.stdout.write(self.style.SUCCESS('=' * 60))
