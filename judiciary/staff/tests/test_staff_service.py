"""
Tests for StaffService, focused on scoping and employment-status transitions.
"""
from datetime import date
from decimal import Decimal

from django.core.exceptions import PermissionDenied, ValidationError
from django.test import TestCase
from django.utils import timezone

from core.base.test_utils import create_court_tree, create_role_users
from judiciary.courts.exceptions import InvalidCourtReference
from judiciary.courts.models import CourtType
from judiciary.staff.dtos import StaffCreateDTO, StaffUpdateDTO, StatusTransitionDTO
from judiciary.staff.models import Staff, EmploymentStatus
from judiciary.staff.services import StaffService

STATUS_DATES = ('retirement_date', 'dismissal_date', 'leave_start_date', 'leave_end_date')


def status_snapshot(staff):
    staff.refresh_from_db()
    return (staff.employment_status, *(getattr(staff, name) for name in STATUS_DATES))


class StaffServiceTestBase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.courts = create_court_tree()
        cls.users = create_role_users(cls.courts)
        cls.admin = cls.users['admin']
        cls.circuit_staff = Staff.objects.create(
            name='Alice Judge',
            position='Judge',
            court=cls.courts['circuit'],
            court_type=CourtType.CIRCUIT
        )
        cls.magisterial_staff = Staff.objects.create(
            name='Bob Clerk',
            position='Clerk',
            court=cls.courts['magisterial'],
            court_type=CourtType.MAGISTERIAL,
            employment_status=EmploymentStatus.ON_LEAVE,
            leave_start_date=date(2024, 1, 10),
            leave_end_date=date(2024, 2, 10)
        )
        cls.foreign_staff = Staff.objects.create(
            name='Carol Bailiff',
            position='Bailiff',
            court=cls.courts['other_magisterial'],
            court_type=CourtType.MAGISTERIAL
        )


class TransitionStatusTest(StaffServiceTestBase):
    """Test StaffService.transition_status()"""

    def transition(self, staff, employment_status, status_date=None, user=None):
        return StaffService.transition_status(
            user or self.admin,
            StatusTransitionDTO(staff_id=staff.id, employment_status=employment_status, status_date=status_date)
        )

    def test_active_to_retired(self):
        self.transition(self.circuit_staff, EmploymentStatus.RETIRED, date(2024, 6, 30))
        self.assertEqual(
            status_snapshot(self.circuit_staff),
            (EmploymentStatus.RETIRED, date(2024, 6, 30), None, None, None)
        )

    def test_leave_to_dismissed_clears_leave_dates(self):
        self.transition(self.magisterial_staff, EmploymentStatus.DISMISSED, date(2024, 1, 20))
        self.assertEqual(
            status_snapshot(self.magisterial_staff),
            (EmploymentStatus.DISMISSED, None, date(2024, 1, 20), None, None)
        )

    def test_leave_to_leave_clears_leave_end(self):
        self.transition(self.magisterial_staff, EmploymentStatus.ON_LEAVE, date(2024, 3, 1))
        self.assertEqual(
            status_snapshot(self.magisterial_staff),
            (EmploymentStatus.ON_LEAVE, None, None, date(2024, 3, 1), None)
        )

    def test_back_to_active_clears_everything(self):
        self.transition(self.magisterial_staff, EmploymentStatus.ACTIVE, date(2024, 3, 1))
        self.assertEqual(
            status_snapshot(self.magisterial_staff),
            (EmploymentStatus.ACTIVE, None, None, None, None)
        )

    def test_date_defaults_to_today(self):
        self.transition(self.circuit_staff, EmploymentStatus.DISMISSED)
        self.circuit_staff.refresh_from_db()
        self.assertEqual(self.circuit_staff.dismissal_date, timezone.localdate())

    def test_repeat_is_idempotent(self):
        self.transition(self.circuit_staff, EmploymentStatus.ON_LEAVE, date(2024, 5, 5))
        first = status_snapshot(self.circuit_staff)
        self.transition(self.circuit_staff, EmploymentStatus.ON_LEAVE, date(2024, 5, 5))
        self.assertEqual(status_snapshot(self.circuit_staff), first)

    def test_any_status_may_follow_any_other(self):
        day = date(2024, 7, 1)
        for previous in EmploymentStatus.values:
            for following in EmploymentStatus.values:
                self.transition(self.circuit_staff, previous, day)
                self.transition(self.circuit_staff, following, day)
                self.assertEqual(status_snapshot(self.circuit_staff)[0], following)

    def test_invalid_status(self):
        with self.assertRaises(ValidationError):
            self.transition(self.circuit_staff, 'promoted')

    def test_missing_staff(self):
        with self.assertRaises(Staff.DoesNotExist):
            StaffService.transition_status(
                self.admin,
                StatusTransitionDTO(staff_id=99999, employment_status=EmploymentStatus.RETIRED)
            )

    def test_out_of_scope(self):
        with self.assertRaises(PermissionDenied):
            self.transition(self.foreign_staff, EmploymentStatus.RETIRED, user=self.users['circuit'])
        self.foreign_staff.refresh_from_db()
        self.assertEqual(self.foreign_staff.employment_status, EmploymentStatus.ACTIVE)

    def test_circuit_user_reaches_child_court_staff(self):
        self.transition(self.magisterial_staff, EmploymentStatus.ACTIVE, user=self.users['circuit'])
        self.magisterial_staff.refresh_from_db()
        self.assertEqual(self.magisterial_staff.updated_by, self.users['circuit'])


class StaffCreateTest(StaffServiceTestBase):
    """Test StaffService.create()"""

    def test_create_active(self):
        staff = StaffService.create(self.users['magisterial'], StaffCreateDTO(
            name='Dan Usher',
            position='Usher',
            court_id=self.courts['magisterial'].id,
            court_type=CourtType.MAGISTERIAL,
            email='Dan@Courts.Example'
        ))
        self.assertEqual(staff.employment_status, EmploymentStatus.ACTIVE)
        self.assertEqual(staff.email, 'dan@courts.example')
        self.assertEqual(staff.created_by, self.users['magisterial'])
        self.assertEqual(staff.hire_date, timezone.localdate())

    def test_create_retired_uses_explicit_date(self):
        staff = StaffService.create(self.admin, StaffCreateDTO(
            name='Eve Judge',
            position='Judge',
            court_id=self.courts['circuit'].id,
            court_type=CourtType.CIRCUIT,
            employment_status=EmploymentStatus.RETIRED,
            retirement_date=date(2022, 12, 31)
        ))
        self.assertEqual(staff.retirement_date, date(2022, 12, 31))

    def test_create_on_leave_with_end_date(self):
        staff = StaffService.create(self.admin, StaffCreateDTO(
            name='Finn Clerk',
            position='Clerk',
            court_id=self.courts['circuit'].id,
            court_type=CourtType.CIRCUIT,
            employment_status=EmploymentStatus.ON_LEAVE,
            status_date=date(2024, 4, 1),
            leave_end_date=date(2024, 5, 1)
        ))
        self.assertEqual(staff.leave_start_date, date(2024, 4, 1))
        self.assertEqual(staff.leave_end_date, date(2024, 5, 1))

    def test_create_rejects_foreign_status_dates(self):
        with self.assertRaises(ValidationError) as ctx:
            StaffService.create(self.admin, StaffCreateDTO(
                name='Gus Clerk',
                position='Clerk',
                court_id=self.courts['circuit'].id,
                court_type=CourtType.CIRCUIT,
                retirement_date=date(2024, 1, 1)
            ))
        self.assertIn('retirement_date', ctx.exception.message_dict)

    def test_create_unknown_court(self):
        with self.assertRaises(InvalidCourtReference):
            StaffService.create(self.admin, StaffCreateDTO(
                name='Hal Clerk', position='Clerk', court_id=99999, court_type=CourtType.CIRCUIT
            ))

    def test_create_court_type_mismatch(self):
        with self.assertRaises(InvalidCourtReference) as ctx:
            StaffService.create(self.admin, StaffCreateDTO(
                name='Ivy Clerk',
                position='Clerk',
                court_id=self.courts['magisterial'].id,
                court_type=CourtType.CIRCUIT
            ))
        self.assertIn('court_id', ctx.exception.message_dict)

    def test_create_out_of_scope(self):
        with self.assertRaises(PermissionDenied):
            StaffService.create(self.users['magisterial'], StaffCreateDTO(
                name='Jon Clerk',
                position='Clerk',
                court_id=self.courts['other_magisterial'].id,
                court_type=CourtType.MAGISTERIAL
            ))
        self.assertFalse(Staff.objects.filter(name='Jon Clerk').exists())


class StaffUpdateTest(StaffServiceTestBase):
    """Test StaffService.update()"""

    def test_update_plain_fields(self):
        staff = StaffService.update(self.admin, StaffUpdateDTO(
            staff_id=self.circuit_staff.id,
            position='Chief Judge',
            city='Capital City'
        ))
        self.assertEqual(staff.position, 'Chief Judge')
        self.assertEqual(staff.city, 'Capital City')
        self.assertEqual(staff.name, 'Alice Judge')

    def test_update_status_change_clears_dates(self):
        staff = StaffService.update(self.admin, StaffUpdateDTO(
            staff_id=self.magisterial_staff.id,
            employment_status=EmploymentStatus.RETIRED,
            status_date=date(2024, 8, 1)
        ))
        self.assertEqual(staff.retirement_date, date(2024, 8, 1))
        self.assertIsNone(staff.leave_start_date)
        self.assertIsNone(staff.leave_end_date)

    def test_update_leave_end_date(self):
        staff = StaffService.update(self.admin, StaffUpdateDTO(
            staff_id=self.magisterial_staff.id,
            leave_end_date=date(2024, 3, 15)
        ))
        self.assertEqual(staff.leave_start_date, date(2024, 1, 10))
        self.assertEqual(staff.leave_end_date, date(2024, 3, 15))

    def test_update_status_date_without_status(self):
        with self.assertRaises(ValidationError) as ctx:
            StaffService.update(self.admin, StaffUpdateDTO(
                staff_id=self.magisterial_staff.id,
                status_date=date(2024, 5, 1)
            ))
        self.assertIn('status_date', ctx.exception.message_dict)
        self.magisterial_staff.refresh_from_db()
        self.assertEqual(self.magisterial_staff.leave_start_date, date(2024, 1, 10))

    def test_update_clears_nullable_fields(self):
        Staff.objects.filter(pk=self.magisterial_staff.pk).update(salary=Decimal('45000.00'))
        staff = StaffService.update(self.admin, StaffUpdateDTO(
            staff_id=self.magisterial_staff.id,
            cleared_fields=('salary', 'leave_end_date')
        ))
        staff.refresh_from_db()
        self.assertIsNone(staff.salary)
        self.assertIsNone(staff.leave_end_date)
        self.assertEqual(staff.leave_start_date, date(2024, 1, 10))

    def test_update_cannot_clear_required_status_date(self):
        with self.assertRaises(ValidationError):
            StaffService.update(self.admin, StaffUpdateDTO(
                staff_id=self.magisterial_staff.id,
                cleared_fields=('leave_start_date',)
            ))

    def test_update_move_to_court_out_of_scope(self):
        with self.assertRaises(PermissionDenied):
            StaffService.update(self.users['circuit'], StaffUpdateDTO(
                staff_id=self.magisterial_staff.id,
                court_id=self.courts['other_magisterial'].id
            ))

    def test_update_move_within_scope(self):
        staff = StaffService.update(self.users['circuit'], StaffUpdateDTO(
            staff_id=self.magisterial_staff.id,
            court_id=self.courts['circuit'].id,
            court_type=CourtType.CIRCUIT
        ))
        self.assertEqual(staff.court, self.courts['circuit'])
        self.assertEqual(staff.court_type, CourtType.CIRCUIT)


class StaffQueryTest(StaffServiceTestBase):
    """Test listing, statistics and delete"""

    def test_list_scoped_to_circuit_subtree(self):
        names = [s.name for s in StaffService.list_staff(self.users['circuit'])]
        self.assertEqual(names, ['Alice Judge', 'Bob Clerk'])

    def test_list_scoped_to_magisterial_court(self):
        names = [s.name for s in StaffService.list_staff(self.users['magisterial'])]
        self.assertEqual(names, ['Bob Clerk'])

    def test_list_by_status(self):
        staff = StaffService.list_by_status(self.admin, EmploymentStatus.ON_LEAVE)
        self.assertEqual(list(staff), [self.magisterial_staff])

    def test_list_by_invalid_status(self):
        with self.assertRaises(ValidationError):
            StaffService.list_by_status(self.admin, 'promoted')

    def test_list_by_court_out_of_scope(self):
        with self.assertRaises(PermissionDenied):
            StaffService.list_by_court(self.users['magisterial'], self.courts['circuit'].id)

    def test_statistics_scoped(self):
        stats = StaffService.get_statistics(self.users['circuit'])
        self.assertEqual(stats['total'], 2)
        self.assertEqual(stats['active'], 1)
        self.assertEqual(stats['on_leave'], 1)

        stats = StaffService.get_statistics(self.admin)
        self.assertEqual(stats['total'], 3)

    def test_get_staff_missing_before_scope(self):
        with self.assertRaises(Staff.DoesNotExist):
            StaffService.get_staff(self.users['magisterial'], 99999)

    def test_delete(self):
        StaffService.delete(self.admin, self.foreign_staff.id)
        self.assertFalse(Staff.objects.filter(pk=self.foreign_staff.id).exists())
