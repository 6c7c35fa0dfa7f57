"""
Tests for CourtService.
"""
from django.core.exceptions import PermissionDenied, ValidationError
from django.test import TestCase

from core.base.test_utils import create_court_tree, create_role_users
from judiciary.courts.dtos import CourtCreateDTO, CourtUpdateDTO
from judiciary.courts.exceptions import InvalidParentReference
from judiciary.courts.models import Court, CourtType
from judiciary.courts.services import CourtService


class CourtServiceCreateTest(TestCase):
    """Test court creation"""

    @classmethod
    def setUpTestData(cls):
        cls.courts = create_court_tree()
        cls.admin = create_role_users(cls.courts)['admin']

    def test_create_circuit_court(self):
        court = CourtService.create(self.admin, CourtCreateDTO(name='Third Circuit Court', type=CourtType.CIRCUIT))
        self.assertEqual(court.type, CourtType.CIRCUIT)
        self.assertIsNone(court.circuit_court)
        self.assertTrue(court.is_active)
        self.assertEqual(court.created_by, self.admin)

    def test_circuit_court_never_gets_parent(self):
        court = CourtService.create(self.admin, CourtCreateDTO(
            name='Third Circuit Court',
            type=CourtType.CIRCUIT,
            circuit_court_id=self.courts['circuit'].id
        ))
        self.assertIsNone(court.circuit_court_id)

    def test_create_magisterial_court(self):
        court = CourtService.create(self.admin, CourtCreateDTO(
            name='South Magisterial Court',
            type=CourtType.MAGISTERIAL,
            circuit_court_id=self.courts['circuit'].id,
            city='Capital City'
        ))
        self.assertEqual(court.circuit_court, self.courts['circuit'])
        self.assertEqual(court.city, 'Capital City')

    def test_magisterial_parent_must_be_circuit(self):
        """Test a magisterial court cannot hang under another magisterial court"""
        with self.assertRaises(InvalidParentReference):
            CourtService.create(self.admin, CourtCreateDTO(
                name='Bad Court',
                type=CourtType.MAGISTERIAL,
                circuit_court_id=self.courts['magisterial'].id
            ))
        self.assertFalse(Court.objects.filter(name='Bad Court').exists())

    def test_magisterial_parent_must_exist(self):
        with self.assertRaises(InvalidParentReference):
            CourtService.create(self.admin, CourtCreateDTO(
                name='Bad Court', type=CourtType.MAGISTERIAL, circuit_court_id=99999
            ))

    def test_magisterial_parent_required(self):
        with self.assertRaises(InvalidParentReference) as ctx:
            CourtService.create(self.admin, CourtCreateDTO(name='Bad Court', type=CourtType.MAGISTERIAL))
        self.assertIn('circuit_court_id', ctx.exception.message_dict)

    def test_invalid_parent_is_a_validation_error(self):
        self.assertTrue(issubclass(InvalidParentReference, ValidationError))

    def test_invalid_type(self):
        with self.assertRaises(ValidationError):
            CourtService.create(self.admin, CourtCreateDTO(name='Odd Court', type='supreme'))

    def test_name_too_short(self):
        with self.assertRaises(ValidationError):
            CourtService.create(self.admin, CourtCreateDTO(name='X', type=CourtType.CIRCUIT))


class CourtServiceQueryTest(TestCase):
    """Test listing, update and deactivation"""

    @classmethod
    def setUpTestData(cls):
        cls.courts = create_court_tree()
        cls.users = create_role_users(cls.courts)

    def test_list_courts_scoped(self):
        names = [c.name for c in CourtService.list_courts(self.users['circuit'])]
        self.assertEqual(names, ['Central Magisterial Court', 'First Circuit Court'])

    def test_list_courts_hides_inactive(self):
        self.courts['other_magisterial'].deactivate()
        courts = CourtService.list_courts(self.users['admin'])
        self.assertNotIn(self.courts['other_magisterial'], courts)

        courts = CourtService.list_courts(self.users['admin'], {'include_inactive': 'true'})
        self.assertIn(self.courts['other_magisterial'], courts)

    def test_list_courts_search(self):
        courts = CourtService.list_courts(self.users['admin'], {'search': 'north'})
        self.assertEqual(list(courts), [self.courts['other_magisterial']])

    def test_list_circuit_courts_sorted(self):
        names = [c.name for c in CourtService.list_circuit_courts(self.users['admin'])]
        self.assertEqual(names, ['First Circuit Court', 'Second Circuit Court'])

    def test_list_magisterial_courts_under_circuit(self):
        courts = CourtService.list_magisterial_courts(self.users['admin'], self.courts['other_circuit'].id)
        self.assertEqual(list(courts), [self.courts['other_magisterial']])

    def test_list_magisterial_courts_under_foreign_circuit(self):
        with self.assertRaises(PermissionDenied):
            CourtService.list_magisterial_courts(self.users['circuit'], self.courts['other_circuit'].id)

    def test_update_keeps_type_and_parent(self):
        court = CourtService.update(self.users['admin'], CourtUpdateDTO(
            court_id=self.courts['magisterial'].id,
            name='Renamed Magisterial Court',
            phone='555-0100'
        ))
        self.assertEqual(court.name, 'Renamed Magisterial Court')
        self.assertEqual(court.phone, '555-0100')
        self.assertEqual(court.type, CourtType.MAGISTERIAL)
        self.assertEqual(court.circuit_court, self.courts['circuit'])
        self.assertEqual(court.updated_by, self.users['admin'])

    def test_update_missing_court(self):
        with self.assertRaises(Court.DoesNotExist):
            CourtService.update(self.users['admin'], CourtUpdateDTO(court_id=99999, name='Ghost Court'))

    def test_deactivate(self):
        court = CourtService.deactivate(self.users['admin'], self.courts['circuit'].id)
        court.refresh_from_db()
        self.assertFalse(court.is_active)
        self.assertTrue(Court.objects.filter(pk=court.pk).exists())
