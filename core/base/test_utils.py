from django.contrib.auth import get_user_model

from core.user_accounts.models import RoleChoices
from judiciary.courts.models import Court, CourtType

User = get_user_model()

DEFAULT_PASSWORD = 'secret123'


def create_court_tree():
    """
    Two circuit courts, each with one magisterial court.

    Returns a dict keyed: circuit, magisterial, other_circuit, other_magisterial
    """
    circuit = Court.objects.create(name='First Circuit Court', type=CourtType.CIRCUIT)
    magisterial = Court.objects.create(
        name='Central Magisterial Court',
        type=CourtType.MAGISTERIAL,
        circuit_court=circuit
    )
    other_circuit = Court.objects.create(name='Second Circuit Court', type=CourtType.CIRCUIT)
    other_magisterial = Court.objects.create(
        name='North Magisterial Court',
        type=CourtType.MAGISTERIAL,
        circuit_court=other_circuit
    )
    return {
        'circuit': circuit,
        'magisterial': magisterial,
        'other_circuit': other_circuit,
        'other_magisterial': other_magisterial,
    }


def create_user(username, role=RoleChoices.ADMIN, court=None, name=None, password=DEFAULT_PASSWORD):
    return User.objects.create_user(
        username=username,
        name=name or username.title(),
        password=password,
        role=role,
        court=court
    )


def create_role_users(courts):
    """One account per role, bound to the courts of ``create_court_tree()``."""
    return {
        'admin': create_user('admin', RoleChoices.ADMIN),
        'circuit': create_user('circuituser', RoleChoices.CIRCUIT, courts['circuit']),
        'magisterial': create_user('maguser', RoleChoices.MAGISTERIAL, courts['magisterial']),
    }
