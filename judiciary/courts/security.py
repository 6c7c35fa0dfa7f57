"""
Court-scope access control.

A caller's reach is decided by their role and the court their account is
bound to:

- admin: every court.
- circuit: the bound circuit court and every magisterial court under it.
- magisterial: the bound court only.

Single-court checks go through ``authorize_court_access``; list and
aggregate queries go through ``get_accessible_court_ids`` /
``restrict_to_accessible_courts``.
"""
import logging

from django.core.exceptions import PermissionDenied

from core.user_accounts.models import RoleChoices
from judiciary.courts.models import Court

logger = logging.getLogger(__name__)


def _admin_can_access(user, court):
    return True


def _circuit_can_access(user, court):
    return court.pk == user.court_id or court.circuit_court_id == user.court_id


def _magisterial_can_access(user, court):
    return court.pk == user.court_id


COURT_ACCESS_POLICIES = {
    RoleChoices.ADMIN: _admin_can_access,
    RoleChoices.CIRCUIT: _circuit_can_access,
    RoleChoices.MAGISTERIAL: _magisterial_can_access,
}


def can_access_court(user, court) -> bool:
    """Return True if ``user`` may act on ``court``."""
    policy = COURT_ACCESS_POLICIES.get(user.role)
    if policy is None:
        return False
    if user.role != RoleChoices.ADMIN and user.court_id is None:
        return False
    return policy(user, court)


def authorize_court_access(user, court_id) -> Court:
    """
    Resolve a court and check the caller may act on it.

    Args:
        user: The authenticated caller
        court_id: Target court ID

    Returns:
        The resolved Court

    Raises:
        Court.DoesNotExist: If the court does not exist (checked first)
        PermissionDenied: If the caller's scope does not cover the court
    """
    court = Court.objects.get(pk=court_id)
    if not can_access_court(user, court):
        logger.warning(
            "Court access denied: user=%s role=%s court=%s",
            user.username, user.role, court.pk
        )
        raise PermissionDenied("Access denied to this court")
    return court


def get_accessible_court_ids(user):
    """
    Court IDs visible to ``user``.

    Returns:
        None for admins (unrestricted), otherwise a set of court IDs.
        A non-admin account with no bound court sees nothing.
    """
    if user.role == RoleChoices.ADMIN:
        return None
    if user.court_id is None:
        return set()
    if user.role == RoleChoices.CIRCUIT:
        children = Court.objects.under_circuit(user.court_id).values_list('id', flat=True)
        return {user.court_id, *children}
    if user.role == RoleChoices.MAGISTERIAL:
        return {user.court_id}
    return set()


def restrict_to_accessible_courts(user, queryset, field='court_id'):
    """Filter ``queryset`` to rows whose ``field`` is a court visible to ``user``."""
    court_ids = get_accessible_court_ids(user)
    if court_ids is None:
        return queryset
    return queryset.filter(**{f'{field}__in': court_ids})
