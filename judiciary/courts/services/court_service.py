import logging
from dataclasses import asdict

from django.core.exceptions import ValidationError
from django.db import models, transaction

from core.base.utils import parse_id_param
from judiciary.courts.dtos import CourtCreateDTO, CourtUpdateDTO
from judiciary.courts.exceptions import InvalidParentReference
from judiciary.courts.models import Court, CourtType
from judiciary.courts.security import authorize_court_access, restrict_to_accessible_courts

logger = logging.getLogger(__name__)


class CourtService:
    """Service for Court business logic"""

    @staticmethod
    def list_courts(user, filters: dict = None) -> models.QuerySet:
        """
        List courts visible to the user.

        Args:
            user: The requesting user (scopes the result)
            filters: Dictionary of filters
                - type: 'circuit' or 'magisterial'
                - circuit_court_id: parent circuit court ID
                - search: Search query string (name, location, city)
                - include_inactive: include deactivated courts (default False)

        Returns:
            QuerySet of Court objects
        """
        filters = filters or {}

        queryset = Court.objects.select_related('circuit_court').order_by('name')
        queryset = restrict_to_accessible_courts(user, queryset, field='id')

        include_inactive = filters.get('include_inactive')
        if isinstance(include_inactive, str):
            include_inactive = include_inactive.lower() == 'true'
        if not include_inactive:
            queryset = queryset.active()

        court_type = filters.get('type')
        if court_type:
            queryset = queryset.filter(type=court_type)

        circuit_court_id = parse_id_param(filters.get('circuit_court_id'), 'circuit_court_id')
        if circuit_court_id is not None:
            queryset = queryset.filter(circuit_court_id=circuit_court_id)

        return queryset.search(filters.get('search'))

    @staticmethod
    def list_circuit_courts(user) -> models.QuerySet:
        """Active circuit courts in the user's scope, sorted by name."""
        return CourtService.list_courts(user, {'type': CourtType.CIRCUIT})

    @staticmethod
    def list_magisterial_courts(user, circuit_court_id=None) -> models.QuerySet:
        """
        Active magisterial courts in the user's scope.

        When ``circuit_court_id`` is given the caller must be allowed on that
        circuit court and only its children are returned.
        """
        if circuit_court_id is not None:
            authorize_court_access(user, circuit_court_id)
        return CourtService.list_courts(user, {
            'type': CourtType.MAGISTERIAL,
            'circuit_court_id': circuit_court_id,
        })

    @staticmethod
    def get_court(user, court_id) -> Court:
        """Fetch a court the user is allowed to see (404 before 403)."""
        return authorize_court_access(user, court_id)

    @staticmethod
    def resolve_circuit_court(circuit_court_id) -> Court:
        """
        Resolve the parent of a magisterial court.

        Raises:
            InvalidParentReference: If the ID is missing, unknown or not a circuit court
        """
        if not circuit_court_id:
            raise InvalidParentReference({'circuit_court_id': 'Magisterial courts require a circuit court'})
        parent = Court.objects.filter(pk=circuit_court_id).first()
        if parent is None or parent.type != CourtType.CIRCUIT:
            raise InvalidParentReference({'circuit_court_id': 'Invalid circuit court'})
        return parent

    @staticmethod
    @transaction.atomic
    def create(user, dto: CourtCreateDTO) -> Court:
        """
        Create a new court.

        Validates:
        - type is circuit or magisterial
        - magisterial courts reference an existing circuit court
        - circuit courts never get a parent
        """
        if dto.type not in CourtType.values:
            raise ValidationError({'type': f"Invalid court type '{dto.type}'"})

        circuit_court = None
        if dto.type == CourtType.MAGISTERIAL:
            circuit_court = CourtService.resolve_circuit_court(dto.circuit_court_id)

        data = asdict(dto)
        data.pop('circuit_court_id')
        court = Court(**data, circuit_court=circuit_court, created_by=user, updated_by=user)
        court.full_clean()
        court.save()

        logger.info("Court created: id=%s type=%s name=%s by=%s", court.pk, court.type, court.name, user.username)
        return court

    @staticmethod
    @transaction.atomic
    def update(user, dto: CourtUpdateDTO) -> Court:
        """
        Update court details.

        Only fields set on the DTO are written. Type and parent are fixed.
        """
        court = Court.objects.get(pk=dto.court_id)

        for field_name, value in asdict(dto).items():
            if field_name == 'court_id' or value is None:
                continue
            setattr(court, field_name, value)

        court.updated_by = user
        court.full_clean()
        court.save()

        logger.info("Court updated: id=%s by=%s", court.pk, user.username)
        return court

    @staticmethod
    @transaction.atomic
    def deactivate(user, court_id) -> Court:
        """Soft delete a court. Its staff and child courts are left untouched."""
        court = Court.objects.get(pk=court_id)
        court.deactivate(user)

        logger.info("Court deactivated: id=%s by=%s", court.pk, user.username)
        return court
