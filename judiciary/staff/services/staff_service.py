"""
Staff Service - Business Logic Layer

Handles staff records and their employment-status lifecycle:
- Listing within the caller's court scope (by status, by court, statistics)
- Creation under a court
- Field updates, including moving to another court
- Employment-status transitions

All employment-status changes MUST go through transition_status() or
update(), which both apply Staff.apply_employment_status().
"""
import logging
from dataclasses import asdict

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils import timezone

from core.base.utils import parse_id_param
from judiciary.courts.exceptions import InvalidCourtReference
from judiciary.courts.models import Court, CourtType
from judiciary.courts.security import authorize_court_access, restrict_to_accessible_courts
from judiciary.staff.dtos import StaffCreateDTO, StaffUpdateDTO, StatusTransitionDTO
from judiciary.staff.models import Staff, EmploymentStatus, STATUS_DATE_FIELDS, ALL_STATUS_DATE_FIELDS

logger = logging.getLogger(__name__)

# DTO fields that are not plain model columns
NON_MODEL_FIELDS = {'staff_id', 'court_id', 'court_type', 'employment_status', 'status_date', 'cleared_fields'}


class StaffService:
    """Service layer for staff records and employment-status transitions"""

    @staticmethod
    def list_staff(user, filters: dict = None) -> models.QuerySet:
        """
        List staff in courts visible to the user.

        Args:
            user: The requesting user (scopes the result)
            filters: Dictionary of filters
                - employment_status: status value
                - court_id: ID
                - court_type: 'circuit' or 'magisterial'
                - search: Search query string (name, position, department, email)

        Returns:
            QuerySet of Staff objects
        """
        filters = filters or {}

        queryset = Staff.objects.select_related('court').order_by('name')
        queryset = restrict_to_accessible_courts(user, queryset)

        employment_status = filters.get('employment_status')
        if employment_status:
            StaffService.validate_status(employment_status)
            queryset = queryset.with_status(employment_status)

        court_id = parse_id_param(filters.get('court_id'), 'court_id')
        if court_id is not None:
            queryset = queryset.filter(court_id=court_id)

        court_type = filters.get('court_type')
        if court_type:
            queryset = queryset.filter(court_type=court_type)

        return queryset.search(filters.get('search'))

    @staticmethod
    def list_by_status(user, employment_status) -> models.QuerySet:
        StaffService.validate_status(employment_status)
        return StaffService.list_staff(user, {'employment_status': employment_status})

    @staticmethod
    def list_by_court(user, court_id, court_type=None) -> models.QuerySet:
        """
        Staff of one court.

        Raises:
            Court.DoesNotExist: If the court does not exist
            PermissionDenied: If the court is outside the caller's scope
        """
        court = authorize_court_access(user, court_id)
        return Staff.objects.select_related('court').for_court(court.pk, court_type).order_by('name')

    @staticmethod
    def get_statistics(user) -> dict:
        """Head counts per employment status over the caller's visible courts."""
        queryset = restrict_to_accessible_courts(user, Staff.objects.all())
        return queryset.statistics()

    @staticmethod
    def get_staff(user, staff_id) -> Staff:
        """
        Fetch a staff member the user may act on.

        Raises:
            Staff.DoesNotExist: If the record does not exist
            PermissionDenied: If the staff member's court is outside the caller's scope
        """
        staff = Staff.objects.select_related('court').get(pk=staff_id)
        authorize_court_access(user, staff.court_id)
        return staff

    @staticmethod
    def validate_status(employment_status):
        if employment_status not in EmploymentStatus.values:
            raise ValidationError({'employment_status': f"Invalid employment status '{employment_status}'"})

    @staticmethod
    def resolve_court(court_id, court_type) -> Court:
        """
        Resolve a staff member's court and check it has the declared type.

        Raises:
            InvalidCourtReference: If the court is missing or of another type
        """
        if court_type not in CourtType.values:
            raise InvalidCourtReference({'court_type': f"Invalid court type '{court_type}'"})
        court = Court.objects.filter(pk=court_id).first()
        if court is None:
            raise InvalidCourtReference({'court_id': 'Court not found'})
        if court.type != court_type:
            raise InvalidCourtReference({'court_id': 'Court type does not match the selected court'})
        return court

    @staticmethod
    def _check_status_dates(dto, employment_status):
        """Reject explicit status dates that do not belong to ``employment_status``."""
        allowed = {STATUS_DATE_FIELDS.get(employment_status)}
        if employment_status == EmploymentStatus.ON_LEAVE:
            allowed.add('leave_end_date')
        errors = {
            field_name: f"Not allowed while employment status is {employment_status}"
            for field_name in ALL_STATUS_DATE_FIELDS
            if getattr(dto, field_name) is not None and field_name not in allowed
        }
        if errors:
            raise ValidationError(errors)

    @staticmethod
    @transaction.atomic
    def create(user, dto: StaffCreateDTO) -> Staff:
        """
        Create a staff member under a court.

        Validates:
        - court exists and matches court_type (InvalidCourtReference)
        - caller may act on the court (PermissionDenied)
        - status dates fit the employment status

        The status date is status_date, else the matching explicit date
        field, else today.
        """
        court = StaffService.resolve_court(dto.court_id, dto.court_type)
        authorize_court_access(user, court.pk)

        StaffService.validate_status(dto.employment_status)
        StaffService._check_status_dates(dto, dto.employment_status)

        fields = {
            key: value for key, value in asdict(dto).items()
            if key not in NON_MODEL_FIELDS and key not in ALL_STATUS_DATE_FIELDS
        }
        if fields.get('hire_date') is None:
            fields.pop('hire_date')

        staff = Staff(**fields, court=court, court_type=court.type, created_by=user, updated_by=user)

        date_field = STATUS_DATE_FIELDS.get(dto.employment_status)
        effective_date = dto.status_date or (getattr(dto, date_field) if date_field else None) or timezone.localdate()
        staff.apply_employment_status(dto.employment_status, effective_date)
        if dto.employment_status == EmploymentStatus.ON_LEAVE:
            staff.leave_end_date = dto.leave_end_date

        staff.full_clean()
        staff.save()

        logger.info(
            "Staff created: id=%s court=%s status=%s by=%s",
            staff.pk, court.pk, staff.employment_status, user.username
        )
        return staff

    @staticmethod
    @transaction.atomic
    def update(user, dto: StaffUpdateDTO) -> Staff:
        """
        Update a staff member.

        Plain fields are written as given. A changed employment_status (or
        any employment_status sent with a status_date) is applied as a
        transition. Moving to another court requires access to both courts.
        A status_date needs an employment_status. Fields named in
        dto.cleared_fields are set to NULL.
        """
        staff = StaffService.get_staff(user, dto.staff_id)

        if dto.status_date is not None and dto.employment_status is None:
            raise ValidationError({'status_date': 'Requires employment_status'})

        if dto.court_id is not None or dto.court_type is not None:
            court_id = dto.court_id if dto.court_id is not None else staff.court_id
            court_type = dto.court_type or staff.court_type
            court = StaffService.resolve_court(court_id, court_type)
            if court.pk != staff.court_id:
                authorize_court_access(user, court.pk)
            staff.court = court
            staff.court_type = court.type

        new_status = dto.employment_status or staff.employment_status
        StaffService.validate_status(new_status)
        StaffService._check_status_dates(dto, new_status)

        for field_name, value in asdict(dto).items():
            if field_name in NON_MODEL_FIELDS or field_name in ALL_STATUS_DATE_FIELDS or value is None:
                continue
            setattr(staff, field_name, value)

        status_changed = dto.employment_status is not None and (
            dto.employment_status != staff.employment_status or dto.status_date is not None
        )
        if status_changed:
            previous_status = staff.employment_status
            staff.apply_employment_status(new_status, dto.status_date or timezone.localdate())
            logger.info(
                "Staff status changed: id=%s %s -> %s by=%s",
                staff.pk, previous_status, new_status, user.username
            )

        for field_name in ALL_STATUS_DATE_FIELDS:
            value = getattr(dto, field_name)
            if value is not None:
                setattr(staff, field_name, value)

        for field_name in dto.cleared_fields:
            setattr(staff, field_name, None)

        staff.updated_by = user
        staff.full_clean()
        staff.save()

        logger.info("Staff updated: id=%s by=%s", staff.pk, user.username)
        return staff

    @staticmethod
    @transaction.atomic
    def transition_status(user, dto: StatusTransitionDTO) -> Staff:
        """
        Move a staff member to another employment status.

        Every status date is cleared, then the one matching the new status
        is set to dto.status_date (default: today). leave_end_date is always
        cleared. Any status may follow any other, and repeating a transition
        with the same date leaves the record unchanged.

        Raises:
            ValidationError: If the status is unknown
            Staff.DoesNotExist: If the record does not exist
            PermissionDenied: If the staff member's court is outside the caller's scope
            DatabaseError: If the record cannot be saved
        """
        StaffService.validate_status(dto.employment_status)
        staff = StaffService.get_staff(user, dto.staff_id)

        previous_status = staff.employment_status
        staff.apply_employment_status(dto.employment_status, dto.status_date or timezone.localdate())
        staff.updated_by = user
        staff.save(update_fields=['employment_status', *ALL_STATUS_DATE_FIELDS, 'updated_by', 'updated_at'])

        logger.info(
            "Staff status changed: id=%s %s -> %s by=%s",
            staff.pk, previous_status, staff.employment_status, user.username
        )
        return staff

    @staticmethod
    @transaction.atomic
    def delete(user, staff_id):
        """Permanently delete a staff member."""
        staff = Staff.objects.get(pk=staff_id)
        staff.delete()
        logger.info("Staff deleted: id=%s by=%s", staff_id, user.username)
