from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, MinValueValidator, RegexValidator
from django.db import models
from django.db.models import Count, Q
from django.utils import timezone

from core.base.managers import BaseQuerySet
from core.base.models import AuditMixin
from judiciary.courts.exceptions import InvalidCourtReference
from judiciary.courts.models import CourtType


class EmploymentStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    RETIRED = 'retired', 'Retired'
    DISMISSED = 'dismissed', 'Dismissed'
    ON_LEAVE = 'on_leave', 'On Leave'


# Date field that records when each status took effect. ACTIVE has none.
STATUS_DATE_FIELDS = {
    EmploymentStatus.RETIRED: 'retirement_date',
    EmploymentStatus.DISMISSED: 'dismissal_date',
    EmploymentStatus.ON_LEAVE: 'leave_start_date',
}

# Every field cleared on a status transition
ALL_STATUS_DATE_FIELDS = ('retirement_date', 'dismissal_date', 'leave_start_date', 'leave_end_date')

email_validator = RegexValidator(
    regex=r'^\S+@\S+\.\S+$',
    message="Enter a valid email address"
)


class StaffQuerySet(BaseQuerySet):
    search_fields = ('name', 'position', 'department', 'email')

    def with_status(self, employment_status):
        return self.filter(employment_status=employment_status)

    def for_court(self, court_id, court_type=None):
        queryset = self.filter(court_id=court_id)
        if court_type:
            queryset = queryset.filter(court_type=court_type)
        return queryset

    def statistics(self) -> dict:
        """Head counts per employment status plus the total."""
        counts = {
            status: Count('id', filter=Q(employment_status=status))
            for status in EmploymentStatus.values
        }
        return self.aggregate(total=Count('id'), **counts)


class Staff(AuditMixin):
    """
    A staff member assigned to exactly one court.

    ``employment_status`` decides which status date is populated:
    retired -> retirement_date, dismissed -> dismissal_date,
    on_leave -> leave_start_date (and optionally leave_end_date).
    All other status dates are always empty.
    """
    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    position = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    court_type = models.CharField(max_length=20, choices=CourtType.choices)
    court = models.ForeignKey(
        'courts.Court',
        on_delete=models.PROTECT,
        related_name='staff_members'
    )

    # Contact / bio
    phone = models.CharField(max_length=20, blank=True, default='')
    email = models.CharField(max_length=254, blank=True, default='', validators=[email_validator])
    education = models.CharField(max_length=200, blank=True, default='')
    department = models.CharField(max_length=100, blank=True, default='')
    supervisor = models.CharField(max_length=100, blank=True, default='')
    salary = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    notes = models.TextField(max_length=1000, blank=True, default='')
    hire_date = models.DateField(default=timezone.localdate)

    # Address
    street = models.CharField(max_length=200, blank=True, default='')
    city = models.CharField(max_length=100, blank=True, default='')
    state = models.CharField(max_length=100, blank=True, default='')
    zip_code = models.CharField(max_length=20, blank=True, default='')

    # Emergency contact
    emergency_contact_name = models.CharField(max_length=100, blank=True, default='')
    emergency_contact_relationship = models.CharField(max_length=50, blank=True, default='')
    emergency_contact_phone = models.CharField(max_length=20, blank=True, default='')

    # Employment status
    employment_status = models.CharField(
        max_length=20,
        choices=EmploymentStatus.choices,
        default=EmploymentStatus.ACTIVE
    )
    retirement_date = models.DateField(null=True, blank=True)
    dismissal_date = models.DateField(null=True, blank=True)
    leave_start_date = models.DateField(null=True, blank=True)
    leave_end_date = models.DateField(null=True, blank=True)

    objects = models.Manager.from_queryset(StaffQuerySet)()

    class Meta:
        db_table = 'staff'
        verbose_name = 'Staff Member'
        verbose_name_plural = 'Staff'
        ordering = ['name']
        indexes = [
            models.Index(fields=['court', 'employment_status'], name='staff_court_status_idx'),
            models.Index(fields=['employment_status'], name='staff_status_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.position}"

    def apply_employment_status(self, employment_status, effective_date):
        """
        Move to ``employment_status`` effective on ``effective_date``.

        Clears every status date, then sets the one belonging to the new
        status. Does not save.
        """
        for field_name in ALL_STATUS_DATE_FIELDS:
            setattr(self, field_name, None)
        date_field = STATUS_DATE_FIELDS.get(employment_status)
        if date_field:
            setattr(self, date_field, effective_date)
        self.employment_status = employment_status

    def clear_stale_status_dates(self):
        """Empty status dates that do not belong to the current status."""
        current_field = STATUS_DATE_FIELDS.get(self.employment_status)
        for field_name in STATUS_DATE_FIELDS.values():
            if field_name != current_field:
                setattr(self, field_name, None)
        if self.employment_status != EmploymentStatus.ON_LEAVE:
            self.leave_end_date = None

    def clean(self):
        super().clean()
        errors = {}

        date_field = STATUS_DATE_FIELDS.get(self.employment_status)
        if date_field and getattr(self, date_field) is None:
            errors[date_field] = f"Required when employment status is {self.employment_status}"

        if self.leave_end_date:
            if self.employment_status != EmploymentStatus.ON_LEAVE:
                errors['leave_end_date'] = "Only allowed while on leave"
            elif self.leave_start_date and self.leave_end_date < self.leave_start_date:
                errors['leave_end_date'] = "Leave end date cannot be before leave start date"

        if errors:
            raise ValidationError(errors)

        if self.court_id is not None and self.court.type != self.court_type:
            raise InvalidCourtReference({'court_id': 'Court type does not match the selected court'})

    def save(self, *args, **kwargs):
        self.clear_stale_status_dates()
        if self.email:
            self.email = self.email.lower()
        super().save(*args, **kwargs)
