from django.core.validators import MinLengthValidator
from django.db import models

from core.base.managers import SoftDeleteQuerySet
from core.base.models import AuditMixin, SoftDeleteMixin
from judiciary.courts.exceptions import InvalidParentReference


class CourtType(models.TextChoices):
    CIRCUIT = 'circuit', 'Circuit'
    MAGISTERIAL = 'magisterial', 'Magisterial'


class CourtQuerySet(SoftDeleteQuerySet):
    search_fields = ('name', 'location', 'city')

    def circuit(self):
        return self.filter(type=CourtType.CIRCUIT)

    def magisterial(self):
        return self.filter(type=CourtType.MAGISTERIAL)

    def under_circuit(self, circuit_court_id):
        """Magisterial courts whose parent is the given circuit court."""
        return self.magisterial().filter(circuit_court_id=circuit_court_id)


class Court(AuditMixin, SoftDeleteMixin):
    """
    A circuit court (top level) or a magisterial court under one circuit court.

    The tree is two levels deep: a magisterial court's parent is always a
    circuit court and a circuit court has no parent. Courts are deactivated,
    never deleted.
    """
    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    type = models.CharField(
        max_length=20,
        choices=CourtType.choices,
        default=CourtType.MAGISTERIAL
    )
    circuit_court = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        related_name='magisterial_courts',
        null=True,
        blank=True,
        help_text="Parent circuit court (magisterial courts only)"
    )
    location = models.CharField(max_length=200, blank=True, default='')
    description = models.CharField(max_length=500, blank=True, default='')

    # Address
    street = models.CharField(max_length=200, blank=True, default='')
    city = models.CharField(max_length=100, blank=True, default='')
    state = models.CharField(max_length=100, blank=True, default='')
    zip_code = models.CharField(max_length=20, blank=True, default='')

    # Contact info
    phone = models.CharField(max_length=20, blank=True, default='')
    email = models.EmailField(blank=True, default='')
    fax = models.CharField(max_length=20, blank=True, default='')

    objects = models.Manager.from_queryset(CourtQuerySet)()

    class Meta:
        db_table = 'courts'
        verbose_name = 'Court'
        verbose_name_plural = 'Courts'
        ordering = ['name']
        indexes = [
            models.Index(fields=['type', 'is_active'], name='courts_type_active_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_type_display()})"

    @property
    def is_circuit(self):
        return self.type == CourtType.CIRCUIT

    def clean(self):
        super().clean()
        if self.is_circuit:
            return
        if self.circuit_court_id is None:
            raise InvalidParentReference({'circuit_court_id': 'Magisterial courts require a circuit court'})
        parent = Court.objects.filter(pk=self.circuit_court_id).only('type').first()
        if parent is None or parent.type != CourtType.CIRCUIT:
            raise InvalidParentReference({'circuit_court_id': 'Invalid circuit court'})

    def save(self, *args, **kwargs):
        if self.is_circuit:
            self.circuit_court = None
        super().save(*args, **kwargs)
