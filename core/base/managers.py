"""
Core Base Managers Module

Provides querysets shared by the domain models.

**Architecture:**
- BaseQuerySet: Generic search filtering
- SoftDeleteQuerySet: For models with the is_active flag

Usage:
    from core.base.managers import SoftDeleteQuerySet

    class CourtQuerySet(SoftDeleteQuerySet):
        search_fields = ('name', 'location', 'city')

    class Court(SoftDeleteMixin, models.Model):
        objects = models.Manager.from_queryset(CourtQuerySet)()

    Court.objects.active().search('north')
"""

from django.db import models
from django.db.models import Q


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with common filtering methods.

    Subclasses set ``search_fields`` to the fields matched by ``search``.
    """
    search_fields = ('name',)

    def search(self, term):
        """Case-insensitive contains match across ``search_fields``."""
        if not term:
            return self
        condition = Q()
        for field in self.search_fields:
            condition |= Q(**{f'{field}__icontains': term})
        return self.filter(condition)


class SoftDeleteQuerySet(BaseQuerySet):
    """
    QuerySet for SoftDeleteMixin models.

    Methods:
        - active(): Return is_active=True records
    """

    def active(self):
        return self.filter(is_active=True)
