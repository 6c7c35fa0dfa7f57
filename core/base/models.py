from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.db import models


class AuditMixin(models.Model):
    """
    Adds audit fields to track creation and modification metadata.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified
        - created_by: User who created the record (optional)
        - updated_by: User who last modified the record (optional)

    Note: created_by and updated_by are set by the service layer.
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_created',
        help_text="User who created this record"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_updated',
        help_text="User who last updated this record"
    )

    class Meta:
        abstract = True


class SoftDeleteMixin(models.Model):
    """
    Mixin for records that are deactivated instead of deleted.

    Fields:
        - is_active: False once the record has been deactivated

    Methods:
        - deactivate(): Marks record as inactive (soft delete)
        - delete(): Always refused, records are never removed
    """
    is_active = models.BooleanField(
        default=True,
        help_text="Set to False instead of deleting."
    )

    class Meta:
        abstract = True

    def deactivate(self, user=None):
        """Soft delete: mark as inactive instead of removing from DB."""
        self.is_active = False
        update_fields = ['is_active']
        if hasattr(self, 'updated_at'):
            update_fields.append('updated_at')
        if user is not None and hasattr(self, 'updated_by'):
            self.updated_by = user
            update_fields.append('updated_by')
        self.save(update_fields=update_fields)

    def delete(self, *args, **kwargs):
        raise PermissionDenied(f"{self._meta.verbose_name.capitalize()} records cannot be deleted, deactivate them instead")
