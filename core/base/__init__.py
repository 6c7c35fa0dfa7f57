"""
Core Base Module

Provides shared mixins, managers and request middleware for all judiciary modules.

Exports:
    Individual Feature Mixins:
        - AuditMixin: Adds created_at, updated_at, created_by, updated_by
        - SoftDeleteMixin: Adds is_active + soft delete behavior

    Managers & QuerySets:
        - BaseQuerySet: Base queryset with search across search_fields
        - SoftDeleteQuerySet: QuerySet with an active() filter

Import from the submodules directly (``core.base.models``,
``core.base.managers``); this package does not import models eagerly so it
can be referenced from settings before the app registry is ready.
"""
