from django.core.exceptions import ValidationError


class InvalidParentReference(ValidationError):
    """A magisterial court points at a parent that is missing or not a circuit court."""


class InvalidCourtReference(ValidationError):
    """A staff member's court is missing or its type differs from the declared court type."""
