from django.core.exceptions import ValidationError


def parse_id_param(value, field_name):
    """
    Parse a primary-key query parameter.

    Returns None for empty values.

    Raises:
        ValidationError: keyed on ``field_name`` if the value is not a positive integer
    """
    if value in (None, ''):
        return None
    value = str(value).strip()
    if not value.isdigit() or int(value) == 0:
        raise ValidationError({field_name: f"'{value}' is not a valid ID"})
    return int(value)
