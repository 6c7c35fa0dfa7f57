"""
Exception translation into the standard error envelope.

Error kinds map to HTTP status codes here:
- django ValidationError          -> 400
- PermissionDenied                -> 403
- Http404 / ObjectDoesNotExist    -> 404
- DatabaseError (storage failure) -> 500, details only in the log
"""
import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from judiciary_project.renderers import format_error_response

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Translate exceptions raised by views and services into standard error responses.

    DRF's own handler covers APIException, Http404 and PermissionDenied.
    Django validation errors, missing objects and storage failures are
    handled on top of it.
    """
    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, DjangoValidationError):
            errors = exc.message_dict if hasattr(exc, 'error_dict') else exc.messages
            response = Response(errors, status=http_status.HTTP_400_BAD_REQUEST)
        elif isinstance(exc, ObjectDoesNotExist):
            response = Response({'detail': str(exc) or 'Not found.'}, status=http_status.HTTP_404_NOT_FOUND)
        elif isinstance(exc, DatabaseError):
            view = context.get('view')
            logger.exception("Storage failure in %s", view.__class__.__name__ if view else 'unknown view')
            response = Response(
                {'detail': 'Internal server error'},
                status=http_status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        else:
            return None

    response.data = format_error_response(response.data, response.status_code)
    return response
