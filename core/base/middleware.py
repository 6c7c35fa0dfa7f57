import logging
import time

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    """Logs method, path, status, duration and caller of every request."""

    def process_request(self, request):
        request.start_time = time.monotonic()
        return None

    def process_response(self, request, response):
        duration = time.monotonic() - getattr(request, 'start_time', time.monotonic())

        # DRF writes the authenticated user back onto the Django request
        user = getattr(request, 'user', None)
        username = user.username if user is not None and user.is_authenticated else 'anonymous'

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "%s %s -> %s (%.3fs) user=%s",
            request.method,
            request.path,
            response.status_code,
            duration,
            username,
        )
        return response
