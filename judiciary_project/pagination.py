"""
Page slicing for list endpoints.

Views build plain lists (``Response(serializer.data)``) and stay unaware of
paging; ``auto_paginate`` cuts the list down to the requested page on the
way out. A paged body looks like::

    {"status": "success", "message": "",
     "data": {"count": 42, "next": "...?page=3", "previous": "...?page=1", "results": [...]}}

Clients pick the page with ``?page=`` and may shrink or grow it with
``?page_size=`` up to ``max_page_size``.
"""
from functools import wraps

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        page_body = {
            'count': self.page.paginator.count,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        }
        return Response({'status': 'success', 'message': '', 'data': page_body})


def _is_pageable(request, response):
    return (
        request.method == 'GET'
        and isinstance(response, Response)
        and response.status_code == 200
        and isinstance(response.data, list)
    )


def auto_paginate(view_func=None, page_size=None):
    """
    Page the list a function-based view returns.

    Works bare or with a per-view default page size:

        @api_view(['GET', 'POST'])
        @auto_paginate
        def court_list(request): ...

        @api_view(['GET'])
        @auto_paginate(page_size=50)
        def staff_by_court(request, court_id): ...

    Write methods, errors and single-object bodies are returned as they are.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(request, *args, **kwargs):
            response = func(request, *args, **kwargs)
            if not _is_pageable(request, response):
                return response

            paginator = StandardResultsSetPagination()
            if page_size is not None:
                paginator.page_size = page_size
            page = paginator.paginate_queryset(response.data, request)
            if page is None:
                return response
            return paginator.get_paginated_response(page)
        return wrapper

    if view_func is not None:
        return decorator(view_func)
    return decorator
