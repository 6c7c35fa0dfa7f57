"""
Role decorators for function-based views.

Court-level scope checks live in judiciary.courts.security; these
decorators only gate whole endpoints by role.
"""
from functools import wraps

from rest_framework import status
from rest_framework.response import Response

from core.user_accounts.models import RoleChoices


def require_role(*roles, methods=None):
    """
    Decorator to restrict a view to accounts holding one of ``roles``.

    Args:
        roles: Allowed RoleChoices values
        methods: HTTP methods the check applies to. None means every method.

    Usage:
        @api_view(['GET', 'POST'])
        @require_role(RoleChoices.ADMIN, methods=['POST'])
        def circuit_court_list(request):
            # Anyone may list, only admins may create
            ...

    Returns:
        401 Unauthorized if user is not authenticated
        403 Forbidden if the user's role is not allowed
    """
    allowed_roles = set(roles)

    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if methods is not None and request.method not in methods:
                return view_func(request, *args, **kwargs)

            if not request.user.is_authenticated:
                return Response(
                    {'error': 'Authentication required'},
                    status=status.HTTP_401_UNAUTHORIZED
                )

            if request.user.role not in allowed_roles:
                return Response(
                    {
                        'error': 'Permission denied',
                        'detail': f"Requires role: {', '.join(sorted(allowed_roles))}"
                    },
                    status=status.HTTP_403_FORBIDDEN
                )

            return view_func(request, *args, **kwargs)

        wrapper.allowed_roles = allowed_roles
        return wrapper
    return decorator


def require_admin(view_func=None, methods=None):
    """
    Shortcut for ``require_role(RoleChoices.ADMIN)``.

    Usage:
        @require_admin
        def user_list(request): ...

        @require_admin(methods=['DELETE'])
        def staff_detail(request, pk): ...
    """
    decorator = require_role(RoleChoices.ADMIN, methods=methods)
    if view_func is not None:
        return decorator(view_func)
    return decorator
