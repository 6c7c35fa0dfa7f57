"""
API Views for authentication and user account management.
"""
import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import update_last_login
from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from judiciary_project.pagination import auto_paginate
from .models import UserAccount, RoleChoices
from .permissions import require_admin
from .serializers import (
    UserSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
    UserSelfUpdateSerializer,
    ChangePasswordSerializer,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Authentication Views
# ============================================================================

@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Public endpoint for user login.
    Authenticates user and returns JWT tokens.

    POST /auth/login/
    - Request body: { "username": "...", "password": "..." }
    - Username is matched ignoring case; deactivated accounts cannot log in
    - Returns: User data and JWT tokens
    """
    username = request.data.get('username')
    password = request.data.get('password')

    if not username or not password:
        return Response(
            {'error': 'Please provide both username and password'},
            status=status.HTTP_400_BAD_REQUEST
        )

    user = authenticate(request, username=username, password=password)

    if user is None:
        logger.warning("Failed login for username=%s", username)
        return Response(
            {'error': 'Invalid credentials'},
            status=status.HTTP_401_UNAUTHORIZED
        )

    refresh = RefreshToken.for_user(user)
    update_last_login(None, user)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token)
        }
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """
    Blacklists the refresh token.

    POST /auth/logout/
    - Request body: { "refresh": "..." }
    """
    refresh_token = request.data.get('refresh')
    if not refresh_token:
        return Response(
            {'error': 'Refresh token is required'},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        RefreshToken(refresh_token).blacklist()
    except TokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Logout successful'}, status=status.HTTP_200_OK)


# ============================================================================
# Own Account Views
# ============================================================================

@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def user_profile(request):
    """
    View or rename the caller's own account.

    GET /auth/me/
    PUT/PATCH /auth/me/
    - Request body: { "name" }
    """
    user = request.user

    if request.method == 'GET':
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    serializer = UserSelfUpdateSerializer(user, data=request.data, partial=request.method == 'PATCH')
    if serializer.is_valid():
        serializer.save()
        return Response({
            'message': 'Profile updated successfully',
            'user': UserSerializer(user).data
        }, status=status.HTTP_200_OK)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password(request):
    """
    Change the caller's own password.

    POST /auth/change-password/
    - Request body: { "old_password", "new_password", "confirm_password" }
    """
    serializer = ChangePasswordSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    user = request.user

    if not user.check_password(serializer.validated_data['old_password']):
        return Response(
            {'error': 'Old password is incorrect'},
            status=status.HTTP_400_BAD_REQUEST
        )

    user.set_password(serializer.validated_data['new_password'])
    user.save(update_fields=['password', 'updated_at'])

    return Response({'message': 'Password changed successfully'}, status=status.HTTP_200_OK)


# ============================================================================
# User Management Views
# ============================================================================

@api_view(['GET', 'POST'])
@require_admin
@auto_paginate
def user_list(request):
    """
    Admin endpoint for listing and creating users.

    GET /users/
    - Active users; ?include_inactive=true for all
    - Search: ?search=query (username, name)

    POST /users/
    - Request body: { "username", "password", "name", "role", "court_id"? }
    """
    if request.method == 'GET':
        users = UserAccount.objects.select_related('court')
        if request.query_params.get('include_inactive', '').lower() != 'true':
            users = users.filter(is_active=True)

        search = request.query_params.get('search')
        if search:
            users = users.filter(Q(username__icontains=search) | Q(name__icontains=search))

        serializer = UserSerializer(users.order_by('username'), many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = UserCreateSerializer(data=request.data)
    if serializer.is_valid():
        user = serializer.save()
        logger.info("User created: username=%s role=%s by=%s", user.username, user.role, request.user.username)
        return Response({
            'message': 'User created successfully',
            'user': UserSerializer(user).data
        }, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
def user_detail(request, user_id):
    """
    View, update or deactivate a user.

    Permissions:
    - Admin: full access, but cannot deactivate own account
    - Others: may view their own account and change their own name only

    GET /users/<id>/
    PUT/PATCH /users/<id>/
    DELETE /users/<id>/ (admin, soft delete)
    """
    try:
        target_user = UserAccount.objects.select_related('court').get(pk=user_id)
    except UserAccount.DoesNotExist:
        return Response(
            {'error': 'User not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    is_admin = request.user.is_admin()
    is_self = request.user.pk == target_user.pk

    if not is_admin and not (is_self and request.method != 'DELETE'):
        return Response(
            {'error': 'Permission denied', 'detail': 'Admin privileges required'},
            status=status.HTTP_403_FORBIDDEN
        )

    if request.method == 'GET':
        return Response(UserSerializer(target_user).data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        partial = request.method == 'PATCH'
        if is_admin:
            serializer = UserUpdateSerializer(
                target_user, data=request.data, partial=partial, context={'request': request}
            )
        else:
            serializer = UserSelfUpdateSerializer(target_user, data=request.data, partial=partial)

        if serializer.is_valid():
            serializer.save()
            return Response({
                'message': 'User updated successfully',
                'user': UserSerializer(target_user).data
            }, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    elif request.method == 'DELETE':
        if is_self:
            return Response(
                {'error': 'Cannot deactivate your own account'},
                status=status.HTTP_400_BAD_REQUEST
            )

        target_user.deactivate()
        logger.info("User deactivated: username=%s by=%s", target_user.username, request.user.username)
        return Response({
            'message': f'User {target_user.username} deactivated successfully'
        }, status=status.HTTP_200_OK)


@api_view(['GET'])
@require_admin
@auto_paginate
def users_by_role(request, role):
    """
    Active users holding a role.

    GET /users/role/<role>/
    """
    if role not in RoleChoices.values:
        return Response(
            {'error': f"Invalid role '{role}'"},
            status=status.HTTP_400_BAD_REQUEST
        )

    users = UserAccount.objects.select_related('court').filter(role=role, is_active=True).order_by('username')
    serializer = UserSerializer(users, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)
