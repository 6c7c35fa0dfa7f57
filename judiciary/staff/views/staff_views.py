from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.user_accounts.permissions import require_admin
from judiciary.courts.models import Court
from judiciary.staff.models import Staff
from judiciary.staff.serializers import (
    StaffReadSerializer,
    StaffCreateSerializer,
    StaffUpdateSerializer,
    StatusTransitionSerializer,
    StaffStatisticsSerializer
)
from judiciary.staff.services import StaffService
from judiciary_project.pagination import auto_paginate


def _validation_error_response(e):
    error_detail = e.message_dict if hasattr(e, 'error_dict') else e.messages
    return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'POST'])
@auto_paginate
def staff_list(request):
    """
    List staff in the caller's courts or create a staff member.

    GET /staff/
    - Filters: employment_status, court_id, court_type
    - Search: ?search=query (name, position, department, email)

    POST /staff/
    - Request body: { "name", "position", "court_id", "court_type", ... }
    - Caller must have access to the target court
    """
    if request.method == 'GET':
        filters = {
            'employment_status': request.query_params.get('employment_status'),
            'court_id': request.query_params.get('court_id'),
            'court_type': request.query_params.get('court_type'),
            'search': request.query_params.get('search'),
        }
        try:
            staff = StaffService.list_staff(request.user, filters)
        except ValidationError as e:
            return _validation_error_response(e)
        serializer = StaffReadSerializer(staff, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = StaffCreateSerializer(data=request.data)
        if serializer.is_valid():
            try:
                dto = serializer.to_dto()
                staff = StaffService.create(request.user, dto)
                return Response(StaffReadSerializer(staff).data, status=status.HTTP_201_CREATED)
            except ValidationError as e:
                return _validation_error_response(e)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@auto_paginate
def staff_by_status(request, employment_status):
    """
    Staff with an employment status, within the caller's courts.

    GET /staff/status/<employment_status>/
    """
    try:
        staff = StaffService.list_by_status(request.user, employment_status)
    except ValidationError as e:
        return _validation_error_response(e)
    serializer = StaffReadSerializer(staff, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['GET'])
@auto_paginate
def staff_by_court(request, court_id):
    """
    Staff of a single court.

    GET /staff/court/<court_id>/
    - Optional: ?court_type=circuit|magisterial
    - 404 if the court does not exist, 403 if it is outside the caller's scope
    """
    get_object_or_404(Court.objects.all(), pk=court_id)
    staff = StaffService.list_by_court(
        request.user,
        court_id,
        court_type=request.query_params.get('court_type')
    )
    serializer = StaffReadSerializer(staff, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['GET'])
def staff_statistics(request):
    """
    Head counts per employment status over the caller's courts.

    GET /staff/statistics/
    - Returns: { "total", "active", "retired", "dismissed", "on_leave" }
    """
    statistics = StaffService.get_statistics(request.user)
    return Response(StaffStatisticsSerializer(statistics).data, status=status.HTTP_200_OK)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_admin(methods=['DELETE'])
def staff_detail(request, pk):
    """
    Retrieve, update or delete a staff member.

    GET /staff/<pk>/
    PUT/PATCH /staff/<pk>/
    - Changing employment_status clears the previous status dates
    DELETE /staff/<pk>/ (admin, permanent)
    """
    staff = get_object_or_404(Staff.objects.all(), pk=pk)

    if request.method == 'GET':
        staff = StaffService.get_staff(request.user, staff.pk)
        return Response(StaffReadSerializer(staff).data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['staff_id'] = staff.id

        serializer = StaffUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                dto = serializer.to_dto()
                updated_staff = StaffService.update(request.user, dto)
                return Response(StaffReadSerializer(updated_staff).data, status=status.HTTP_200_OK)
            except ValidationError as e:
                return _validation_error_response(e)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    elif request.method == 'DELETE':
        StaffService.delete(request.user, staff.pk)
        return Response({'message': 'Staff member deleted successfully'}, status=status.HTTP_200_OK)


@api_view(['POST'])
def staff_employment_status(request, pk):
    """
    Move a staff member to another employment status.

    POST /staff/<pk>/employment-status/
    - Request body: { "employment_status", "status_date"? }
    - status_date defaults to today
    """
    staff = get_object_or_404(Staff.objects.all(), pk=pk)

    data = request.data.copy()
    data['staff_id'] = staff.id

    serializer = StatusTransitionSerializer(data=data)
    if serializer.is_valid():
        try:
            updated_staff = StaffService.transition_status(request.user, serializer.to_dto())
            return Response(StaffReadSerializer(updated_staff).data, status=status.HTTP_200_OK)
        except ValidationError as e:
            return _validation_error_response(e)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
