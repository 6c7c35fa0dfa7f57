from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from core.user_accounts.models import RoleChoices
from core.user_accounts.permissions import require_role
from judiciary.courts.models import Court, CourtType
from judiciary.courts.serializers import (
    CourtReadSerializer,
    CourtCreateSerializer,
    CourtUpdateSerializer
)
from judiciary.courts.services import CourtService
from judiciary_project.pagination import auto_paginate


def _create_court(request, court_type):
    serializer = CourtCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            dto = serializer.to_dto(court_type)
            court = CourtService.create(request.user, dto)
            return Response(CourtReadSerializer(court).data, status=status.HTTP_201_CREATED)
        except ValidationError as e:
            error_detail = e.message_dict if hasattr(e, 'error_dict') else e.messages
            return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@auto_paginate
def court_list(request):
    """
    List courts visible to the caller.

    GET /courts/
    - Filters: type (circuit|magisterial), circuit_court_id
    - Search: ?search=query (name, location, city)
    - ?include_inactive=true to include deactivated courts
    """
    filters = {
        'type': request.query_params.get('type'),
        'circuit_court_id': request.query_params.get('circuit_court_id'),
        'search': request.query_params.get('search'),
        'include_inactive': request.query_params.get('include_inactive'),
    }
    courts = CourtService.list_courts(request.user, filters)
    serializer = CourtReadSerializer(courts, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['GET', 'POST'])
@require_role(RoleChoices.ADMIN, methods=['POST'])
@auto_paginate
def circuit_court_list(request):
    """
    List active circuit courts or create one.

    GET /courts/circuit/
    - Active circuit courts in the caller's scope, sorted by name

    POST /courts/circuit/ (admin)
    - Request body: { "name", "location"?, "description"?, "address"?, "contact_info"? }
    """
    if request.method == 'GET':
        courts = CourtService.list_circuit_courts(request.user)
        serializer = CourtReadSerializer(courts, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    return _create_court(request, CourtType.CIRCUIT)


@api_view(['GET', 'POST'])
@require_role(RoleChoices.ADMIN, methods=['POST'])
@auto_paginate
def magisterial_court_list(request):
    """
    List active magisterial courts or create one.

    GET /courts/magisterial/
    - Active magisterial courts in the caller's scope, with parent name

    POST /courts/magisterial/ (admin)
    - Request body: { "name", "circuit_court_id", ... }
    - circuit_court_id must point at a circuit court
    """
    if request.method == 'GET':
        courts = CourtService.list_magisterial_courts(request.user)
        serializer = CourtReadSerializer(courts, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    return _create_court(request, CourtType.MAGISTERIAL)


@api_view(['GET'])
@auto_paginate
def circuit_magisterial_courts(request, pk):
    """
    Active magisterial courts under a circuit court.

    GET /courts/circuit/<pk>/magisterial/
    """
    get_object_or_404(Court.objects.circuit(), pk=pk)
    courts = CourtService.list_magisterial_courts(request.user, circuit_court_id=pk)
    serializer = CourtReadSerializer(courts, many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_role(RoleChoices.ADMIN, methods=['PUT', 'PATCH', 'DELETE'])
def court_detail(request, pk):
    """
    Retrieve, update or deactivate a court.

    GET /courts/<pk>/
    PUT/PATCH /courts/<pk>/ (admin)
    DELETE /courts/<pk>/ (admin, soft delete)
    """
    court = get_object_or_404(Court.objects.all(), pk=pk)

    if request.method == 'GET':
        court = CourtService.get_court(request.user, court.pk)
        serializer = CourtReadSerializer(court)
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['court_id'] = court.id

        serializer = CourtUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                dto = serializer.to_dto()
                updated_court = CourtService.update(request.user, dto)
                return Response(CourtReadSerializer(updated_court).data, status=status.HTTP_200_OK)
            except ValidationError as e:
                error_detail = e.message_dict if hasattr(e, 'error_dict') else e.messages
                return Response(error_detail, status=status.HTTP_400_BAD_REQUEST)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    elif request.method == 'DELETE':
        CourtService.deactivate(request.user, court.id)
        return Response({'message': 'Court deactivated successfully'}, status=status.HTTP_200_OK)
