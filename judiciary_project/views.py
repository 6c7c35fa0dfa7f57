from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health(request):
    """
    Liveness check.

    GET /
    """
    return Response({'message': 'BACKEND IS RUNNING'}, status=status.HTTP_200_OK)
