from .staff_serializers import (
    EmergencyContactSerializer,
    StaffReadSerializer,
    StaffCreateSerializer,
    StaffUpdateSerializer,
    StatusTransitionSerializer,
    StaffStatisticsSerializer
)

__all__ = [
    'EmergencyContactSerializer',
    'StaffReadSerializer',
    'StaffCreateSerializer',
    'StaffUpdateSerializer',
    'StatusTransitionSerializer',
    'StaffStatisticsSerializer',
]
