from .court_serializers import (
    AddressSerializer,
    ContactInfoSerializer,
    CourtReadSerializer,
    CourtCreateSerializer,
    CourtUpdateSerializer
)

__all__ = [
    'AddressSerializer',
    'ContactInfoSerializer',
    'CourtReadSerializer',
    'CourtCreateSerializer',
    'CourtUpdateSerializer',
]
