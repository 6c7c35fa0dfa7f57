from .court_service import CourtService

__all__ = [
    'CourtService',
]
