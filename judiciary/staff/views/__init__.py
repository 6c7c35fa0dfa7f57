from .staff_views import (
    staff_list,
    staff_detail,
    staff_by_status,
    staff_by_court,
    staff_statistics,
    staff_employment_status
)

__all__ = [
    'staff_list',
    'staff_detail',
    'staff_by_status',
    'staff_by_court',
    'staff_statistics',
    'staff_employment_status',
]
