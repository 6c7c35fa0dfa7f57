from .court_views import (
    court_list,
    court_detail,
    circuit_court_list,
    magisterial_court_list,
    circuit_magisterial_courts
)

__all__ = [
    'court_list',
    'court_detail',
    'circuit_court_list',
    'magisterial_court_list',
    'circuit_magisterial_courts',
]
