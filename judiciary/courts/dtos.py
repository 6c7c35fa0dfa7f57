from dataclasses import dataclass
from typing import Optional


@dataclass
class CourtCreateDTO:
    """DTO for creating a new court"""
    name: str
    type: str  # CourtType value
    circuit_court_id: Optional[int] = None  # Required for magisterial courts
    location: str = ''
    description: str = ''
    street: str = ''
    city: str = ''
    state: str = ''
    zip_code: str = ''
    phone: str = ''
    email: str = ''
    fax: str = ''


@dataclass
class CourtUpdateDTO:
    """DTO for updating an existing court. None means 'leave unchanged'."""
    court_id: int  # Primary Key
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    fax: Optional[str] = None
    is_active: Optional[bool] = None
    # Note: type and parent circuit court are fixed at creation
