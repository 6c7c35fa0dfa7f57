from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class StaffCreateDTO:
    """DTO for creating a new staff member"""
    name: str
    position: str
    court_id: int
    court_type: str  # CourtType value, must match the court
    employment_status: str = 'active'
    status_date: Optional[date] = None  # Effective date of a non-active status (default: today)
    phone: str = ''
    email: str = ''
    education: str = ''
    department: str = ''
    supervisor: str = ''
    salary: Optional[Decimal] = None
    notes: str = ''
    hire_date: Optional[date] = None  # default: today
    street: str = ''
    city: str = ''
    state: str = ''
    zip_code: str = ''
    emergency_contact_name: str = ''
    emergency_contact_relationship: str = ''
    emergency_contact_phone: str = ''
    retirement_date: Optional[date] = None
    dismissal_date: Optional[date] = None
    leave_start_date: Optional[date] = None
    leave_end_date: Optional[date] = None


@dataclass
class StaffUpdateDTO:
    """DTO for updating an existing staff member. None means 'leave unchanged'."""
    staff_id: int  # Primary Key
    name: Optional[str] = None
    position: Optional[str] = None
    court_id: Optional[int] = None
    court_type: Optional[str] = None
    employment_status: Optional[str] = None
    status_date: Optional[date] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    education: Optional[str] = None
    department: Optional[str] = None
    supervisor: Optional[str] = None
    salary: Optional[Decimal] = None
    notes: Optional[str] = None
    hire_date: Optional[date] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_relationship: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    retirement_date: Optional[date] = None
    dismissal_date: Optional[date] = None
    leave_start_date: Optional[date] = None
    leave_end_date: Optional[date] = None
    cleared_fields: tuple = ()  # Nullable fields sent as null, written as NULL


@dataclass
class StatusTransitionDTO:
    """DTO for moving a staff member to another employment status"""
    staff_id: int
    employment_status: str
    status_date: Optional[date] = None  # default: today
