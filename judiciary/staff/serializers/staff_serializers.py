"""
Serializers for Staff model
"""
from rest_framework import serializers

from judiciary.courts.models import CourtType
from judiciary.courts.serializers import AddressSerializer
from judiciary.staff.dtos import StaffCreateDTO, StaffUpdateDTO, StatusTransitionDTO
from judiciary.staff.models import Staff, EmploymentStatus, ALL_STATUS_DATE_FIELDS, email_validator

# Update fields that an explicit null clears
CLEARABLE_FIELDS = ('salary', *ALL_STATUS_DATE_FIELDS)


class EmergencyContactSerializer(serializers.Serializer):
    name = serializers.CharField(source='emergency_contact_name', max_length=100, required=False, allow_blank=True)
    relationship = serializers.CharField(
        source='emergency_contact_relationship', max_length=50, required=False, allow_blank=True
    )
    phone = serializers.CharField(source='emergency_contact_phone', max_length=20, required=False, allow_blank=True)


class StaffReadSerializer(serializers.ModelSerializer):
    """Read serializer for Staff model"""
    court_id = serializers.IntegerField(read_only=True)
    court_name = serializers.CharField(source='court.name', read_only=True)
    address = AddressSerializer(source='*', read_only=True)
    emergency_contact = EmergencyContactSerializer(source='*', read_only=True)

    class Meta:
        model = Staff
        fields = [
            'id', 'name', 'position',
            'court_type', 'court_id', 'court_name',
            'phone', 'email', 'education', 'department', 'supervisor',
            'salary', 'notes', 'hire_date',
            'address', 'emergency_contact',
            'employment_status', 'retirement_date', 'dismissal_date',
            'leave_start_date', 'leave_end_date',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class _StaffWriteSerializer(serializers.Serializer):
    """Fields shared by create and update"""
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    email = serializers.CharField(max_length=254, required=False, allow_blank=True, validators=[email_validator])
    education = serializers.CharField(max_length=200, required=False, allow_blank=True)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True)
    supervisor = serializers.CharField(max_length=100, required=False, allow_blank=True)
    salary = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    hire_date = serializers.DateField(required=False)
    address = AddressSerializer(required=False)
    emergency_contact = EmergencyContactSerializer(required=False)
    employment_status = serializers.ChoiceField(choices=EmploymentStatus.choices, required=False)
    status_date = serializers.DateField(required=False, allow_null=True)
    retirement_date = serializers.DateField(required=False, allow_null=True)
    dismissal_date = serializers.DateField(required=False, allow_null=True)
    leave_start_date = serializers.DateField(required=False, allow_null=True)
    leave_end_date = serializers.DateField(required=False, allow_null=True)

    def _flatten(self):
        data = self.validated_data.copy()
        data.update(data.pop('address', {}))
        data.update(data.pop('emergency_contact', {}))
        return data


class StaffCreateSerializer(_StaffWriteSerializer):
    """Write serializer for creating a staff member"""
    name = serializers.CharField(min_length=2, max_length=100)
    position = serializers.CharField(min_length=2, max_length=100)
    court_id = serializers.IntegerField()
    court_type = serializers.ChoiceField(choices=CourtType.choices)

    def to_dto(self) -> StaffCreateDTO:
        return StaffCreateDTO(**self._flatten())


class StaffUpdateSerializer(_StaffWriteSerializer):
    """Write serializer for updating a staff member"""
    staff_id = serializers.IntegerField()  # Primary Key
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    position = serializers.CharField(min_length=2, max_length=100, required=False)
    court_id = serializers.IntegerField(required=False)
    court_type = serializers.ChoiceField(choices=CourtType.choices, required=False)

    def to_dto(self) -> StaffUpdateDTO:
        data = self._flatten()
        cleared = tuple(
            field_name for field_name in CLEARABLE_FIELDS
            if field_name in data and data[field_name] is None
        )
        return StaffUpdateDTO(**data, cleared_fields=cleared)


class StatusTransitionSerializer(serializers.Serializer):
    """Write serializer for an employment-status transition"""
    staff_id = serializers.IntegerField()
    employment_status = serializers.ChoiceField(choices=EmploymentStatus.choices)
    status_date = serializers.DateField(required=False, allow_null=True)

    def to_dto(self) -> StatusTransitionDTO:
        return StatusTransitionDTO(**self.validated_data)


class StaffStatisticsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    active = serializers.IntegerField()
    retired = serializers.IntegerField()
    dismissed = serializers.IntegerField()
    on_leave = serializers.IntegerField()
