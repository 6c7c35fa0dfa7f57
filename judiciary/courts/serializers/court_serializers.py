"""
Serializers for Court model
"""
from rest_framework import serializers

from judiciary.courts.dtos import CourtCreateDTO, CourtUpdateDTO
from judiciary.courts.models import Court


class AddressSerializer(serializers.Serializer):
    """Nested postal address, stored as flat columns on the owning model"""
    street = serializers.CharField(max_length=200, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    zip_code = serializers.CharField(max_length=20, required=False, allow_blank=True)


class ContactInfoSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    fax = serializers.CharField(max_length=20, required=False, allow_blank=True)


class CourtReadSerializer(serializers.ModelSerializer):
    """Read serializer for Court model"""
    circuit_court_id = serializers.IntegerField(read_only=True, allow_null=True)
    circuit_court_name = serializers.CharField(source='circuit_court.name', read_only=True, allow_null=True)
    address = AddressSerializer(source='*', read_only=True)
    contact_info = ContactInfoSerializer(source='*', read_only=True)

    class Meta:
        model = Court
        fields = [
            'id', 'name', 'type',
            'circuit_court_id', 'circuit_court_name',
            'location', 'description', 'address', 'contact_info',
            'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class CourtCreateSerializer(serializers.Serializer):
    """
    Write serializer for creating a court.
    The court type comes from the endpoint, not the payload.
    """
    name = serializers.CharField(min_length=2, max_length=100)
    circuit_court_id = serializers.IntegerField(required=False, allow_null=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    address = AddressSerializer(required=False)
    contact_info = ContactInfoSerializer(required=False)

    def to_dto(self, court_type) -> CourtCreateDTO:
        data = self.validated_data.copy()
        address = data.pop('address', {})
        contact_info = data.pop('contact_info', {})
        return CourtCreateDTO(type=court_type, **data, **address, **contact_info)


class CourtUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a court"""
    court_id = serializers.IntegerField()  # Primary Key
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    address = AddressSerializer(required=False)
    contact_info = ContactInfoSerializer(required=False)
    is_active = serializers.BooleanField(required=False)

    def to_dto(self) -> CourtUpdateDTO:
        data = self.validated_data.copy()
        address = data.pop('address', {})
        contact_info = data.pop('contact_info', {})
        return CourtUpdateDTO(**data, **address, **contact_info)
