from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from judiciary.courts.models import Court
from .models import UserAccount, RoleChoices, username_validator, validate_court_for_role


class UserSerializer(serializers.ModelSerializer):
    """Read serializer for accounts. Never exposes the password hash."""
    court_id = serializers.IntegerField(read_only=True, allow_null=True)
    court_name = serializers.CharField(source='court.name', read_only=True, allow_null=True)

    class Meta:
        model = UserAccount
        fields = [
            'id', 'username', 'name', 'role',
            'court_id', 'court_name',
            'is_active', 'last_login', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class _CourtBindingMixin:
    """Validates the role / court pair of create and update payloads"""

    def _validate_binding(self, role, court):
        try:
            validate_court_for_role(role, court)
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict)


class UserCreateSerializer(_CourtBindingMixin, serializers.Serializer):
    """Serializer for admins creating accounts of any role"""
    username = serializers.CharField(min_length=3, max_length=30, validators=[username_validator])
    password = serializers.CharField(
        write_only=True,
        required=True,
        min_length=6,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(min_length=2, max_length=100)
    role = serializers.ChoiceField(choices=RoleChoices.choices)
    court_id = serializers.PrimaryKeyRelatedField(
        source='court',
        queryset=Court.objects.all(),
        required=False,
        allow_null=True
    )

    def validate_username(self, value):
        if UserAccount.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def validate(self, attrs):
        self._validate_binding(attrs['role'], attrs.get('court'))
        return attrs

    def create(self, validated_data):
        return UserAccount.objects.create_user(
            username=validated_data['username'],
            name=validated_data['name'],
            password=validated_data['password'],
            role=validated_data['role'],
            court=validated_data.get('court'),
        )


class UserUpdateSerializer(_CourtBindingMixin, serializers.ModelSerializer):
    """
    Serializer for admins updating an account.
    Username is fixed; password is optional and re-hashed when given.
    """
    password = serializers.CharField(
        write_only=True,
        required=False,
        min_length=6,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    role = serializers.ChoiceField(choices=RoleChoices.choices, required=False)
    court_id = serializers.PrimaryKeyRelatedField(
        source='court',
        queryset=Court.objects.all(),
        required=False,
        allow_null=True
    )

    class Meta:
        model = UserAccount
        fields = ['name', 'role', 'court_id', 'is_active', 'password']

    def validate(self, attrs):
        request = self.context.get('request')
        if attrs.get('is_active') is False and request is not None and request.user.pk == self.instance.pk:
            raise serializers.ValidationError({'is_active': 'Cannot deactivate your own account'})

        role = attrs.get('role', self.instance.role)
        court = attrs['court'] if 'court' in attrs else self.instance.court
        if role == RoleChoices.ADMIN:
            attrs['court'] = None
        else:
            self._validate_binding(role, court)
        return attrs

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance


class UserSelfUpdateSerializer(serializers.ModelSerializer):
    """Accounts may only change their own display name"""
    name = serializers.CharField(min_length=2, max_length=100)

    class Meta:
        model = UserAccount
        fields = ['name']


class ChangePasswordSerializer(serializers.Serializer):
    """Serializer for changing own password"""
    old_password = serializers.CharField(required=True, write_only=True)
    new_password = serializers.CharField(required=True, write_only=True, min_length=6)
    confirm_password = serializers.CharField(required=True, write_only=True)

    def validate(self, attrs):
        if attrs['new_password'] != attrs['confirm_password']:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match"})
        return attrs
