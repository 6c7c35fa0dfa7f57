"""
User Account Models
Handles authentication, roles and the court each account is scoped to.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models
from django.db.models.functions import Lower

from core.base.models import SoftDeleteMixin
from judiciary.courts.models import CourtType


class RoleChoices(models.TextChoices):
    """Account roles. Each role sees a different slice of the court tree."""
    ADMIN = 'admin', 'Admin'
    CIRCUIT = 'circuit', 'Circuit'
    MAGISTERIAL = 'magisterial', 'Magisterial'


# Court type each scoped role must be bound to
ROLE_COURT_TYPES = {
    RoleChoices.CIRCUIT: CourtType.CIRCUIT,
    RoleChoices.MAGISTERIAL: CourtType.MAGISTERIAL,
}

username_validator = RegexValidator(
    regex=r'^[A-Za-z0-9]+$',
    message="Username may only contain letters and numbers"
)


def validate_court_for_role(role, court):
    """
    Check that ``court`` is a valid binding for an account with ``role``.

    Admins are not bound to any court. Circuit accounts must be bound to a
    circuit court and magisterial accounts to a magisterial court.

    Raises:
        ValidationError: keyed on court_id
    """
    if role == RoleChoices.ADMIN:
        return
    expected_type = ROLE_COURT_TYPES.get(role)
    if court is None:
        raise ValidationError({'court_id': f'A {role} account must be bound to a court'})
    if court.type != expected_type:
        raise ValidationError({
            'court_id': f'A {role} account must be bound to a {expected_type} court'
        })


class UserAccountManager(BaseUserManager):
    """
    Manager for UserAccount.
    Usernames are matched ignoring case on login.
    """

    def get_by_natural_key(self, username):
        return self.get(username__iexact=username)

    def create_user(self, username, name, password=None, role=RoleChoices.MAGISTERIAL, court=None, **extra_fields):
        """
        Create and save an account.

        Args:
            username: Login name (alphanumeric, unique ignoring case)
            name: Display name
            password: Raw password (will be hashed)
            role: One of RoleChoices
            court: Court the account is scoped to (ignored for admins)
            **extra_fields: Additional fields to set on the user

        Returns:
            UserAccount: The created account
        """
        if not username:
            raise ValueError('Username is required')
        if not name:
            raise ValueError('Name is required')
        if role not in RoleChoices.values:
            raise ValueError(f'Invalid role: {role}')

        user = self.model(
            username=username,
            name=name,
            role=role,
            court=None if role == RoleChoices.ADMIN else court,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, name, password=None, **extra_fields):
        """
        Create an admin account.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(
            username=username,
            name=name,
            password=password,
            role=RoleChoices.ADMIN,
            **extra_fields
        )


class UserAccount(SoftDeleteMixin, AbstractBaseUser):
    """Account with a role and an optional court binding."""
    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[MinLengthValidator(3), username_validator],
        help_text="Alphanumeric, at least 3 characters, unique ignoring case"
    )
    name = models.CharField(max_length=100)
    role = models.CharField(
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.MAGISTERIAL,
        db_index=True
    )
    court = models.ForeignKey(
        'courts.Court',
        on_delete=models.PROTECT,
        related_name='users',
        null=True,
        blank=True,
        help_text="Court this account is scoped to (empty for admins)"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserAccountManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'user_accounts'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['username']
        constraints = [
            models.UniqueConstraint(Lower('username'), name='user_accounts_username_ci_unique'),
        ]

    def __str__(self):
        return f"{self.name} ({self.username})"

    def is_admin(self):
        return self.role == RoleChoices.ADMIN

    def is_circuit(self):
        return self.role == RoleChoices.CIRCUIT

    def is_magisterial(self):
        return self.role == RoleChoices.MAGISTERIAL

    def clean(self):
        super().clean()
        validate_court_for_role(self.role, self.court)
