from django.apps import AppConfig


class StaffConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'judiciary.staff'
    label = 'staff'
    verbose_name = 'Court Staff'
