from django.apps import AppConfig


class CourtsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'judiciary.courts'
    label = 'courts'
    verbose_name = 'Courts'
