from django.apps import AppConfig


class PersonasConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.personas'
    verbose_name = 'Personas y pasaportes'
