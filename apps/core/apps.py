from django.apps import AppConfig

class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'  # pełna ścieżka
    label = 'core'
    verbose_name = 'Sojournii core'
