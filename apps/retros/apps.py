from django.apps import AppConfig

class RetrosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.retros'
    label = 'retros'
