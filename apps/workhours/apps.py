from django.apps import AppConfig

class WorkhoursConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.workhours'
    label = 'workhours'
