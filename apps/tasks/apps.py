from django.apps import AppConfig

class TasksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tasks'  # pełna ścieżka z 'apps.'
    label = 'tasks'
