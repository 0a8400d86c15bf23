# workspace/apps.py
from django.apps import AppConfig


class WorkspaceConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'workspace'

    def ready(self):
        import workspace.signals  # noqa: F401
