from django.apps import AppConfig


class SolicitationsConfig(AppConfig):
    name = 'apps.solicitations'
    label = 'solicitations'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from .handlers import register_handlers

        register_handlers()
