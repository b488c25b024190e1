from django.apps import AppConfig


class ContractsConfig(AppConfig):
    name = 'apps.contracts'
    label = 'contracts'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        from .handlers import register_handlers

        register_handlers()
