from django.apps import AppConfig


class SecurityConfig(AppConfig):
    name = "security"
    verbose_name = "Seguridad"

    def ready(self):
        from security.infrastructure import auth_signals  # noqa: F401
