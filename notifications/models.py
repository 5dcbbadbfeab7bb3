from notifications.infrastructure.models import Notificacion  # noqa: F401
