from django.contrib import admin

from common.admin import ReadOnlyAdmin
from notifications.infrastructure.models import Notificacion


@admin.register(Notificacion)
class NotificacionAdmin(ReadOnlyAdmin):
    list_display = ("usuario", "caso", "tipo", "leida", "email_enviado", "fecha_creacion")
    search_fields = ("usuario__email", "mensaje")
    list_filter = ("tipo", "leida", "email_enviado")
