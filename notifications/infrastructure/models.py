from django.conf import settings
from django.db import models
from django.utils import timezone

from notifications.domain.enums import TipoNotificacion


class Notificacion(models.Model):
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notificaciones",
    )
    caso = models.ForeignKey(
        "casos.Caso",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="notificaciones",
    )
    tipo = models.CharField(max_length=32, choices=TipoNotificacion.choices)
    mensaje = models.TextField()
    leida = models.BooleanField(default=False)
    email_enviado = models.BooleanField(default=False)
    fecha_creacion = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "notifications"
        db_table = "notificaciones"
        ordering = ["-fecha_creacion", "-id"]
        indexes = [
            models.Index(fields=["usuario", "leida"], name="notif_usuario_leida_idx")
        ]

    def __str__(self):
        return f"{self.tipo} -> {self.usuario_id}"
