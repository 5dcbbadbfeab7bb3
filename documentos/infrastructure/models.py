from django.conf import settings
from django.db import models
from django.utils import timezone


class Documento(models.Model):
    caso = models.ForeignKey("casos.Caso", on_delete=models.CASCADE, related_name="documentos")
    nombre_archivo = models.CharField(max_length=255)
    tipo_documento = models.CharField(max_length=120, blank=True, default="")  # MIME
    tamano = models.PositiveBigIntegerField(default=0)  # bytes
    s3_key = models.CharField(max_length=512, unique=True)
    subido_por = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="+"
    )
    fecha_subida = models.DateTimeField(default=timezone.now)
    notas = models.TextField(blank=True, default="")

    class Meta:
        app_label = "documentos"
        db_table = "documentos"
        ordering = ["-fecha_subida", "-id"]

    def __str__(self):
        return self.nombre_archivo
