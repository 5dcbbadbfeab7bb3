from django.conf import settings
from django.db import models
from django.utils import timezone


class CarpetaS3(models.Model):
    """Carpeta lógica del explorador; en el bucket es sólo un prefijo de llave."""

    nombre = models.CharField(max_length=255)
    ruta_completa = models.CharField(max_length=1024, unique=True)  # "/a/b"
    carpeta_padre = models.ForeignKey(
        "self", null=True, blank=True, on_delete=models.PROTECT, related_name="subcarpetas"
    )
    creado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="+"
    )
    fecha_creacion = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "almacenamiento"
        db_table = "s3_carpetas"
        ordering = ["ruta_completa"]

    def __str__(self):
        return self.ruta_completa


class ArchivoS3(models.Model):
    carpeta = models.ForeignKey(
        CarpetaS3, null=True, blank=True, on_delete=models.PROTECT, related_name="archivos"
    )
    nombre_archivo = models.CharField(max_length=255)
    s3_key = models.CharField(max_length=1024, unique=True)
    tipo_archivo = models.CharField(max_length=120, blank=True, default="")  # MIME
    tamano_bytes = models.PositiveBigIntegerField(default=0)
    subido_por = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="+"
    )
    fecha_subida = models.DateTimeField(default=timezone.now)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        app_label = "almacenamiento"
        db_table = "s3_archivos"
        ordering = ["-fecha_subida", "-id"]

    def __str__(self):
        return self.nombre_archivo


class BucketS3(models.Model):
    """Registro local de los buckets creados desde la API."""

    nombre = models.CharField(max_length=63, unique=True)
    region = models.CharField(max_length=32, default="us-east-1")
    descripcion = models.TextField(blank=True, default="")
    creado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="+"
    )
    activo = models.BooleanField(default=True)
    fecha_creacion = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "almacenamiento"
        db_table = "s3_buckets"
        ordering = ["-fecha_creacion", "-id"]

    def __str__(self):
        return self.nombre
