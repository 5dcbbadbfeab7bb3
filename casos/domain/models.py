from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone

from casos.domain.enums import EstadoCaso, TipoActualizacion, TipoCaso


class Caso(models.Model):
    numero_caso = models.CharField(max_length=40, unique=True)
    tipo_caso = models.CharField(max_length=16, choices=TipoCaso.choices)  # inmutable
    titulo = models.CharField(max_length=255)
    descripcion = models.TextField(blank=True, default="")
    estado = models.CharField(
        max_length=16, choices=EstadoCaso.choices, default=EstadoCaso.ABIERTO
    )

    # Cliente
    cliente_nombre = models.CharField(max_length=255)
    cliente_rfc = models.CharField(max_length=20, null=True, blank=True)

    # Información legal
    rubro = models.CharField(max_length=255, blank=True, default="")  # de quién es la demanda
    contra_quien = models.CharField(max_length=255, blank=True, default="")
    numero_expediente = models.CharField(max_length=120, blank=True, default="")
    juzgado_autoridad = models.CharField(max_length=255, blank=True, default="")
    ubicacion_autoridad = models.CharField(max_length=255, blank=True, default="")

    # Ownership
    creado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="casos_creados"
    )
    supervisor = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="casos_supervisados"
    )
    asignado_a = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="casos_asignados",
    )

    # Versionado: solo se incrementa vía UPDATE ... RETURNING (ver application)
    version_actual = models.PositiveIntegerField(default=0)

    fecha_creacion = models.DateTimeField(default=timezone.now)
    fecha_actualizacion = models.DateTimeField(default=timezone.now)
    activo = models.BooleanField(default=True)

    class Meta:
        app_label = "casos"
        db_table = "casos"
        ordering = ["-fecha_actualizacion", "-id"]
        indexes = [
            models.Index(fields=["tipo_caso", "estado"], name="casos_tipo_estado_idx"),
            models.Index(fields=["supervisor"], name="casos_supervisor_idx"),
        ]

    def __str__(self):
        return self.numero_caso


class SecuenciaCaso(models.Model):
    prefijo = models.CharField(max_length=8)
    periodo = models.CharField(max_length=8)
    ultimo = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "casos"
        db_table = "casos_secuencias"
        constraints = [
            models.UniqueConstraint(fields=["prefijo", "periodo"], name="uniq_secuencia_periodo")
        ]


class VersionCaso(models.Model):
    """Entrada del historial (append-only): VERSION formal o COMENTARIO."""

    caso = models.ForeignKey(Caso, on_delete=models.CASCADE, related_name="historial")
    version_numero = models.PositiveIntegerField()
    tipo_actualizacion = models.CharField(
        max_length=16, choices=TipoActualizacion.choices, default=TipoActualizacion.VERSION
    )
    estado_anterior = models.CharField(
        max_length=16, choices=EstadoCaso.choices, null=True, blank=True
    )
    estado_nuevo = models.CharField(
        max_length=16, choices=EstadoCaso.choices, null=True, blank=True
    )
    cambios_realizados = models.TextField(blank=True, default="")
    comentarios = models.TextField(null=True, blank=True)
    actualizado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="+"
    )
    fecha_actualizacion = models.DateTimeField(default=timezone.now)
    datos_snapshot = models.JSONField(null=True, blank=True)
    notificacion_enviada = models.BooleanField(default=False)

    class Meta:
        app_label = "casos"
        db_table = "caso_versiones"
        ordering = ["-fecha_actualizacion", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["caso", "version_numero"],
                condition=Q(tipo_actualizacion="VERSION"),
                name="uniq_version_por_caso",
            )
        ]
        indexes = [
            models.Index(fields=["caso", "tipo_actualizacion"], name="caso_versiones_tipo_idx")
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("caso_versiones es append-only")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.caso_id} v{self.version_numero} ({self.tipo_actualizacion})"


class ComentarioCaso(models.Model):
    caso = models.ForeignKey(Caso, on_delete=models.CASCADE, related_name="comentarios")
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="+"
    )
    comentario = models.TextField()
    fecha_comentario = models.DateTimeField(default=timezone.now)

    class Meta:
        app_label = "casos"
        db_table = "caso_comentarios"
        ordering = ["-fecha_comentario", "-id"]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("caso_comentarios es append-only")
        super().save(*args, **kwargs)
