import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

ESTADOS = [("ABIERTO", "Abierto"), ("EN_PROCESO", "En proceso"), ("CERRADO", "Cerrado")]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Caso",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("numero_caso", models.CharField(max_length=40, unique=True)),
                ("tipo_caso", models.CharField(choices=[("CONTABLE", "Contable"), ("JURIDICO", "Jurídico")], max_length=16)),
                ("titulo", models.CharField(max_length=255)),
                ("descripcion", models.TextField(blank=True, default="")),
                ("estado", models.CharField(choices=ESTADOS, default="ABIERTO", max_length=16)),
                ("cliente_nombre", models.CharField(max_length=255)),
                ("cliente_rfc", models.CharField(blank=True, max_length=20, null=True)),
                ("rubro", models.CharField(blank=True, default="", max_length=255)),
                ("contra_quien", models.CharField(blank=True, default="", max_length=255)),
                ("numero_expediente", models.CharField(blank=True, default="", max_length=120)),
                ("juzgado_autoridad", models.CharField(blank=True, default="", max_length=255)),
                ("ubicacion_autoridad", models.CharField(blank=True, default="", max_length=255)),
                ("version_actual", models.PositiveIntegerField(default=0)),
                ("fecha_creacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("fecha_actualizacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("activo", models.BooleanField(default=True)),
                ("asignado_a", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="casos_asignados", to=settings.AUTH_USER_MODEL)),
                ("creado_por", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="casos_creados", to=settings.AUTH_USER_MODEL)),
                ("supervisor", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="casos_supervisados", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "casos",
                "ordering": ["-fecha_actualizacion", "-id"],
                "indexes": [
                    models.Index(fields=["tipo_caso", "estado"], name="casos_tipo_estado_idx"),
                    models.Index(fields=["supervisor"], name="casos_supervisor_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="SecuenciaCaso",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("prefijo", models.CharField(max_length=8)),
                ("periodo", models.CharField(max_length=8)),
                ("ultimo", models.PositiveIntegerField(default=0)),
            ],
            options={
                "db_table": "casos_secuencias",
                "constraints": [
                    models.UniqueConstraint(fields=("prefijo", "periodo"), name="uniq_secuencia_periodo"),
                ],
            },
        ),
        migrations.CreateModel(
            name="VersionCaso",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("version_numero", models.PositiveIntegerField()),
                ("tipo_actualizacion", models.CharField(choices=[("VERSION", "Versión"), ("COMENTARIO", "Comentario")], default="VERSION", max_length=16)),
                ("estado_anterior", models.CharField(blank=True, choices=ESTADOS, max_length=16, null=True)),
                ("estado_nuevo", models.CharField(blank=True, choices=ESTADOS, max_length=16, null=True)),
                ("cambios_realizados", models.TextField(blank=True, default="")),
                ("comentarios", models.TextField(blank=True, null=True)),
                ("fecha_actualizacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("datos_snapshot", models.JSONField(blank=True, null=True)),
                ("notificacion_enviada", models.BooleanField(default=False)),
                ("actualizado_por", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("caso", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="historial", to="casos.caso")),
            ],
            options={
                "db_table": "caso_versiones",
                "ordering": ["-fecha_actualizacion", "-id"],
                "indexes": [
                    models.Index(fields=["caso", "tipo_actualizacion"], name="caso_versiones_tipo_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("tipo_actualizacion", "VERSION")), fields=("caso", "version_numero"), name="uniq_version_por_caso"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ComentarioCaso",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("comentario", models.TextField()),
                ("fecha_comentario", models.DateTimeField(default=django.utils.timezone.now)),
                ("caso", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comentarios", to="casos.caso")),
                ("usuario", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "caso_comentarios",
                "ordering": ["-fecha_comentario", "-id"],
            },
        ),
    ]
