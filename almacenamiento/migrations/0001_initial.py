import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CarpetaS3",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=255)),
                ("ruta_completa", models.CharField(max_length=1024, unique=True)),
                ("fecha_creacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("carpeta_padre", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="subcarpetas", to="almacenamiento.carpetas3")),
                ("creado_por", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "s3_carpetas",
                "ordering": ["ruta_completa"],
            },
        ),
        migrations.CreateModel(
            name="ArchivoS3",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre_archivo", models.CharField(max_length=255)),
                ("s3_key", models.CharField(max_length=1024, unique=True)),
                ("tipo_archivo", models.CharField(blank=True, default="", max_length=120)),
                ("tamano_bytes", models.PositiveBigIntegerField(default=0)),
                ("fecha_subida", models.DateTimeField(default=django.utils.timezone.now)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("carpeta", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="archivos", to="almacenamiento.carpetas3")),
                ("subido_por", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "s3_archivos",
                "ordering": ["-fecha_subida", "-id"],
            },
        ),
        migrations.CreateModel(
            name="BucketS3",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre", models.CharField(max_length=63, unique=True)),
                ("region", models.CharField(default="us-east-1", max_length=32)),
                ("descripcion", models.TextField(blank=True, default="")),
                ("activo", models.BooleanField(default=True)),
                ("fecha_creacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("creado_por", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "s3_buckets",
                "ordering": ["-fecha_creacion", "-id"],
            },
        ),
    ]
