import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("casos", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Documento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nombre_archivo", models.CharField(max_length=255)),
                ("tipo_documento", models.CharField(blank=True, default="", max_length=120)),
                ("tamano", models.PositiveBigIntegerField(default=0)),
                ("s3_key", models.CharField(max_length=512, unique=True)),
                ("fecha_subida", models.DateTimeField(default=django.utils.timezone.now)),
                ("notas", models.TextField(blank=True, default="")),
                ("caso", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="documentos", to="casos.caso")),
                ("subido_por", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "documentos",
                "ordering": ["-fecha_subida", "-id"],
            },
        ),
    ]
