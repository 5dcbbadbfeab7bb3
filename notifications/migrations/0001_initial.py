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
            name="Notificacion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tipo", models.CharField(choices=[("CASO_CREADO", "Caso creado"), ("NUEVA_VERSION", "Nueva versión"), ("NUEVO_COMENTARIO", "Nuevo comentario"), ("CASO_ASIGNADO", "Caso asignado"), ("NUEVO_REGISTRO", "Nuevo registro"), ("CUENTA_APROBADA", "Cuenta aprobada")], max_length=32)),
                ("mensaje", models.TextField()),
                ("leida", models.BooleanField(default=False)),
                ("email_enviado", models.BooleanField(default=False)),
                ("fecha_creacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("caso", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="notificaciones", to="casos.caso")),
                ("usuario", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notificaciones", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "notificaciones",
                "ordering": ["-fecha_creacion", "-id"],
                "indexes": [
                    models.Index(fields=["usuario", "leida"], name="notif_usuario_leida_idx"),
                ],
            },
        ),
    ]
