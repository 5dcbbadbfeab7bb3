import django.utils.timezone
from django.db import migrations, models

import security.infrastructure.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Usuario",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("nombre_completo", models.CharField(max_length=200)),
                ("role", models.CharField(blank=True, choices=[("ADMIN", "Administrador"), ("CONTABLE", "Contable"), ("JURIDICO", "Jurídico")], max_length=16, null=True)),
                ("activo", models.BooleanField(default=False)),
                ("estado_registro", models.CharField(choices=[("PENDIENTE", "Pendiente"), ("ACTIVO", "Activo"), ("INACTIVO", "Inactivo")], default="PENDIENTE", max_length=16)),
                ("email_verificado", models.BooleanField(default=False)),
                ("puede_gestionar_s3", models.BooleanField(default=False)),
                ("atlassian_id", models.CharField(blank=True, max_length=120, null=True)),
                ("github_username", models.CharField(blank=True, max_length=120, null=True)),
                ("is_staff", models.BooleanField(default=False)),
                ("fecha_creacion", models.DateTimeField(default=django.utils.timezone.now)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "db_table": "users",
                "ordering": ["-fecha_creacion"],
            },
            managers=[
                ("objects", security.infrastructure.models.UsuarioManager()),
            ],
        ),
    ]
