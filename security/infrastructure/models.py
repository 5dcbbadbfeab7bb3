from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils import timezone

from security.domain.enums import EstadoRegistro, Role


class UsuarioManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, email, password=None, **extra):
        if not email:
            raise ValueError("email requerido")
        user = self.model(email=self.normalize_email(email), **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra):
        extra.setdefault("nombre_completo", email)
        extra.update(
            role=Role.ADMIN,
            activo=True,
            estado_registro=EstadoRegistro.ACTIVO,
            is_staff=True,
            is_superuser=True,
        )
        return self.create_user(email, password, **extra)


class Usuario(AbstractBaseUser, PermissionsMixin):
    # NOTA: nunca se borra físicamente; se desactiva (activo=False / INACTIVO).
    email = models.EmailField(unique=True)
    nombre_completo = models.CharField(max_length=200)
    role = models.CharField(
        max_length=16, choices=Role.choices, null=True, blank=True
    )  # NULL mientras el registro está PENDIENTE
    activo = models.BooleanField(default=False)
    estado_registro = models.CharField(
        max_length=16, choices=EstadoRegistro.choices, default=EstadoRegistro.PENDIENTE
    )
    email_verificado = models.BooleanField(default=False)
    puede_gestionar_s3 = models.BooleanField(default=False)
    atlassian_id = models.CharField(max_length=120, null=True, blank=True)
    github_username = models.CharField(max_length=120, null=True, blank=True)
    is_staff = models.BooleanField(default=False)
    fecha_creacion = models.DateTimeField(default=timezone.now)

    objects = UsuarioManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["nombre_completo"]

    class Meta:
        app_label = "security"
        db_table = "users"
        ordering = ["-fecha_creacion"]

    def __str__(self):
        return self.email

    @property
    def is_active(self):
        return self.activo and self.estado_registro == EstadoRegistro.ACTIVO

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    def get_full_name(self):
        return self.nombre_completo

    def get_short_name(self):
        return self.nombre_completo.split(" ")[0] if self.nombre_completo else self.email
