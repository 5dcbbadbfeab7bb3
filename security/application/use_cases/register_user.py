import logging
from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.db import transaction

from common.domain.errors import ConflictError, ValidationError
from notifications.application.dispatcher import admin_pool_ids, notify
from notifications.domain.enums import TipoNotificacion
from security.domain.enums import EstadoRegistro

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserInput:
    email: str
    nombre_completo: str
    password: str


@transaction.atomic
def register_user(inp: RegisterUserInput):
    """
    Registro público: el usuario queda PENDIENTE, sin rol e inactivo hasta
    que un administrador lo apruebe.
    """
    User = get_user_model()
    email = User.objects.normalize_email(inp.email).lower()

    existing = User.objects.filter(email__iexact=email).only("estado_registro").first()
    if existing:
        if existing.estado_registro == EstadoRegistro.PENDIENTE:
            raise ValidationError(
                "Tu registro está pendiente de aprobación por un administrador",
                code="REGISTRO_PENDIENTE",
            )
        raise ConflictError("Este email ya está registrado", code="EMAIL_DUPLICADO")

    user = User.objects.create_user(
        email=email,
        password=inp.password,
        nombre_completo=inp.nombre_completo,
        role=None,
        activo=False,
        estado_registro=EstadoRegistro.PENDIENTE,
    )

    notify(
        admin_pool_ids(),
        None,
        TipoNotificacion.NUEVO_REGISTRO,
        f"Nuevo usuario registrado: {user.email} - {user.nombre_completo}",
        email_subject="Nuevo usuario pendiente de aprobación",
        email_template="nuevo-registro",
        email_data={"email": user.email, "nombre": user.nombre_completo},
    )

    logger.info("Nuevo registro pendiente: %s", user.email)
    return user
