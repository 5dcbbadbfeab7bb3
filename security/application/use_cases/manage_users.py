import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from common.domain.errors import NotFound, ValidationError
from notifications.application.dispatcher import notify
from notifications.domain.enums import TipoNotificacion
from security.domain.enums import EstadoRegistro, Role

logger = logging.getLogger(__name__)


def _get_user_for_update(user_id: int):
    User = get_user_model()
    user = User.objects.select_for_update().filter(id=user_id).first()
    if not user:
        raise NotFound("Usuario no encontrado", code="USER_NOT_FOUND")
    return user


def _ensure_role(role: str) -> str:
    if role not in Role.values:
        raise ValidationError(f"Rol inválido: {role}", code="ROLE_INVALID")
    return role


@transaction.atomic
def approve_user(*, user_id: int, role: str, admin):
    """PENDIENTE -> ACTIVO con rol asignado."""
    role = _ensure_role(role)
    user = _get_user_for_update(user_id)
    if user.estado_registro != EstadoRegistro.PENDIENTE:
        raise ValidationError("El usuario no está pendiente de aprobación",
                              code="NOT_PENDING")

    user.role = role
    user.activo = True
    user.estado_registro = EstadoRegistro.ACTIVO
    user.save(update_fields=["role", "activo", "estado_registro"])

    notify(
        [user.id],
        None,
        TipoNotificacion.CUENTA_APROBADA,
        f"Tu cuenta fue aprobada con el rol {role}",
        email_subject="Cuenta aprobada",
        email_template="cuenta-aprobada",
        email_data={"nombre": user.nombre_completo, "role": role},
    )
    logger.info("Usuario aprobado: %s rol=%s por %s", user.email, role, admin.email)
    return user


@transaction.atomic
def change_user_role(*, user_id: int, role: str, admin):
    role = _ensure_role(role)
    user = _get_user_for_update(user_id)
    if user.id == admin.id and role != Role.ADMIN:
        raise ValidationError("No puedes quitarte el rol de administrador",
                              code="SELF_DEMOTION")
    user.role = role
    user.save(update_fields=["role"])
    logger.info("Rol cambiado: %s -> %s por %s", user.email, role, admin.email)
    return user


@transaction.atomic
def toggle_user_status(*, user_id: int, admin):
    """Activa/desactiva; nunca borra. Un PENDIENTE se aprueba con approve_user."""
    user = _get_user_for_update(user_id)
    if user.id == admin.id:
        raise ValidationError("No puedes desactivar tu propia cuenta", code="SELF_TOGGLE")
    if user.estado_registro == EstadoRegistro.PENDIENTE:
        raise ValidationError("El usuario está pendiente de aprobación", code="PENDING")

    user.activo = not user.activo
    user.estado_registro = EstadoRegistro.ACTIVO if user.activo else EstadoRegistro.INACTIVO
    user.save(update_fields=["activo", "estado_registro"])
    logger.info("Usuario %s activo=%s por %s", user.email, user.activo, admin.email)
    return user


@transaction.atomic
def set_storage_access(*, user_id: int, permitido: bool, admin):
    user = _get_user_for_update(user_id)
    user.puede_gestionar_s3 = permitido
    user.save(update_fields=["puede_gestionar_s3"])
    logger.info("Acceso a almacenamiento de %s=%s por %s", user.email, permitido, admin.email)
    return user
