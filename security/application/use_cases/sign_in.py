from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.signals import user_logged_in

from common.domain.errors import AuthenticationFailed, PermissionDenied
from security.domain.enums import EstadoRegistro


def sign_in(*, email: str, password: str, request=None):
    """
    Valida credenciales y estado de registro. Devuelve el usuario listo
    para emitir tokens; el último acceso se registra vía ``user_logged_in``.
    """
    User = get_user_model()
    user_obj = User.objects.filter(email__iexact=email).first()
    if not user_obj:
        raise AuthenticationFailed("Credenciales inválidas")

    # Se revisa el estado antes que la contraseña: authenticate() descarta inactivos.
    if user_obj.estado_registro == EstadoRegistro.PENDIENTE:
        raise PermissionDenied(
            "Tu cuenta está pendiente de aprobación por un administrador",
            code="REGISTRO_PENDIENTE",
        )
    if user_obj.estado_registro == EstadoRegistro.INACTIVO or not user_obj.activo:
        raise PermissionDenied(
            "Tu cuenta ha sido desactivada. Contacta al administrador.",
            code="CUENTA_INACTIVA",
        )

    user = authenticate(request, email=user_obj.email, password=password)
    if not user:
        raise AuthenticationFailed("Credenciales inválidas")

    user_logged_in.send(sender=user.__class__, request=request, user=user)
    return user
