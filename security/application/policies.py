from rest_framework.permissions import BasePermission

from security.domain.enums import Role


class IsActiveUser(BasePermission):
    """Permiso base: usuario autenticado, aprobado y activo."""

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_active and user.role)


class IsAdmin(IsActiveUser):
    message = "Solo administradores."

    def has_permission(self, request, view):
        return super().has_permission(request, view) and request.user.role == Role.ADMIN


class CanManageStorage(IsActiveUser):
    """Explorador de almacenamiento: administradores o usuarios con puede_gestionar_s3."""

    message = "No tienes acceso al almacenamiento de archivos."

    def has_permission(self, request, view):
        if not super().has_permission(request, view):
            return False
        return request.user.role == Role.ADMIN or bool(request.user.puede_gestionar_s3)
