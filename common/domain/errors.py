"""
Taxonomía de errores de dominio.

Los casos de uso lanzan estas excepciones; la capa API las traduce a
``{"code": "<status>.<KIND>", "detail": mensaje}`` (ver
``common.api.exception_handler``). Ninguna debe tumbar el proceso.
"""


class CasosError(Exception):
    status_code = 400
    code = "ERROR"

    def __init__(self, detail: str | None = None, *, code: str | None = None):
        self.detail = detail or self.default_detail()
        if code:
            self.code = code
        super().__init__(self.detail)

    def default_detail(self) -> str:
        return "Error de dominio."

    def as_payload(self) -> dict:
        return {"code": f"{self.status_code}.{self.code}", "detail": self.detail}


class NotFound(CasosError):
    status_code = 404
    code = "NOT_FOUND"

    def default_detail(self) -> str:
        return "Recurso no encontrado."


class PermissionDenied(CasosError):
    status_code = 403
    code = "PERMISSION_DENIED"

    def default_detail(self) -> str:
        return "No tienes permisos para esta operación."


class InvalidTransition(CasosError):
    status_code = 409
    code = "INVALID_TRANSITION"

    def default_detail(self) -> str:
        return "Transición de estado no permitida."


class NoOpUpdate(InvalidTransition):
    code = "NO_OP_UPDATE"

    def default_detail(self) -> str:
        return "La actualización no contiene cambios."


class ValidationError(CasosError):
    status_code = 400
    code = "VALIDATION"

    def default_detail(self) -> str:
        return "Datos inválidos."


class ConflictError(CasosError):
    status_code = 409
    code = "CONFLICT"

    def default_detail(self) -> str:
        return "El recurso ya existe."


class AuthenticationFailed(CasosError):
    status_code = 401
    code = "AUTHENTICATION_FAILED"

    def default_detail(self) -> str:
        return "Credenciales inválidas."


class StorageError(CasosError):
    status_code = 502
    code = "STORAGE_ERROR"

    def default_detail(self) -> str:
        return "El almacenamiento de objetos no respondió."
