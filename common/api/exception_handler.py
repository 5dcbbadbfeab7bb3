import logging

from django.db import IntegrityError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.domain.errors import CasosError, ConflictError

logger = logging.getLogger(__name__)


def casos_exception_handler(exc, context):
    """
    Traduce errores de dominio a respuestas JSON estables; el resto lo
    resuelve el handler por defecto de DRF.
    """
    if isinstance(exc, IntegrityError):
        logger.warning("Violación de integridad: %s", exc)
        exc = ConflictError("El recurso ya existe o viola una restricción.")

    if isinstance(exc, CasosError):
        return Response(exc.as_payload(), status=exc.status_code)

    return exception_handler(exc, context)
