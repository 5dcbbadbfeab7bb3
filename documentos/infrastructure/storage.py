"""
Acceso al almacenamiento de objetos (S3/MinIO en producción) a través de
``default_storage`` de Django; con ``USE_S3=True`` es ``S3Storage`` de
django-storages y ``url()`` devuelve una URL prefirmada.
"""
import logging
import uuid

from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)


def build_key(caso_id: int, nombre: str) -> str:
    return f"casos/{caso_id}/{uuid.uuid4()}-{get_valid_filename(nombre)}"


def put_object(key: str, fileobj) -> str:
    return default_storage.save(key, fileobj)


def presigned_url(key: str) -> str:
    return default_storage.url(key)


def delete_object(key: str) -> None:
    try:
        default_storage.delete(key)
    except Exception:
        # La fila ya no existe; un objeto huérfano no debe romper la operación
        logger.warning("No se pudo borrar el objeto %s", key, exc_info=True)
