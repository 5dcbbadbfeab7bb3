import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import transaction

from almacenamiento.application.selectors.almacenamiento import get_file, get_folder
from almacenamiento.infrastructure.models import ArchivoS3, CarpetaS3
from almacenamiento.infrastructure.storage import build_key
from common.domain.errors import ConflictError, ValidationError
from documentos.infrastructure import storage

logger = logging.getLogger(__name__)


@dataclass
class CreateFolderInput:
    nombre: str
    carpeta_padre_id: int | None = None


@dataclass
class UploadFileInput:
    archivo: object  # UploadedFile
    carpeta_id: int | None = None


@transaction.atomic
def create_folder(inp: CreateFolderInput, actor) -> CarpetaS3:
    nombre = inp.nombre.strip()
    if not nombre or "/" in nombre or nombre in (".", ".."):
        raise ValidationError("Nombre de carpeta inválido", code="CARPETA_NOMBRE_INVALIDO")

    padre = get_folder(inp.carpeta_padre_id) if inp.carpeta_padre_id else None
    ruta = f"{padre.ruta_completa}/{nombre}" if padre else f"/{nombre}"
    if CarpetaS3.objects.filter(ruta_completa=ruta).exists():
        raise ConflictError(f"La carpeta {ruta} ya existe", code="CARPETA_EXISTS")

    carpeta = CarpetaS3.objects.create(
        nombre=nombre, ruta_completa=ruta, carpeta_padre=padre, creado_por=actor
    )
    logger.info("Carpeta creada: %s por %s", ruta, actor.email)
    return carpeta


def upload_file(inp: UploadFileInput, actor) -> ArchivoS3:
    carpeta = get_folder(inp.carpeta_id) if inp.carpeta_id else None

    archivo = inp.archivo
    if archivo.size > settings.DOCUMENTOS_MAX_BYTES:
        raise ValidationError(
            f"El archivo excede el máximo de {settings.DOCUMENTOS_MAX_BYTES} bytes",
            code="ARCHIVO_DEMASIADO_GRANDE",
        )

    key = storage.put_object(
        build_key(carpeta.ruta_completa if carpeta else None, archivo.name), archivo
    )
    try:
        with transaction.atomic():
            registro = ArchivoS3.objects.create(
                carpeta=carpeta,
                nombre_archivo=archivo.name,
                s3_key=key,
                tipo_archivo=getattr(archivo, "content_type", "") or "",
                tamano_bytes=archivo.size,
                subido_por=actor,
                metadata={"originalName": archivo.name,
                          "uploadedBy": actor.nombre_completo},
            )
    except Exception:
        storage.delete_object(key)
        raise

    logger.info("Archivo subido: %s (%s) por %s", registro.nombre_archivo, key, actor.email)
    return registro


def file_download(*, archivo_id: int) -> dict:
    archivo = get_file(archivo_id)
    return {
        "url": storage.presigned_url(archivo.s3_key),
        "filename": archivo.nombre_archivo,
        "expires_in": getattr(settings, "AWS_QUERYSTRING_EXPIRE", 3600),
    }


@transaction.atomic
def delete_file(*, archivo_id: int, actor) -> None:
    archivo = get_file(archivo_id)
    key = archivo.s3_key
    archivo.delete()
    transaction.on_commit(lambda: storage.delete_object(key))
    logger.info("Archivo eliminado: %s por %s", archivo.nombre_archivo, actor.email)
