import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import transaction

from casos.application.selectors.casos import get_case_for
from common.domain.errors import ValidationError
from documentos.application.selectors.documentos import get_document_for
from documentos.infrastructure import storage
from documentos.infrastructure.models import Documento

logger = logging.getLogger(__name__)


@dataclass
class UploadDocumentInput:
    caso_id: int
    archivo: object  # UploadedFile
    notas: str = ""


def upload_document(inp: UploadDocumentInput, actor) -> Documento:
    caso, _ = get_case_for(actor, inp.caso_id, "can_upload_documents")

    archivo = inp.archivo
    if archivo.size > settings.DOCUMENTOS_MAX_BYTES:
        raise ValidationError(
            f"El archivo excede el máximo de {settings.DOCUMENTOS_MAX_BYTES} bytes",
            code="ARCHIVO_DEMASIADO_GRANDE",
        )

    key = storage.put_object(storage.build_key(caso.id, archivo.name), archivo)
    try:
        with transaction.atomic():
            doc = Documento.objects.create(
                caso=caso,
                nombre_archivo=archivo.name,
                tipo_documento=getattr(archivo, "content_type", "") or "",
                tamano=archivo.size,
                s3_key=key,
                subido_por=actor,
                notas=inp.notas,
            )
    except Exception:
        storage.delete_object(key)
        raise

    logger.info("Documento subido: %s al caso %s por %s", doc.nombre_archivo,
                caso.numero_caso, actor.email)
    return doc


def document_download(*, documento_id: int, actor) -> dict:
    doc = get_document_for(actor, documento_id, "can_view")
    return {
        "url": storage.presigned_url(doc.s3_key),
        "filename": doc.nombre_archivo,
        "expires_in": getattr(settings, "AWS_QUERYSTRING_EXPIRE", 3600),
    }


@transaction.atomic
def delete_document(*, documento_id: int, actor) -> None:
    doc = get_document_for(actor, documento_id, "can_delete_documents")
    key = doc.s3_key
    doc.delete()
    transaction.on_commit(lambda: storage.delete_object(key))
    logger.info("Documento eliminado: %s por %s", doc.nombre_archivo, actor.email)
