from casos.application.selectors.casos import get_case_for
from common.domain.errors import NotFound
from documentos.infrastructure.models import Documento


def list_documents(caso):
    return Documento.objects.filter(caso=caso).select_related("subido_por")


def get_document_for(user, documento_id: int, capability: str = "can_view") -> Documento:
    doc = Documento.objects.select_related("subido_por").filter(id=documento_id).first()
    if not doc:
        raise NotFound("Documento no encontrado", code="DOCUMENTO_NOT_FOUND")
    get_case_for(user, doc.caso_id, capability)
    return doc
