import logging

from django.db import transaction
from django.utils import timezone

from casos.application.selectors.casos import get_case_for

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_case(*, caso_id: int, actor) -> None:
    """Baja lógica (activo=False); el historial se conserva."""
    caso, _ = get_case_for(actor, caso_id, "can_delete", for_update=True)
    caso.activo = False
    caso.fecha_actualizacion = timezone.now()
    caso.save(update_fields=["activo", "fecha_actualizacion"])
    logger.info("Caso desactivado: %s por %s", caso.numero_caso, actor.email)
