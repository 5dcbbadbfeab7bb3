import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from casos.application.selectors.casos import get_case_for
from common.domain.errors import ValidationError
from notifications.application.dispatcher import notify
from notifications.domain.enums import TipoNotificacion

logger = logging.getLogger(__name__)


@transaction.atomic
def reassign_supervisor(*, caso_id: int, supervisor_id: int, actor):
    caso, _ = get_case_for(actor, caso_id, "is_admin", for_update=True)

    User = get_user_model()
    nuevo = User.objects.filter(id=supervisor_id).first()
    if not nuevo or not nuevo.is_active or not nuevo.role:
        raise ValidationError("El supervisor debe ser un usuario activo",
                              code="SUPERVISOR_INVALIDO")
    if nuevo.id == caso.supervisor_id:
        raise ValidationError("El usuario ya es supervisor del caso",
                              code="SUPERVISOR_SIN_CAMBIO")

    anterior = caso.supervisor_id
    caso.supervisor = nuevo
    caso.fecha_actualizacion = timezone.now()
    caso.save(update_fields=["supervisor", "fecha_actualizacion"])

    if nuevo.id != actor.id:
        notify(
            [nuevo.id],
            caso.id,
            TipoNotificacion.CASO_ASIGNADO,
            f"Se te asignó como supervisor del caso {caso.numero_caso}",
            email_subject=f"Caso asignado: {caso.numero_caso}",
            email_template="caso-asignado",
            email_data={"numero_caso": caso.numero_caso, "titulo": caso.titulo},
        )
    logger.info("Caso %s: supervisor %s -> %s por %s",
                caso.numero_caso, anterior, nuevo.id, actor.email)
    return caso
