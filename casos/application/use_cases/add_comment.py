import logging
from dataclasses import dataclass

from django.db import transaction

from casos.application.recipients import ledger_recipients
from casos.application.selectors.casos import get_case_for
from casos.domain.enums import TipoActualizacion
from casos.domain.models import ComentarioCaso, VersionCaso
from common.domain.errors import ValidationError
from notifications.application.dispatcher import notify
from notifications.domain.enums import TipoNotificacion

logger = logging.getLogger(__name__)


@dataclass
class AddCommentCommand:
    caso_id: int
    texto: str


def _texto(cmd: AddCommentCommand) -> str:
    texto = (cmd.texto or "").strip()
    if not texto:
        raise ValidationError("El comentario no puede estar vacío", code="COMENTARIO_VACIO")
    return texto


def _email_data(caso, texto: str, actor) -> dict:
    return {"numero_caso": caso.numero_caso, "comentario": texto,
            "actor": actor.nombre_completo}


@transaction.atomic
def add_ledger_comment(cmd: AddCommentCommand, actor) -> VersionCaso:
    """
    Comentario en el historial: anota la versión vigente sin incrementarla.
    """
    texto = _texto(cmd)
    caso, _ = get_case_for(actor, cmd.caso_id, "can_add_comment")

    recipients = ledger_recipients(caso, actor)
    row = VersionCaso.objects.create(
        caso=caso,
        version_numero=caso.version_actual,
        tipo_actualizacion=TipoActualizacion.COMENTARIO,
        cambios_realizados="Comentario",
        comentarios=texto,
        actualizado_por=actor,
        notificacion_enviada=bool(recipients),
    )
    notify(
        recipients,
        caso.id,
        TipoNotificacion.NUEVO_COMENTARIO,
        f"{actor.nombre_completo} comentó en el caso {caso.numero_caso}",
        email_subject=f"Nuevo comentario en el caso {caso.numero_caso}",
        email_template="nuevo-comentario",
        email_data=_email_data(caso, texto, actor),
    )
    logger.info("Comentario en historial de %s por %s", caso.numero_caso, actor.email)
    return row


@transaction.atomic
def add_case_comment(cmd: AddCommentCommand, actor) -> ComentarioCaso:
    """Comentario de conversación; solo avisa al supervisor."""
    texto = _texto(cmd)
    caso, _ = get_case_for(actor, cmd.caso_id, "can_add_comment")

    comentario = ComentarioCaso.objects.create(caso=caso, usuario=actor, comentario=texto)
    if caso.supervisor_id != actor.id:
        notify(
            [caso.supervisor_id],
            caso.id,
            TipoNotificacion.NUEVO_COMENTARIO,
            f"{actor.nombre_completo} comentó en el caso {caso.numero_caso}",
            email_subject=f"Nuevo comentario en el caso {caso.numero_caso}",
            email_template="nuevo-comentario",
            email_data=_email_data(caso, texto, actor),
        )
    logger.info("Comentario en %s por %s", caso.numero_caso, actor.email)
    return comentario
