"""
Despachador de notificaciones.

``notify`` inserta las filas de ``notificaciones`` dentro de la transacción
del llamador (commit o rollback junto con la escritura principal) y agenda
un correo por destinatario para *después* del commit. El correo es
best-effort: cualquier fallo se registra y se descarta, nunca revierte ni
falla la operación que lo originó.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Set

import django_rq
from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from rq import Retry

from notifications.infrastructure.models import Notificacion
from notifications.infrastructure.tasks import send_email_notification
from security.domain.enums import Role

logger = logging.getLogger(__name__)

EMAIL_RETRY = Retry(max=3, interval=[10, 30, 60])


def admin_pool_ids() -> Set[int]:
    User = get_user_model()
    return set(
        User.objects.filter(role=Role.ADMIN, activo=True).values_list("id", flat=True)
    )


def notify(
    recipient_ids: Iterable[int],
    caso_id: Optional[int],
    tipo: str,
    mensaje: str,
    *,
    email_subject: Optional[str] = None,
    email_template: Optional[str] = None,
    email_data: Optional[Dict[str, Any]] = None,
) -> List[Notificacion]:
    recipients = sorted(set(recipient_ids))
    if not recipients:
        return []

    rows = Notificacion.objects.bulk_create(
        [
            Notificacion(usuario_id=uid, caso_id=caso_id, tipo=tipo, mensaje=mensaje)
            for uid in recipients
        ]
    )

    if email_template:
        User = get_user_model()
        emails = dict(User.objects.filter(id__in=recipients).values_list("id", "email"))
        for n in rows:
            to = emails.get(n.usuario_id)
            if not to:
                continue
            schedule_email(
                {
                    "to": to,
                    "subject": email_subject or mensaje,
                    "template": email_template,
                    "data": {**(email_data or {}), "mensaje": mensaje},
                    "notificacion_id": n.id,
                }
            )
    return rows


def schedule_email(payload: Dict[str, Any]) -> None:
    """Agenda el correo para después del commit de la transacción en curso."""
    transaction.on_commit(lambda: _dispatch(payload))


def send_email(to: str, subject: str, template: str, data: Dict[str, Any],
               notificacion_id: Optional[int] = None) -> None:
    """Envío en línea, best-effort (errores registrados y descartados)."""
    try:
        send_email_notification(
            {
                "to": to,
                "subject": subject,
                "template": template,
                "data": data,
                "notificacion_id": notificacion_id,
            }
        )
    except Exception:
        logger.warning("Correo descartado para %s", to, exc_info=True)


def _dispatch(payload: Dict[str, Any]) -> None:
    if not settings.NOTIFICATIONS_EMAIL_ASYNC:
        send_email(**payload)
        return
    try:
        queue = django_rq.get_queue(settings.NOTIFICATIONS_QUEUE)
        queue.enqueue(send_email_notification, payload, retry=EMAIL_RETRY)
    except Exception:
        # Redis caído o similar: el correo se pierde, la escritura ya es durable
        logger.warning("No se pudo encolar correo para %s", payload.get("to"), exc_info=True)
