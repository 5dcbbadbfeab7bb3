# notifications infra tasks
# Jobs RQ. Se encolan con django_rq.get_queue(settings.NOTIFICATIONS_QUEUE).enqueue(fn, ...)
import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

from notifications.infrastructure.models import Notificacion

logger = logging.getLogger(__name__)


def send_email_notification(event_payload: dict) -> None:
    """Envía un correo a partir del payload del evento.

    payload: {"to", "subject", "template", "data", "notificacion_id"?}
    Propaga el error para que RQ aplique su política de reintentos.
    """
    to = event_payload["to"]
    template = event_payload["template"]
    body = render_to_string(
        f"notifications/email/{template}.txt", event_payload.get("data") or {}
    )
    try:
        send_mail(
            subject=event_payload["subject"],
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[to],
            fail_silently=False,
        )
    except Exception:
        logger.warning("Fallo enviando correo a %s (%s)", to, template, exc_info=True)
        raise

    notificacion_id = event_payload.get("notificacion_id")
    if notificacion_id:
        Notificacion.objects.filter(id=notificacion_id).update(email_enviado=True)
    logger.info("[EMAIL] To: %s, Subject: %s", to, event_payload["subject"])
