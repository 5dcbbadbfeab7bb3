import logging
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from casos.application.numbering import next_case_number
from casos.domain.enums import EstadoCaso, TipoActualizacion, TipoCaso
from casos.domain.models import Caso, VersionCaso
from casos.domain.versioning import build_snapshot
from common.application.db import increment_and_fetch
from common.domain.errors import PermissionDenied, ValidationError
from notifications.application.dispatcher import admin_pool_ids, notify
from notifications.domain.enums import TipoNotificacion
from security.domain.enums import Role

logger = logging.getLogger(__name__)


@dataclass
class CreateCaseCommand:
    tipo_caso: str
    titulo: str
    cliente_nombre: str
    descripcion: str = ""
    cliente_rfc: Optional[str] = None
    rubro: str = ""
    contra_quien: str = ""
    numero_expediente: str = ""
    juzgado_autoridad: str = ""
    ubicacion_autoridad: str = ""
    asignado_a_id: Optional[int] = None


def ensure_assignable(user_id: Optional[int]) -> None:
    if user_id is None:
        return
    User = get_user_model()
    if not User.objects.filter(id=user_id, activo=True).exists():
        raise ValidationError("El usuario asignado no existe o está inactivo",
                              code="ASIGNADO_INVALIDO")


@transaction.atomic
def create_case(cmd: CreateCaseCommand, actor) -> Caso:
    """
    Alta de caso: el creador queda como supervisor y se escribe la versión 1
    (``None -> ABIERTO``) con su snapshot.
    """
    if cmd.tipo_caso not in TipoCaso.values:
        raise ValidationError(f"Tipo de caso inválido: {cmd.tipo_caso}")
    if actor.role != Role.ADMIN and actor.role != cmd.tipo_caso:
        raise PermissionDenied(
            f"Un usuario {actor.role} no puede crear casos {cmd.tipo_caso}",
            code="CATEGORIA_DISTINTA",
        )
    ensure_assignable(cmd.asignado_a_id)

    numero = next_case_number(cmd.tipo_caso)
    caso = Caso.objects.create(
        numero_caso=numero.value,
        tipo_caso=cmd.tipo_caso,
        titulo=cmd.titulo,
        descripcion=cmd.descripcion,
        estado=EstadoCaso.ABIERTO,
        cliente_nombre=cmd.cliente_nombre,
        cliente_rfc=cmd.cliente_rfc,
        rubro=cmd.rubro,
        contra_quien=cmd.contra_quien,
        numero_expediente=cmd.numero_expediente,
        juzgado_autoridad=cmd.juzgado_autoridad,
        ubicacion_autoridad=cmd.ubicacion_autoridad,
        asignado_a_id=cmd.asignado_a_id,
        creado_por=actor,
        supervisor=actor,
        version_actual=0,
    )
    caso.version_actual = increment_and_fetch(
        "casos", "version_actual", "id = %s", [caso.id]
    )

    recipients = admin_pool_ids() if actor.role != Role.ADMIN else set()
    recipients.discard(actor.id)

    VersionCaso.objects.create(
        caso=caso,
        version_numero=caso.version_actual,
        tipo_actualizacion=TipoActualizacion.VERSION,
        estado_anterior=None,
        estado_nuevo=EstadoCaso.ABIERTO,
        cambios_realizados="Caso creado",
        actualizado_por=actor,
        datos_snapshot=build_snapshot(caso),
        notificacion_enviada=bool(recipients),
    )

    notify(
        recipients,
        caso.id,
        TipoNotificacion.CASO_CREADO,
        f"Nuevo caso {caso.numero_caso}: {caso.titulo}",
        email_subject=f"Nuevo caso {caso.numero_caso}",
        email_template="caso-creado",
        email_data={
            "numero_caso": caso.numero_caso,
            "tipo_caso": caso.tipo_caso,
            "titulo": caso.titulo,
            "actor": actor.nombre_completo,
        },
    )
    logger.info("Caso creado: %s por %s", caso.numero_caso, actor.email)
    return caso
