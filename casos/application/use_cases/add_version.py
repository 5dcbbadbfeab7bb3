import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from casos.application.recipients import ledger_recipients
from casos.application.selectors.casos import get_active_case
from casos.application.use_cases.create_case import ensure_assignable
from casos.domain.enums import TipoActualizacion
from casos.domain.models import VersionCaso
from casos.domain.permissions import evaluate
from casos.domain.state_machine import validate_transition
from casos.domain.versioning import build_snapshot, describe_changes
from common.application.db import increment_and_fetch
from common.domain.errors import NotFound
from notifications.application.dispatcher import notify
from notifications.domain.enums import TipoNotificacion

logger = logging.getLogger(__name__)

# Campos que una versión puede modificar (tipo_caso y numero_caso son inmutables)
EDITABLE_FIELDS = (
    "titulo",
    "descripcion",
    "cliente_nombre",
    "cliente_rfc",
    "rubro",
    "contra_quien",
    "numero_expediente",
    "juzgado_autoridad",
    "ubicacion_autoridad",
    "asignado_a_id",
)


@dataclass
class AddVersionCommand:
    caso_id: int
    cambios_realizados: str = ""
    nuevo_estado: Optional[str] = None
    comentarios: Optional[str] = None
    campos: Dict[str, Any] = field(default_factory=dict)


@transaction.atomic
def add_version(cmd: AddVersionCommand, actor) -> VersionCaso:
    caso = get_active_case(cmd.caso_id, for_update=True)
    caps = evaluate(actor, caso)

    cambios = {
        k: v for k, v in cmd.campos.items()
        if k in EDITABLE_FIELDS and getattr(caso, k) != v
    }
    estado_anterior = caso.estado
    estado_nuevo = validate_transition(
        estado_anterior,
        cmd.nuevo_estado,
        caps,
        hay_cambios=bool(cambios),
        permitir_reapertura=settings.CASOS_PERMITIR_REAPERTURA,
    )
    if "asignado_a_id" in cambios:
        ensure_assignable(cambios["asignado_a_id"])

    version = increment_and_fetch(
        "casos", "version_actual", "id = %s AND activo = %s", [caso.id, True]
    )
    if version is None:
        raise NotFound("Caso no encontrado", code="CASO_NOT_FOUND")

    for k, v in cambios.items():
        setattr(caso, k, v)
    caso.estado = estado_nuevo
    caso.version_actual = version
    caso.fecha_actualizacion = timezone.now()
    # version_actual ya quedó escrito por el UPDATE atómico
    caso.save(update_fields=[*cambios, "estado", "fecha_actualizacion"])

    recipients = ledger_recipients(caso, actor)
    descripcion = cmd.cambios_realizados or describe_changes(
        estado_anterior, estado_nuevo, cambios
    )
    row = VersionCaso.objects.create(
        caso=caso,
        version_numero=version,
        tipo_actualizacion=TipoActualizacion.VERSION,
        estado_anterior=estado_anterior,
        estado_nuevo=estado_nuevo,
        cambios_realizados=descripcion,
        comentarios=cmd.comentarios,
        actualizado_por=actor,
        fecha_actualizacion=caso.fecha_actualizacion,
        datos_snapshot=build_snapshot(caso),
        notificacion_enviada=bool(recipients),
    )

    notify(
        recipients,
        caso.id,
        TipoNotificacion.NUEVA_VERSION,
        f"Caso {caso.numero_caso} actualizado a v{version}: {descripcion}",
        email_subject=f"Caso {caso.numero_caso}: nueva versión v{version}",
        email_template="nueva-version",
        email_data={
            "numero_caso": caso.numero_caso,
            "version_numero": version,
            "estado_anterior": estado_anterior,
            "estado_nuevo": estado_nuevo,
            "cambios": descripcion,
            "actor": actor.nombre_completo,
        },
    )
    logger.info(
        "Caso %s v%s (%s -> %s) por %s",
        caso.numero_caso, version, estado_anterior, estado_nuevo, actor.email,
    )
    return row
