from typing import Set

from notifications.application.dispatcher import admin_pool_ids
from security.domain.enums import Role


def ledger_recipients(caso, actor) -> Set[int]:
    """
    Destinatarios de un evento del historial: administradores activos si el
    actor no es admin, y el supervisor si el actor no es el supervisor.
    El actor nunca se notifica a sí mismo.
    """
    ids = set()
    if actor.role != Role.ADMIN:
        ids |= admin_pool_ids()
    if caso.supervisor_id and caso.supervisor_id != actor.id:
        ids.add(caso.supervisor_id)
    ids.discard(actor.id)
    return ids
