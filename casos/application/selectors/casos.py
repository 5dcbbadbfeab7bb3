from django.db.models import Q

from casos.domain.models import Caso
from casos.domain.permissions import CapabilitySet, evaluate
from common.domain.errors import NotFound, PermissionDenied
from security.domain.enums import Role


def get_active_case(caso_id: int, *, for_update: bool = False) -> Caso:
    qs = Caso.objects.filter(id=caso_id, activo=True)
    if for_update:
        qs = qs.select_for_update()
    caso = qs.first()
    if not caso:
        raise NotFound("Caso no encontrado", code="CASO_NOT_FOUND")
    return caso


def get_case_for(user, caso_id: int, capability: str = "can_view",
                 *, for_update: bool = False) -> tuple[Caso, CapabilitySet]:
    """Carga el caso y exige la capacidad indicada para ``user``."""
    caso = get_active_case(caso_id, for_update=for_update)
    caps = evaluate(user, caso)
    if not getattr(caps, capability):
        raise PermissionDenied()
    return caso, caps


def visible_cases_for(user):
    """Admin ve todo; el resto ve su categoría y los casos que supervisa."""
    qs = Caso.objects.filter(activo=True).select_related(
        "supervisor", "creado_por", "asignado_a"
    )
    if user.role == Role.ADMIN:
        return qs
    return qs.filter(Q(tipo_caso=user.role) | Q(supervisor_id=user.id))
