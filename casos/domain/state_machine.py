from typing import Optional

from casos.domain.enums import EstadoCaso
from casos.domain.permissions import CapabilitySet
from common.domain.errors import InvalidTransition, NoOpUpdate, PermissionDenied

# ABIERTO (inicial) -> EN_PROCESO -> CERRADO (terminal)
ORDEN = {
    EstadoCaso.ABIERTO: 0,
    EstadoCaso.EN_PROCESO: 1,
    EstadoCaso.CERRADO: 2,
}


def is_backward(actual: str, nuevo: str) -> bool:
    return ORDEN[nuevo] < ORDEN[actual]


def validate_transition(
    actual: str,
    nuevo: Optional[str],
    capabilities: CapabilitySet,
    *,
    hay_cambios: bool = False,
    permitir_reapertura: bool = True,
) -> str:
    """
    Valida la transición solicitada y devuelve el estado resultante.
    ``nuevo=None`` conserva el estado actual. ``hay_cambios`` indica si la
    actualización modifica algún otro campo del caso.
    """
    if not capabilities.can_add_version:
        raise PermissionDenied("Solo el supervisor o un administrador pueden versionar el caso")

    nuevo = nuevo or actual
    if nuevo not in ORDEN:
        raise InvalidTransition(f"Estado desconocido: {nuevo}")

    if nuevo == actual:
        if not hay_cambios:
            raise NoOpUpdate(f"El caso ya está en {actual} y no hay otros cambios")
        return nuevo

    if is_backward(actual, nuevo) and not permitir_reapertura:
        raise InvalidTransition(f"No se permite {actual} -> {nuevo}")
    return nuevo
