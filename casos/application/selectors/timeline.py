from typing import Any, Dict, List, Optional

from casos.domain.enums import TipoActualizacion
from casos.domain.models import ComentarioCaso, VersionCaso
from casos.domain.versioning import diff_snapshots
from common.domain.errors import NotFound, ValidationError


def list_timeline(caso, tipo: Optional[str] = None):
    """Historial completo (versiones y comentarios), más reciente primero."""
    qs = VersionCaso.objects.filter(caso=caso).select_related("actualizado_por")
    if tipo:
        if tipo not in TipoActualizacion.values:
            raise ValidationError(f"Tipo de actualización inválido: {tipo}")
        qs = qs.filter(tipo_actualizacion=tipo)
    return qs.order_by("-fecha_actualizacion", "-id")


def list_versions(caso):
    return (
        VersionCaso.objects.filter(caso=caso, tipo_actualizacion=TipoActualizacion.VERSION)
        .select_related("actualizado_por")
        .order_by("-version_numero")
    )


def get_version(caso, numero: int) -> VersionCaso:
    version = list_versions(caso).filter(version_numero=numero).first()
    if not version:
        raise NotFound(f"Versión {numero} no encontrada", code="VERSION_NOT_FOUND")
    return version


def compare_versions(caso, v1: int, v2: int) -> List[Dict[str, Any]]:
    if v1 == v2:
        get_version(caso, v1)
        return []
    snapshots = dict(
        list_versions(caso)
        .filter(version_numero__in=[v1, v2], datos_snapshot__isnull=False)
        .values_list("version_numero", "datos_snapshot")
    )
    if v1 not in snapshots or v2 not in snapshots:
        raise NotFound("Versiones no encontradas", code="VERSION_NOT_FOUND")
    return diff_snapshots(snapshots[v1], snapshots[v2])


def list_case_comments(caso):
    return (
        ComentarioCaso.objects.filter(caso=caso)
        .select_related("usuario")
        .order_by("-fecha_comentario", "-id")
    )
