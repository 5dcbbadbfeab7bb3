from typing import Any, Dict, List, Optional

# Proyección fija del caso guardada en cada versión (formato JSON estable)
SNAPSHOT_FIELDS = (
    "numero_caso",
    "tipo_caso",
    "titulo",
    "descripcion",
    "estado",
    "cliente_nombre",
    "cliente_rfc",
    "asignado_a",
)

_ABSENT = object()


def build_snapshot(caso) -> Dict[str, Any]:
    snap = {}
    for field in SNAPSHOT_FIELDS:
        if field == "asignado_a":
            snap[field] = caso.asignado_a_id
        else:
            snap[field] = getattr(caso, field)
    return snap


def diff_snapshots(old: Dict[str, Any], new: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Un registro por campo distinto, incluyendo campos presentes solo en uno
    de los dos snapshots (el lado ausente se informa como ``None``).
    """
    keys = list(old) + [k for k in new if k not in old]
    differences = []
    for key in keys:
        o = old.get(key, _ABSENT)
        n = new.get(key, _ABSENT)
        if o is _ABSENT or n is _ABSENT or o != n:
            differences.append(
                {
                    "field": key,
                    "old_value": None if o is _ABSENT else o,
                    "new_value": None if n is _ABSENT else n,
                }
            )
    return differences


def describe_changes(estado_anterior: Optional[str], estado_nuevo: str,
                     campos: Dict[str, Any]) -> str:
    cambios = []
    if estado_anterior != estado_nuevo:
        cambios.append(f"Estado: {estado_anterior} → {estado_nuevo}")
    for field in campos:
        cambios.append(f"{field.removesuffix('_id')} actualizado")
    return ", ".join(cambios) or "Actualización manual"
