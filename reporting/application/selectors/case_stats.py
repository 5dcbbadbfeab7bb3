from typing import Dict

from casos.domain.enums import EstadoCaso, TipoCaso
from common.application.db import fetch_one
from security.domain.enums import Role

SQL = """
    SELECT
        COUNT(*) AS total,
        COUNT(CASE WHEN estado = %s THEN 1 END) AS abiertos,
        COUNT(CASE WHEN estado = %s THEN 1 END) AS en_proceso,
        COUNT(CASE WHEN estado = %s THEN 1 END) AS cerrados,
        COUNT(CASE WHEN tipo_caso = %s THEN 1 END) AS contables,
        COUNT(CASE WHEN tipo_caso = %s THEN 1 END) AS juridicos,
        COUNT(CASE WHEN supervisor_id = %s THEN 1 END) AS mis_casos
    FROM casos
    WHERE activo = %s {scope}
"""


def case_stats_for(user) -> Dict[str, int]:
    """Conteos con el mismo alcance que el listado de casos."""
    params = [
        EstadoCaso.ABIERTO.value,
        EstadoCaso.EN_PROCESO.value,
        EstadoCaso.CERRADO.value,
        TipoCaso.CONTABLE.value,
        TipoCaso.JURIDICO.value,
        user.id,
        True,
    ]
    scope = ""
    if user.role != Role.ADMIN:
        scope = "AND (tipo_caso = %s OR supervisor_id = %s)"
        params += [user.role, user.id]

    row = fetch_one(SQL.format(scope=scope), params) or {}
    return {k: int(v or 0) for k, v in row.items()}
