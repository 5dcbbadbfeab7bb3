from django.db import connection
from django.utils import timezone

from casos.domain.enums import PREFIJOS
from casos.domain.value_objects import NumeroCaso
from common.application.db import increment_and_fetch


def next_case_number(tipo_caso: str) -> NumeroCaso:
    """
    Reserva el siguiente número de caso para (prefijo, año).
    Debe ejecutarse dentro de la transacción que crea el caso: si ésta se
    revierte, la secuencia también.
    """
    prefijo = PREFIJOS[tipo_caso]
    periodo = str(timezone.localdate().year)

    with connection.cursor() as cur:
        cur.execute(
            """
            INSERT INTO casos_secuencias (prefijo, periodo, ultimo)
            VALUES (%s, %s, 0)
            ON CONFLICT (prefijo, periodo) DO NOTHING
            """,
            [prefijo, periodo],
        )
    secuencia = increment_and_fetch(
        "casos_secuencias", "ultimo", "prefijo = %s AND periodo = %s", [prefijo, periodo]
    )
    return NumeroCaso.build(prefijo, periodo, secuencia)
