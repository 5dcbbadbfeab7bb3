from django.core.management.base import BaseCommand, CommandError

from casos.domain.models import Caso, SecuenciaCaso
from casos.domain.value_objects import NumeroCaso
from common.application.db import fetch_all

SQL = """
    SELECT c.id, c.numero_caso, c.version_actual,
           COUNT(v.id) AS versiones,
           MAX(v.version_numero) AS ultima
    FROM casos c
    LEFT JOIN caso_versiones v
           ON v.caso_id = c.id AND v.tipo_actualizacion = 'VERSION'
    GROUP BY c.id, c.numero_caso, c.version_actual
    HAVING c.version_actual <> COUNT(v.id)
        OR c.version_actual <> COALESCE(MAX(v.version_numero), 0)
    ORDER BY c.id
"""


def secuencias_desalineadas():
    """
    Compara cada contador de casos_secuencias con el mayor número emitido
    para su (prefijo, periodo). Los casos sólo se borran lógicamente, así
    que ambos deben coincidir.
    """
    emitidos: dict[tuple[str, str], int] = {}
    for numero in Caso.objects.values_list("numero_caso", flat=True):
        prefijo, periodo, secuencia = NumeroCaso(numero).parts()
        clave = (prefijo, periodo)
        emitidos[clave] = max(emitidos.get(clave, 0), secuencia)

    contadores = {(s.prefijo, s.periodo): s.ultimo for s in SecuenciaCaso.objects.all()}
    claves = sorted(set(emitidos) | set(contadores))
    return [
        (prefijo, periodo, contadores.get((prefijo, periodo)), emitidos.get((prefijo, periodo), 0))
        for prefijo, periodo in claves
        if contadores.get((prefijo, periodo)) != emitidos.get((prefijo, periodo), 0)
    ]


class Command(BaseCommand):
    help = ("Verifica que version_actual coincida con las versiones del historial y que "
            "las secuencias de numeración cubran los casos emitidos (no modifica nada).")

    def add_arguments(self, parser):
        parser.add_argument("--fail", action="store_true",
                            help="Termina con error si hay inconsistencias.")

    def handle(self, *args, **opts):
        rows = fetch_all(SQL, [])
        for r in rows:
            self.stdout.write(self.style.ERROR(
                f"{r['numero_caso']}: version_actual={r['version_actual']} "
                f"versiones={r['versiones']} ultima={r['ultima']}"
            ))
        secuencias = secuencias_desalineadas()
        for prefijo, periodo, ultimo, mayor in secuencias:
            self.stdout.write(self.style.ERROR(
                f"secuencia {prefijo}-{periodo}: ultimo={ultimo} mayor_emitido={mayor}"
            ))
        total = len(rows) + len(secuencias)
        if total and opts["fail"]:
            raise CommandError(f"{total} inconsistencias")
        self.stdout.write(self.style.SUCCESS(f"Inspección terminada: {total} inconsistencias."))
