"""Tests del historial versionado: alta de caso, versiones y comentarios."""
import re
from concurrent.futures import ThreadPoolExecutor

import pytest
from django.db import connection
from django.test import override_settings

from casos.application.selectors.timeline import (
    compare_versions,
    get_version,
    list_timeline,
    list_versions,
)
from casos.application.use_cases.add_comment import (
    AddCommentCommand,
    add_case_comment,
    add_ledger_comment,
)
from casos.application.use_cases.add_version import AddVersionCommand, add_version
from casos.application.use_cases.create_case import CreateCaseCommand, create_case
from casos.domain.models import Caso, VersionCaso
from common.domain.errors import (
    InvalidTransition,
    NoOpUpdate,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from notifications.infrastructure.models import Notificacion

pytestmark = pytest.mark.django_db


def _versiones(caso):
    return VersionCaso.objects.filter(caso=caso, tipo_actualizacion="VERSION")


def test_crear_caso_deja_version_1(contable, caso):
    assert caso.supervisor_id == contable.id
    assert caso.creado_por_id == contable.id
    assert caso.version_actual == 1
    assert re.fullmatch(r"CON-\d{4}-000001", caso.numero_caso)

    [v1] = _versiones(caso)
    assert v1.version_numero == 1
    assert v1.estado_anterior is None
    assert v1.estado_nuevo == "ABIERTO"
    assert v1.datos_snapshot["numero_caso"] == caso.numero_caso


def test_numero_de_caso_secuencial_por_prefijo(contable, juridico, caso):
    otro = create_case(CreateCaseCommand("CONTABLE", "Otro", "Cliente"), contable)
    jur = create_case(CreateCaseCommand("JURIDICO", "Demanda", "Cliente"), juridico)
    assert otro.numero_caso.endswith("-000002")
    assert jur.numero_caso.startswith("JUR-") and jur.numero_caso.endswith("-000001")


def test_no_crea_casos_de_otra_categoria(juridico):
    with pytest.raises(PermissionDenied):
        create_case(CreateCaseCommand("CONTABLE", "X", "Y"), juridico)
    assert Caso.objects.count() == 0


def test_admin_crea_cualquier_categoria(admin):
    caso = create_case(CreateCaseCommand("JURIDICO", "X", "Y"), admin)
    assert caso.supervisor_id == admin.id


def test_alta_notifica_admins_si_actor_no_es_admin(admin, admin2, caso):
    notifs = Notificacion.objects.filter(caso=caso, tipo="CASO_CREADO")
    assert set(notifs.values_list("usuario_id", flat=True)) == {admin.id, admin2.id}


def test_otra_categoria_no_versiona(juridico, caso):
    with pytest.raises(PermissionDenied):
        add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), juridico)
    caso.refresh_from_db()
    assert caso.version_actual == 1
    assert _versiones(caso).count() == 1


def test_misma_categoria_no_supervisor_no_versiona(contable2, caso):
    with pytest.raises(PermissionDenied):
        add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable2)
    assert _versiones(caso).count() == 1


def test_supervisor_avanza_estado_y_notifica_admins(admin, admin2, contable, caso):
    v2 = add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)

    caso.refresh_from_db()
    assert caso.version_actual == 2
    assert caso.estado == "EN_PROCESO"
    assert (v2.version_numero, v2.estado_anterior, v2.estado_nuevo) == (2, "ABIERTO", "EN_PROCESO")
    assert v2.cambios_realizados == "avance"

    recipients = set(
        Notificacion.objects.filter(caso=caso, tipo="NUEVA_VERSION")
        .values_list("usuario_id", flat=True)
    )
    assert recipients == {admin.id, admin2.id}
    assert contable.id not in recipients


def test_admin_versiona_y_notifica_solo_al_supervisor(admin, admin2, contable, caso):
    add_version(AddVersionCommand(caso.id, "revisión", "EN_PROCESO"), admin)
    recipients = set(
        Notificacion.objects.filter(caso=caso, tipo="NUEVA_VERSION")
        .values_list("usuario_id", flat=True)
    )
    assert recipients == {contable.id}


def test_versiones_contiguas_y_contador_consistente(contable, caso):
    estados = ["EN_PROCESO", "CERRADO", "ABIERTO", "EN_PROCESO", "CERRADO"]
    for i, estado in enumerate(estados):
        add_version(AddVersionCommand(caso.id, f"paso {i}", estado), contable)

    caso.refresh_from_db()
    numeros = sorted(_versiones(caso).values_list("version_numero", flat=True))
    assert numeros == list(range(1, len(estados) + 2))
    assert caso.version_actual == _versiones(caso).count()


@pytest.mark.django_db(transaction=True)
def test_versiones_concurrentes_contiguas(transactional_db, admin, contable, caso):
    workers = 8

    def _versionar(i):
        try:
            return add_version(
                AddVersionCommand(caso.id, f"paso {i}", campos={"descripcion": f"v{i}"}),
                contable,
            ).version_numero
        finally:
            connection.close()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        emitidos = list(pool.map(_versionar, range(workers)))

    caso.refresh_from_db()
    numeros = sorted(_versiones(caso).values_list("version_numero", flat=True))
    assert numeros == list(range(1, workers + 2))
    assert sorted(emitidos) == list(range(2, workers + 2))
    assert caso.version_actual == _versiones(caso).count() == workers + 1


def test_mismo_estado_sin_cambios_no_escribe(contable, caso):
    with pytest.raises(NoOpUpdate):
        add_version(AddVersionCommand(caso.id, "nada", "ABIERTO"), contable)
    caso.refresh_from_db()
    assert caso.version_actual == 1


def test_cambio_descriptivo_genera_version_sin_cambio_de_estado(contable, caso):
    v2 = add_version(
        AddVersionCommand(caso.id, campos={"titulo": "Auditoría 2025 (anual)"}), contable
    )
    assert v2.estado_anterior == v2.estado_nuevo == "ABIERTO"
    assert "titulo" in v2.cambios_realizados
    caso.refresh_from_db()
    assert caso.titulo == "Auditoría 2025 (anual)"
    assert caso.version_actual == 2


def test_campos_identicos_cuentan_como_sin_cambios(contable, caso):
    with pytest.raises(NoOpUpdate):
        add_version(AddVersionCommand(caso.id, campos={"titulo": caso.titulo}), contable)


def test_asignado_inexistente_rechazado(contable, caso):
    with pytest.raises(ValidationError):
        add_version(AddVersionCommand(caso.id, campos={"asignado_a_id": 999999}), contable)
    caso.refresh_from_db()
    assert caso.version_actual == 1


@override_settings(CASOS_PERMITIR_REAPERTURA=False)
def test_reapertura_deshabilitada(contable, caso):
    add_version(AddVersionCommand(caso.id, "cierre", "CERRADO"), contable)
    with pytest.raises(InvalidTransition):
        add_version(AddVersionCommand(caso.id, "reabrir", "ABIERTO"), contable)
    caso.refresh_from_db()
    assert (caso.estado, caso.version_actual) == ("CERRADO", 2)


def test_comentario_en_historial_no_incrementa_version(contable2, caso):
    row = add_ledger_comment(AddCommentCommand(caso.id, "Falta el balance"), contable2)
    caso.refresh_from_db()
    assert caso.version_actual == 1
    assert row.tipo_actualizacion == "COMENTARIO"
    assert row.version_numero == 1
    assert row.estado_anterior is None and row.estado_nuevo is None
    assert _versiones(caso).count() == 1


def test_otra_categoria_no_comenta(juridico, caso):
    with pytest.raises(PermissionDenied):
        add_ledger_comment(AddCommentCommand(caso.id, "hola"), juridico)
    with pytest.raises(PermissionDenied):
        add_case_comment(AddCommentCommand(caso.id, "hola"), juridico)


def test_comentario_vacio_rechazado(contable2, caso):
    with pytest.raises(ValidationError):
        add_ledger_comment(AddCommentCommand(caso.id, "   "), contable2)


def test_comentario_notifica_supervisor_y_admins(admin, contable, contable2, caso):
    add_ledger_comment(AddCommentCommand(caso.id, "Revisar"), contable2)
    recipients = set(
        Notificacion.objects.filter(caso=caso, tipo="NUEVO_COMENTARIO")
        .values_list("usuario_id", flat=True)
    )
    assert recipients == {admin.id, contable.id}


def test_hilo_notifica_solo_al_supervisor(admin, contable, contable2, caso):
    add_case_comment(AddCommentCommand(caso.id, "¿Avances?"), contable2)
    recipients = list(
        Notificacion.objects.filter(caso=caso, tipo="NUEVO_COMENTARIO")
        .values_list("usuario_id", flat=True)
    )
    assert recipients == [contable.id]

    add_case_comment(AddCommentCommand(caso.id, "Sí"), contable)
    assert Notificacion.objects.filter(caso=caso, tipo="NUEVO_COMENTARIO").count() == 1


def test_timeline_mas_reciente_primero(contable, contable2, caso):
    add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)
    comentario = add_ledger_comment(AddCommentCommand(caso.id, "visto"), contable2)

    timeline = list(list_timeline(caso))
    assert [r.tipo_actualizacion for r in timeline] == ["COMENTARIO", "VERSION", "VERSION"]
    assert timeline[0].id == comentario.id
    assert timeline[0].comentarios == "visto"

    solo_comentarios = list(list_timeline(caso, "COMENTARIO"))
    assert [r.id for r in solo_comentarios] == [comentario.id]


def test_timeline_tipo_invalido(caso):
    with pytest.raises(ValidationError):
        list_timeline(caso, "OTRO")


def test_list_y_get_version(contable, caso):
    add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)
    assert [v.version_numero for v in list_versions(caso)] == [2, 1]
    assert get_version(caso, 2).estado_nuevo == "EN_PROCESO"
    with pytest.raises(NotFound):
        get_version(caso, 3)


def test_compare_versiones(contable, caso):
    add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO",
                                  campos={"titulo": "Nuevo"}), contable)
    diff = {d["field"]: (d["old_value"], d["new_value"]) for d in compare_versions(caso, 1, 2)}
    assert diff == {"titulo": ("Auditoría 2025", "Nuevo"), "estado": ("ABIERTO", "EN_PROCESO")}

    inverso = {d["field"]: (d["old_value"], d["new_value"])
               for d in compare_versions(caso, 2, 1)}
    assert inverso == {k: (n, o) for k, (o, n) in diff.items()}

    assert compare_versions(caso, 2, 2) == []
    with pytest.raises(NotFound):
        compare_versions(caso, 1, 7)


def test_historial_append_only(caso):
    v1 = VersionCaso.objects.get(caso=caso)
    v1.cambios_realizados = "alterado"
    with pytest.raises(ValueError):
        v1.save()
