"""Tests de la API de casos, historial y comentarios."""
import pytest

from casos.application.use_cases.add_version import AddVersionCommand, add_version
from casos.application.use_cases.create_case import CreateCaseCommand, create_case
from casos.domain.models import Caso

pytestmark = pytest.mark.django_db


def _results(resp):
    return resp.data["results"]


def test_requiere_autenticacion(api_client):
    assert api_client.get("/api/casos/").status_code == 401


def test_usuario_pendiente_rechazado(make_user, client_for):
    pendiente = make_user("p@casos.test", None, activo=False, estado="PENDIENTE")
    assert client_for(pendiente).get("/api/casos/").status_code == 403


def test_crear_caso_por_api(client_for, contable):
    resp = client_for(contable).post("/api/casos/", {
        "tipo_caso": "CONTABLE",
        "titulo": "Declaración anual",
        "cliente_nombre": "Cliente Uno",
        "descripcion": "ISR 2025",
    }, format="json")
    assert resp.status_code == 201, resp.data
    assert resp.data["version_actual"] == 1
    assert resp.data["supervisor"]["id"] == contable.id
    assert resp.data["estado"] == "ABIERTO"


def test_crear_caso_otra_categoria_403(client_for, juridico):
    resp = client_for(juridico).post("/api/casos/", {
        "tipo_caso": "CONTABLE", "titulo": "X", "cliente_nombre": "Y",
    }, format="json")
    assert resp.status_code == 403
    assert resp.data["code"] == "403.CATEGORIA_DISTINTA"


def test_listado_por_rol(client_for, admin, contable, juridico, caso):
    jur = create_case(CreateCaseCommand("JURIDICO", "Amparo", "Cliente"), juridico)
    # El jurídico supervisa además un caso contable
    create_case(CreateCaseCommand("CONTABLE", "Mixto", "Cliente"), admin)
    Caso.objects.filter(titulo="Mixto").update(supervisor=juridico)

    ids_admin = {c["id"] for c in _results(client_for(admin).get("/api/casos/"))}
    ids_contable = {c["id"] for c in _results(client_for(contable).get("/api/casos/"))}
    ids_juridico = {c["titulo"] for c in _results(client_for(juridico).get("/api/casos/"))}

    assert len(ids_admin) == 3
    assert jur.id not in ids_contable and caso.id in ids_contable
    assert ids_juridico == {"Amparo", "Mixto"}


def test_filtros_y_orden(client_for, admin, contable, caso):
    add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)
    create_case(CreateCaseCommand("CONTABLE", "Otro", "Beta SA"), contable)

    c = client_for(admin)
    assert [x["id"] for x in _results(c.get("/api/casos/?estado=EN_PROCESO"))] == [caso.id]
    assert len(_results(c.get("/api/casos/?cliente=beta"))) == 1
    numeros = [x["numero_caso"] for x in _results(c.get("/api/casos/?ordering=numero_caso"))]
    assert numeros == sorted(numeros)


def test_detalle_incluye_permisos(client_for, contable2, caso):
    resp = client_for(contable2).get(f"/api/casos/{caso.id}/")
    assert resp.status_code == 200
    assert resp.data["permisos"]["can_add_comment"] is True
    assert resp.data["permisos"]["can_add_version"] is False
    assert resp.data["documentos"] == []


def test_detalle_otra_categoria_403(client_for, juridico, caso):
    assert client_for(juridico).get(f"/api/casos/{caso.id}/").status_code == 403


def test_detalle_inexistente_404(client_for, admin):
    resp = client_for(admin).get("/api/casos/424242/")
    assert resp.status_code == 404
    assert resp.data["code"] == "404.CASO_NOT_FOUND"


def test_permisos_endpoint(client_for, contable, caso):
    resp = client_for(contable).get(f"/api/casos/{caso.id}/permisos/")
    assert resp.data["is_supervisor"] is True
    assert resp.data["can_delete"] is False


def test_versionar_por_api(client_for, contable, caso):
    c = client_for(contable)
    resp = c.post(f"/api/casos/{caso.id}/versiones/",
                  {"nuevo_estado": "EN_PROCESO", "cambios_realizados": "avance"}, format="json")
    assert resp.status_code == 201, resp.data
    assert resp.data["version_numero"] == 2

    versiones = c.get(f"/api/casos/{caso.id}/versiones/").data
    assert [v["version_numero"] for v in versiones] == [2, 1]
    assert c.get(f"/api/casos/{caso.id}/versiones/2/").data["estado_nuevo"] == "EN_PROCESO"

    cmp = c.get(f"/api/casos/{caso.id}/versiones/compare/?version1=1&version2=2").data
    assert cmp["diferencias"] == [
        {"field": "estado", "old_value": "ABIERTO", "new_value": "EN_PROCESO"}
    ]


def test_versionar_sin_permiso_403(client_for, contable2, caso):
    resp = client_for(contable2).post(f"/api/casos/{caso.id}/versiones/",
                                      {"nuevo_estado": "EN_PROCESO"}, format="json")
    assert resp.status_code == 403
    assert resp.data["code"] == "403.PERMISSION_DENIED"


def test_versionar_sin_cambios_409(client_for, contable, caso):
    resp = client_for(contable).post(f"/api/casos/{caso.id}/versiones/",
                                     {"nuevo_estado": "ABIERTO"}, format="json")
    assert resp.status_code == 409
    assert resp.data["code"] == "409.NO_OP_UPDATE"


def test_rfc_en_blanco_se_guarda_como_nulo(client_for, contable):
    resp = client_for(contable).post("/api/casos/", {
        "tipo_caso": "CONTABLE", "titulo": "Sin RFC", "cliente_nombre": "Cliente",
        "cliente_rfc": "  ",
    }, format="json")
    assert resp.status_code == 201, resp.data
    assert Caso.objects.get(pk=resp.data["id"]).cliente_rfc is None


def test_rfc_en_blanco_sobre_nulo_no_versiona(client_for, contable):
    c = client_for(contable)
    creado = c.post("/api/casos/", {
        "tipo_caso": "CONTABLE", "titulo": "Sin RFC", "cliente_nombre": "Cliente",
    }, format="json").data
    resp = c.post(f"/api/casos/{creado['id']}/versiones/", {"cliente_rfc": ""}, format="json")
    assert resp.status_code == 409
    assert resp.data["code"] == "409.NO_OP_UPDATE"
    caso = Caso.objects.get(pk=creado["id"])
    assert caso.version_actual == 1
    assert caso.historial.count() == 1


def test_compare_sin_parametros_400(client_for, contable, caso):
    assert client_for(contable).get(f"/api/casos/{caso.id}/versiones/compare/").status_code == 400


def test_compare_version_inexistente_404(client_for, contable, caso):
    resp = client_for(contable).get(
        f"/api/casos/{caso.id}/versiones/compare/?version1=1&version2=5")
    assert resp.status_code == 404


def test_historial_y_comentarios(client_for, contable2, caso):
    c = client_for(contable2)
    resp = c.post(f"/api/casos/{caso.id}/historial/comentarios/",
                  {"comentario": "Falta XML"}, format="json")
    assert resp.status_code == 201

    historial = c.get(f"/api/casos/{caso.id}/historial/").data
    assert historial[0]["tipo_actualizacion"] == "COMENTARIO"
    assert historial[0]["actualizado_por_nombre"] == contable2.nombre_completo
    assert len(c.get(f"/api/casos/{caso.id}/historial/?tipo=VERSION").data) == 1

    resp = c.post(f"/api/casos/{caso.id}/comentarios/", {"comentario": "hola"}, format="json")
    assert resp.status_code == 201
    assert [x["comentario"] for x in c.get(f"/api/casos/{caso.id}/comentarios/").data] == ["hola"]


def test_borrado_logico_solo_admin(client_for, admin, contable, caso):
    assert client_for(contable).delete(f"/api/casos/{caso.id}/").status_code == 403
    assert client_for(admin).delete(f"/api/casos/{caso.id}/").status_code == 204

    caso.refresh_from_db()
    assert caso.activo is False
    assert client_for(admin).get(f"/api/casos/{caso.id}/").status_code == 404


def test_reasignar_supervisor(client_for, admin, contable, contable2, caso):
    url = f"/api/casos/{caso.id}/supervisor/"
    assert client_for(contable).patch(url, {"supervisor_id": contable2.id},
                                      format="json").status_code == 403

    resp = client_for(admin).patch(url, {"supervisor_id": contable2.id}, format="json")
    assert resp.status_code == 200
    assert resp.data["supervisor"]["id"] == contable2.id
    assert contable2.notificaciones.filter(tipo="CASO_ASIGNADO").count() == 1

    caso.refresh_from_db()
    assert caso.version_actual == 1


def test_reasignar_a_usuario_inactivo_400(client_for, admin, make_user, caso):
    baja = make_user("baja@casos.test", activo=False, estado="INACTIVO")
    resp = client_for(admin).patch(f"/api/casos/{caso.id}/supervisor/",
                                   {"supervisor_id": baja.id}, format="json")
    assert resp.status_code == 400
