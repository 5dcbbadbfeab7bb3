"""Tests del explorador de almacenamiento y de la administración de buckets."""
import datetime
from unittest import mock

import pytest
from botocore.exceptions import ClientError
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings

from almacenamiento.infrastructure.models import ArchivoS3, BucketS3, CarpetaS3

pytestmark = pytest.mark.django_db


@pytest.fixture
def gestor(make_user):
    user = make_user("gestor@casos.test")
    user.puede_gestionar_s3 = True
    user.save(update_fields=["puede_gestionar_s3"])
    return user


def _subir(client, nombre="contrato.pdf", **extra):
    archivo = SimpleUploadedFile(nombre, b"%PDF-1.4 contrato", content_type="application/pdf")
    return client.post("/api/s3/archivos/", {"archivo": archivo, **extra}, format="multipart")


def _s3_client():
    client = mock.Mock()
    return mock.patch("almacenamiento.infrastructure.buckets.s3_client", return_value=client), client


def test_acceso_solo_admin_o_con_permiso(client_for, admin, gestor, contable):
    assert client_for(contable).get("/api/s3/carpetas/").status_code == 403
    assert client_for(gestor).get("/api/s3/carpetas/").status_code == 200
    assert client_for(admin).get("/api/s3/archivos/").status_code == 200


def test_admin_concede_acceso_por_api(client_for, admin, contable):
    resp = client_for(admin).patch(f"/api/users/{contable.id}/s3-access/",
                                   {"puede_gestionar_s3": True}, format="json")
    assert resp.status_code == 200
    assert resp.data["user"]["puede_gestionar_s3"] is True
    contable.refresh_from_db()
    assert client_for(contable).get("/api/s3/carpetas/").status_code == 200

    assert client_for(contable).patch(f"/api/users/{contable.id}/s3-access/",
                                      {"puede_gestionar_s3": False},
                                      format="json").status_code == 403


def test_carpetas_anidadas(client_for, gestor):
    c = client_for(gestor)
    raiz = c.post("/api/s3/carpetas/", {"nombre": "contratos"}, format="json")
    assert raiz.status_code == 201, raiz.data
    assert raiz.data["ruta_completa"] == "/contratos"

    hija = c.post("/api/s3/carpetas/", {"nombre": "2026", "carpeta_padre_id": raiz.data["id"]},
                  format="json")
    assert hija.data["ruta_completa"] == "/contratos/2026"
    assert [f["ruta_completa"] for f in c.get("/api/s3/carpetas/").data] == [
        "/contratos", "/contratos/2026"
    ]


def test_carpeta_duplicada_o_invalida(client_for, gestor):
    c = client_for(gestor)
    c.post("/api/s3/carpetas/", {"nombre": "contratos"}, format="json")
    dup = c.post("/api/s3/carpetas/", {"nombre": "contratos"}, format="json")
    assert dup.status_code == 409
    assert dup.data["code"] == "409.CARPETA_EXISTS"

    assert c.post("/api/s3/carpetas/", {"nombre": "a/b"}, format="json").status_code == 400
    assert c.post("/api/s3/carpetas/", {"nombre": "x", "carpeta_padre_id": 999},
                  format="json").status_code == 404


def test_subir_listar_descargar(client_for, gestor):
    c = client_for(gestor)
    carpeta = CarpetaS3.objects.create(nombre="contratos", ruta_completa="/contratos",
                                       creado_por=gestor)
    resp = _subir(c, carpeta_id=carpeta.id)
    assert resp.status_code == 201, resp.data
    assert resp.data["carpeta_nombre"] == "contratos"
    assert resp.data["metadata"]["originalName"] == "contrato.pdf"

    registro = ArchivoS3.objects.get(id=resp.data["id"])
    assert registro.s3_key.startswith("almacenamiento/contratos/")
    assert default_storage.exists(registro.s3_key)

    _subir(c, nombre="suelto.txt")
    assert len(c.get("/api/s3/archivos/").data) == 2
    en_carpeta = c.get(f"/api/s3/archivos/?carpeta_id={carpeta.id}").data
    assert [a["nombre_archivo"] for a in en_carpeta] == ["contrato.pdf"]
    assert c.get("/api/s3/archivos/?carpeta_id=abc").status_code == 400

    descarga = c.get(f"/api/s3/archivos/{registro.id}/descargar/").data
    assert descarga["filename"] == "contrato.pdf"
    assert descarga["url"]


@override_settings(DOCUMENTOS_MAX_BYTES=4)
def test_archivo_demasiado_grande(client_for, gestor):
    resp = _subir(client_for(gestor))
    assert resp.status_code == 400
    assert resp.data["code"] == "400.ARCHIVO_DEMASIADO_GRANDE"
    assert ArchivoS3.objects.count() == 0


def test_borrar_archivo(client_for, gestor, django_capture_on_commit_callbacks):
    c = client_for(gestor)
    archivo_id = _subir(c).data["id"]
    key = ArchivoS3.objects.get(id=archivo_id).s3_key

    with django_capture_on_commit_callbacks(execute=True):
        assert c.delete(f"/api/s3/archivos/{archivo_id}/").status_code == 204
    assert not ArchivoS3.objects.filter(id=archivo_id).exists()
    assert not default_storage.exists(key)
    assert c.delete(f"/api/s3/archivos/{archivo_id}/").status_code == 404


def test_buckets_solo_admin(client_for, gestor):
    assert client_for(gestor).get("/api/buckets/").status_code == 403


def test_listar_buckets(client_for, admin):
    BucketS3.objects.create(nombre="activo-uno", creado_por=admin)
    BucketS3.objects.create(nombre="inactivo", creado_por=admin, activo=False)
    patcher, client = _s3_client()
    client.list_buckets.return_value = {"Buckets": [
        {"Name": "activo-uno",
         "CreationDate": datetime.datetime(2026, 1, 5, tzinfo=datetime.timezone.utc)},
    ]}
    with patcher:
        resp = client_for(admin).get("/api/buckets/")
    assert resp.status_code == 200
    assert [b["nombre"] for b in resp.data["aws_buckets"]] == ["activo-uno"]
    assert [b["nombre"] for b in resp.data["registered_buckets"]] == ["activo-uno"]


def test_crear_bucket_con_region(client_for, admin):
    patcher, client = _s3_client()
    with patcher:
        resp = client_for(admin).post("/api/buckets/", {
            "nombre": "expedientes-2026", "region": "us-west-2", "descripcion": "Expedientes",
        }, format="json")
    assert resp.status_code == 201, resp.data
    client.create_bucket.assert_called_once_with(
        Bucket="expedientes-2026",
        CreateBucketConfiguration={"LocationConstraint": "us-west-2"},
    )
    bucket = BucketS3.objects.get(nombre="expedientes-2026")
    assert bucket.region == "us-west-2" and bucket.creado_por_id == admin.id


def test_crear_bucket_us_east_1_sin_location(client_for, admin):
    patcher, client = _s3_client()
    with patcher:
        resp = client_for(admin).post("/api/buckets/", {"nombre": "respaldo"}, format="json")
    assert resp.status_code == 201
    client.create_bucket.assert_called_once_with(Bucket="respaldo")


def test_crear_bucket_nombre_invalido(client_for, admin):
    patcher, client = _s3_client()
    with patcher:
        resp = client_for(admin).post("/api/buckets/", {"nombre": "Mayúsculas_NO"},
                                      format="json")
    assert resp.status_code == 400
    client.create_bucket.assert_not_called()


def test_crear_bucket_existente_409(client_for, admin):
    patcher, client = _s3_client()
    client.create_bucket.side_effect = ClientError(
        {"Error": {"Code": "BucketAlreadyExists", "Message": "ya existe"}}, "CreateBucket"
    )
    with patcher:
        resp = client_for(admin).post("/api/buckets/", {"nombre": "ocupado"}, format="json")
    assert resp.status_code == 409
    assert resp.data["code"] == "409.BUCKET_EXISTS"
    assert not BucketS3.objects.filter(nombre="ocupado").exists()


def test_fallo_de_s3_502(client_for, admin):
    patcher, client = _s3_client()
    client.list_buckets.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "no"}}, "ListBuckets"
    )
    with patcher:
        resp = client_for(admin).get("/api/buckets/")
    assert resp.status_code == 502
    assert resp.data["code"] == "502.STORAGE_ERROR"
