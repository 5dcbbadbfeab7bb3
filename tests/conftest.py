"""Fixtures pytest compartidas: usuarios por rol, clientes API y un caso base."""
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from casos.application.use_cases.create_case import CreateCaseCommand, create_case
from security.domain.enums import EstadoRegistro, Role

PASSWORD = "Secreta-123"


@pytest.fixture
def make_user(db):
    def _make(email, role=Role.CONTABLE, *, activo=True,
              estado=EstadoRegistro.ACTIVO, nombre=None):
        return get_user_model().objects.create_user(
            email=email,
            password=PASSWORD,
            nombre_completo=nombre or email.split("@")[0].title(),
            role=role,
            activo=activo,
            estado_registro=estado,
        )
    return _make


@pytest.fixture
def admin(make_user):
    return make_user("admin@casos.test", Role.ADMIN)


@pytest.fixture
def admin2(make_user):
    return make_user("admin2@casos.test", Role.ADMIN)


@pytest.fixture
def contable(make_user):
    return make_user("ana@casos.test", Role.CONTABLE)


@pytest.fixture
def contable2(make_user):
    return make_user("carlos@casos.test", Role.CONTABLE)


@pytest.fixture
def juridico(make_user):
    return make_user("beto@casos.test", Role.JURIDICO)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        c = APIClient()
        c.force_authenticate(user=user)
        return c
    return _client


@pytest.fixture
def caso(contable):
    return create_case(
        CreateCaseCommand(
            tipo_caso="CONTABLE",
            titulo="Auditoría 2025",
            cliente_nombre="ACME SA de CV",
            cliente_rfc="ACM010101AAA",
        ),
        contable,
    )
