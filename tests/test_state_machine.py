"""Tests de la máquina de estados del caso."""
import pytest

from casos.domain.permissions import CapabilitySet
from casos.domain.state_machine import validate_transition
from common.domain.errors import InvalidTransition, NoOpUpdate, PermissionDenied


def _caps(can_add_version=True):
    return CapabilitySet(
        can_view=True, can_edit=can_add_version, can_delete=False,
        can_add_version=can_add_version, can_add_comment=True,
        can_upload_documents=True, can_delete_documents=can_add_version,
        is_supervisor=can_add_version, is_admin=False,
    )


@pytest.mark.parametrize("actual,nuevo", [
    ("ABIERTO", "EN_PROCESO"),
    ("EN_PROCESO", "CERRADO"),
    ("ABIERTO", "CERRADO"),
])
def test_avances_validos(actual, nuevo):
    assert validate_transition(actual, nuevo, _caps()) == nuevo


def test_sin_permiso_de_version():
    with pytest.raises(PermissionDenied):
        validate_transition("ABIERTO", "EN_PROCESO", _caps(can_add_version=False))


def test_estado_desconocido():
    with pytest.raises(InvalidTransition):
        validate_transition("ABIERTO", "ARCHIVADO", _caps())


def test_mismo_estado_sin_cambios_es_noop():
    with pytest.raises(NoOpUpdate):
        validate_transition("EN_PROCESO", "EN_PROCESO", _caps())
    with pytest.raises(NoOpUpdate):
        validate_transition("EN_PROCESO", None, _caps())


def test_mismo_estado_con_otros_cambios():
    assert validate_transition("ABIERTO", None, _caps(), hay_cambios=True) == "ABIERTO"


@pytest.mark.parametrize("actual,nuevo", [
    ("CERRADO", "ABIERTO"),
    ("CERRADO", "EN_PROCESO"),
    ("EN_PROCESO", "ABIERTO"),
])
def test_reapertura_configurable(actual, nuevo):
    assert validate_transition(actual, nuevo, _caps()) == nuevo
    with pytest.raises(InvalidTransition):
        validate_transition(actual, nuevo, _caps(), permitir_reapertura=False)
