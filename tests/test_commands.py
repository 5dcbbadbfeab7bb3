"""Tests del comando de verificación de versiones."""
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from casos.domain.models import Caso, SecuenciaCaso
from casos.domain.value_objects import NumeroCaso

pytestmark = pytest.mark.django_db


def test_sin_inconsistencias(caso):
    out = StringIO()
    call_command("verificar_versiones", stdout=out)
    assert "0 inconsistencias" in out.getvalue()


def test_detecta_contador_desalineado(caso):
    Caso.objects.filter(id=caso.id).update(version_actual=5)
    out = StringIO()
    call_command("verificar_versiones", stdout=out)
    assert caso.numero_caso in out.getvalue()

    with pytest.raises(CommandError):
        call_command("verificar_versiones", "--fail", stdout=StringIO())


def test_detecta_secuencia_atrasada(caso):
    prefijo, periodo, secuencia = NumeroCaso(caso.numero_caso).parts()
    SecuenciaCaso.objects.filter(prefijo=prefijo, periodo=periodo).update(ultimo=secuencia - 1)
    out = StringIO()
    call_command("verificar_versiones", stdout=out)
    assert f"secuencia {prefijo}-{periodo}: ultimo={secuencia - 1}" in out.getvalue()
    assert "1 inconsistencias" in out.getvalue()

    with pytest.raises(CommandError):
        call_command("verificar_versiones", "--fail", stdout=StringIO())
