"""Tests del despachador de notificaciones y del correo tras el commit."""
from unittest import mock

import pytest
from django.core import mail
from django.test import override_settings

from casos.application.recipients import ledger_recipients
from casos.application.use_cases.add_version import AddVersionCommand, add_version
from notifications.application import dispatcher
from notifications.infrastructure.models import Notificacion

pytestmark = pytest.mark.django_db


def test_destinatarios_sin_duplicados_ni_actor(admin, admin2, contable, contable2, caso):
    assert ledger_recipients(caso, contable) == {admin.id, admin2.id}
    assert ledger_recipients(caso, contable2) == {admin.id, admin2.id, contable.id}
    assert ledger_recipients(caso, admin) == {contable.id}


def test_admin_supervisor_no_se_notifica(admin, admin2, caso):
    caso.supervisor = admin
    assert ledger_recipients(caso, admin) == set()


def test_correo_se_envia_despues_del_commit(admin, contable, caso,
                                            django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)
        assert len(mail.outbox) == 0

    assert len(callbacks) == 1
    assert len(mail.outbox) == 1
    assert mail.outbox[0].to == [admin.email]
    assert caso.numero_caso in mail.outbox[0].body
    assert Notificacion.objects.get(caso=caso, tipo="NUEVA_VERSION").email_enviado is True


def test_fallo_de_correo_no_revierte_la_escritura(admin, contable, caso,
                                                  django_capture_on_commit_callbacks):
    with mock.patch("notifications.infrastructure.tasks.send_mail",
                    side_effect=ConnectionError("smtp caído")):
        with django_capture_on_commit_callbacks(execute=True):
            version = add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)

    assert version.version_numero == 2
    notif = Notificacion.objects.get(caso=caso, tipo="NUEVA_VERSION")
    assert notif.email_enviado is False


@override_settings(NOTIFICATIONS_EMAIL_ASYNC=True)
def test_correo_asincrono_se_encola_con_reintentos(admin, contable, caso,
                                                   django_capture_on_commit_callbacks):
    queue = mock.Mock()
    with mock.patch("notifications.application.dispatcher.django_rq.get_queue",
                    return_value=queue):
        with django_capture_on_commit_callbacks(execute=True):
            add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)

    queue.enqueue.assert_called_once()
    args, kwargs = queue.enqueue.call_args
    assert args[1]["to"] == admin.email
    assert kwargs["retry"] is dispatcher.EMAIL_RETRY


@override_settings(NOTIFICATIONS_EMAIL_ASYNC=True)
def test_redis_caido_no_rompe(admin, contable, caso, django_capture_on_commit_callbacks):
    with mock.patch("notifications.application.dispatcher.django_rq.get_queue",
                    side_effect=ConnectionError("redis caído")):
        with django_capture_on_commit_callbacks(execute=True):
            add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)
    assert Notificacion.objects.filter(caso=caso, tipo="NUEVA_VERSION").count() == 1


def test_notify_sin_destinatarios():
    assert dispatcher.notify([], None, "CASO_CREADO", "x") == []


def test_api_notificaciones(client_for, admin, contable, caso):
    add_version(AddVersionCommand(caso.id, "avance", "EN_PROCESO"), contable)
    c = client_for(admin)

    assert c.get("/api/notificaciones/no-leidas/").data == {"no_leidas": 2}
    pendientes = c.get("/api/notificaciones/?leida=false").data["results"]
    assert {n["tipo"] for n in pendientes} == {"CASO_CREADO", "NUEVA_VERSION"}

    assert c.patch(f"/api/notificaciones/{pendientes[0]['id']}/leer/").status_code == 200
    assert c.get("/api/notificaciones/no-leidas/").data == {"no_leidas": 1}

    assert c.patch("/api/notificaciones/leer-todas/").data["actualizadas"] == 1
    assert c.get("/api/notificaciones/no-leidas/").data == {"no_leidas": 0}


def test_no_marca_notificaciones_ajenas(client_for, admin, contable, caso):
    ajena = Notificacion.objects.filter(usuario=admin).first()
    assert client_for(contable).patch(f"/api/notificaciones/{ajena.id}/leer/").status_code == 404
