from django.urls import path

from notifications.api.views.notificaciones import (
    NotificacionListView,
    NotificacionMarkAllReadView,
    NotificacionMarkReadView,
    NotificacionUnreadCountView,
)

urlpatterns = [
    path("notificaciones/", NotificacionListView.as_view(), name="notificaciones-list"),
    path("notificaciones/no-leidas/", NotificacionUnreadCountView.as_view(),
         name="notificaciones-no-leidas"),
    path("notificaciones/leer-todas/", NotificacionMarkAllReadView.as_view(),
         name="notificaciones-leer-todas"),
    path("notificaciones/<int:notificacion_id>/leer/", NotificacionMarkReadView.as_view(),
         name="notificaciones-leer"),
]
