from django.urls import path

from casos.api.views.casos import (
    CasoDetailView,
    CasoListCreateView,
    CasoPermisosView,
    CasoSupervisorView,
)
from casos.api.views.historial import (
    ComentarioListCreateView,
    TimelineCommentView,
    TimelineView,
    VersionCompareView,
    VersionDetailView,
    VersionListCreateView,
)

urlpatterns = [
    path("casos/", CasoListCreateView.as_view(), name="casos-list"),
    path("casos/<int:caso_id>/", CasoDetailView.as_view(), name="casos-detail"),
    path("casos/<int:caso_id>/permisos/", CasoPermisosView.as_view(), name="casos-permisos"),
    path("casos/<int:caso_id>/supervisor/", CasoSupervisorView.as_view(),
         name="casos-supervisor"),
    # --- Historial ---
    path("casos/<int:caso_id>/versiones/", VersionListCreateView.as_view(),
         name="casos-versiones"),
    path("casos/<int:caso_id>/versiones/compare/", VersionCompareView.as_view(),
         name="casos-versiones-compare"),
    path("casos/<int:caso_id>/versiones/<int:numero>/", VersionDetailView.as_view(),
         name="casos-version-detail"),
    path("casos/<int:caso_id>/historial/", TimelineView.as_view(), name="casos-historial"),
    path("casos/<int:caso_id>/historial/comentarios/", TimelineCommentView.as_view(),
         name="casos-historial-comentarios"),
    # --- Conversación ---
    path("casos/<int:caso_id>/comentarios/", ComentarioListCreateView.as_view(),
         name="casos-comentarios"),
]
