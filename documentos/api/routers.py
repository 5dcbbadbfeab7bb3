from django.urls import path

from documentos.api.views.documentos import (
    CasoDocumentosView,
    DocumentoDescargaView,
    DocumentoDetailView,
)

urlpatterns = [
    path("casos/<int:caso_id>/documentos/", CasoDocumentosView.as_view(),
         name="caso-documentos"),
    path("documentos/<int:documento_id>/", DocumentoDetailView.as_view(),
         name="documentos-detail"),
    path("documentos/<int:documento_id>/descargar/", DocumentoDescargaView.as_view(),
         name="documentos-descargar"),
]
