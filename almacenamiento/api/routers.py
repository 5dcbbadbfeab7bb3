from django.urls import path

from almacenamiento.api.views.archivos import (
    ArchivoDescargaView,
    ArchivoDetailView,
    ArchivosView,
    CarpetasView,
)
from almacenamiento.api.views.buckets import BucketsView

urlpatterns = [
    path("s3/carpetas/", CarpetasView.as_view(), name="s3-carpetas"),
    path("s3/archivos/", ArchivosView.as_view(), name="s3-archivos"),
    path("s3/archivos/<int:archivo_id>/", ArchivoDetailView.as_view(), name="s3-archivos-detail"),
    path("s3/archivos/<int:archivo_id>/descargar/", ArchivoDescargaView.as_view(),
         name="s3-archivos-descargar"),
    path("buckets/", BucketsView.as_view(), name="buckets"),
]
