from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    # Observabilidad
    path("metrics/", include("django_prometheus.urls")),
    path("health/", include("health_check.urls")),
    path("django-rq/", include("django_rq.urls")),
    # OpenAPI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema")),
    # API por dominio
    path("api/", include("security.api.routers")),
    path("api/", include("casos.api.routers")),
    path("api/", include("documentos.api.routers")),
    path("api/", include("almacenamiento.api.routers")),
    path("api/", include("reporting.api.routers")),
    path("api/", include("notifications.api.routers")),
]
