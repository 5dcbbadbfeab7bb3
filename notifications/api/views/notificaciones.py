from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.generics import ListAPIView
from rest_framework.response import Response
from rest_framework.views import APIView

from common.domain.errors import NotFound
from notifications.api.serializers.notificacion import NotificacionSerializer
from notifications.infrastructure.models import Notificacion
from security.application.policies import IsActiveUser


@extend_schema(
    tags=["Notificaciones"],
    operation_id="notificaciones_list",
    parameters=[OpenApiParameter("leida", bool, required=False)],
)
class NotificacionListView(ListAPIView):
    permission_classes = [IsActiveUser]
    serializer_class = NotificacionSerializer

    def get_queryset(self):
        qs = Notificacion.objects.filter(usuario=self.request.user).select_related("caso")
        leida = self.request.query_params.get("leida")
        if leida is not None:
            qs = qs.filter(leida=leida.lower() in ("1", "true", "t", "yes", "y"))
        return qs


@extend_schema(
    tags=["Notificaciones"],
    operation_id="notificaciones_no_leidas",
    responses={200: OpenApiResponse(description="Conteo de notificaciones sin leer")},
)
class NotificacionUnreadCountView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request):
        total = Notificacion.objects.filter(usuario=request.user, leida=False).count()
        return Response({"no_leidas": total})


@extend_schema(tags=["Notificaciones"], operation_id="notificaciones_leer")
class NotificacionMarkReadView(APIView):
    permission_classes = [IsActiveUser]

    def patch(self, request, notificacion_id: int):
        updated = Notificacion.objects.filter(
            id=notificacion_id, usuario=request.user
        ).update(leida=True)
        if not updated:
            raise NotFound("Notificación no encontrada.")
        return Response({"ok": True})


@extend_schema(tags=["Notificaciones"], operation_id="notificaciones_leer_todas")
class NotificacionMarkAllReadView(APIView):
    permission_classes = [IsActiveUser]

    def patch(self, request):
        updated = Notificacion.objects.filter(usuario=request.user, leida=False).update(
            leida=True
        )
        return Response({"ok": True, "actualizadas": updated})
