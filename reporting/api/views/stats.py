from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from reporting.application.selectors.case_stats import case_stats_for
from security.application.policies import IsActiveUser


@extend_schema(
    tags=["Estadísticas"],
    operation_id="stats_casos",
    responses=inline_serializer(
        "CasoStats",
        {k: serializers.IntegerField() for k in
         ("total", "abiertos", "en_proceso", "cerrados", "contables", "juridicos", "mis_casos")},
    ),
)
class CaseStatsView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request):
        return Response(case_stats_for(request.user))
