from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from casos.api.serializers.casos import AddVersionSerializer
from casos.api.serializers.historial import (
    ComentarioCasoSerializer,
    ComentarioInSerializer,
    CompareQuerySerializer,
    DiferenciaSerializer,
    VersionCasoSerializer,
)
from casos.application.selectors.casos import get_case_for
from casos.application.selectors.timeline import (
    compare_versions,
    get_version,
    list_case_comments,
    list_timeline,
    list_versions,
)
from casos.application.use_cases.add_comment import add_case_comment, add_ledger_comment
from casos.application.use_cases.add_version import add_version
from security.application.policies import IsActiveUser


class VersionListCreateView(APIView):
    permission_classes = [IsActiveUser]

    @extend_schema(tags=["Historial"], operation_id="versiones_list",
                   responses=VersionCasoSerializer(many=True))
    def get(self, request, caso_id: int):
        caso, _ = get_case_for(request.user, caso_id, "can_view")
        return Response(VersionCasoSerializer(list_versions(caso), many=True).data)

    @extend_schema(tags=["Historial"], operation_id="versiones_create",
                   request=AddVersionSerializer, responses={201: VersionCasoSerializer})
    def post(self, request, caso_id: int):
        s = AddVersionSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        version = add_version(s.to_command(caso_id), request.user)
        return Response(VersionCasoSerializer(version).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=["Historial"], operation_id="versiones_detail",
               responses=VersionCasoSerializer)
class VersionDetailView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request, caso_id: int, numero: int):
        caso, _ = get_case_for(request.user, caso_id, "can_view")
        return Response(VersionCasoSerializer(get_version(caso, numero)).data)


@extend_schema(tags=["Historial"], operation_id="versiones_compare",
               parameters=[CompareQuerySerializer],
               responses=DiferenciaSerializer(many=True))
class VersionCompareView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request, caso_id: int):
        q = CompareQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        caso, _ = get_case_for(request.user, caso_id, "can_view")
        v1, v2 = q.validated_data["version1"], q.validated_data["version2"]
        return Response({
            "version1": v1,
            "version2": v2,
            "diferencias": compare_versions(caso, v1, v2),
        })


@extend_schema(tags=["Historial"], operation_id="historial_list",
               parameters=[OpenApiParameter("tipo", str, required=False,
                                            enum=["VERSION", "COMENTARIO"])],
               responses=VersionCasoSerializer(many=True))
class TimelineView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request, caso_id: int):
        caso, _ = get_case_for(request.user, caso_id, "can_view")
        rows = list_timeline(caso, request.query_params.get("tipo") or None)
        return Response(VersionCasoSerializer(rows, many=True).data)


@extend_schema(tags=["Historial"], operation_id="historial_comentar",
               request=ComentarioInSerializer, responses={201: VersionCasoSerializer})
class TimelineCommentView(APIView):
    permission_classes = [IsActiveUser]

    def post(self, request, caso_id: int):
        s = ComentarioInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        row = add_ledger_comment(s.to_command(caso_id), request.user)
        return Response(VersionCasoSerializer(row).data, status=status.HTTP_201_CREATED)


class ComentarioListCreateView(APIView):
    permission_classes = [IsActiveUser]

    @extend_schema(tags=["Comentarios"], operation_id="comentarios_list",
                   responses=ComentarioCasoSerializer(many=True))
    def get(self, request, caso_id: int):
        caso, _ = get_case_for(request.user, caso_id, "can_view")
        return Response(ComentarioCasoSerializer(list_case_comments(caso), many=True).data)

    @extend_schema(tags=["Comentarios"], operation_id="comentarios_create",
                   request=ComentarioInSerializer, responses={201: ComentarioCasoSerializer})
    def post(self, request, caso_id: int):
        s = ComentarioInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        comentario = add_case_comment(s.to_command(caso_id), request.user)
        return Response(ComentarioCasoSerializer(comentario).data,
                        status=status.HTTP_201_CREATED)
