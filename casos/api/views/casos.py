from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.generics import ListAPIView
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend

from casos.api.filters import CasoFilter
from casos.api.serializers.casos import (
    CasoCreateSerializer,
    CasoSerializer,
    SupervisorSerializer,
)
from casos.application.selectors.casos import get_case_for, visible_cases_for
from casos.application.use_cases.create_case import create_case
from casos.application.use_cases.delete_case import delete_case
from casos.application.use_cases.reassign_supervisor import reassign_supervisor
from documentos.api.serializers.documento import DocumentoSerializer
from documentos.application.selectors.documentos import list_documents
from security.application.policies import IsActiveUser


class CasoListCreateView(ListAPIView):
    permission_classes = [IsActiveUser]
    serializer_class = CasoSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter, SearchFilter]
    filterset_class = CasoFilter
    ordering_fields = ("fecha_creacion", "fecha_actualizacion", "estado", "numero_caso")
    ordering = ("-fecha_actualizacion", "-id")
    search_fields = ("numero_caso", "titulo", "cliente_nombre")

    def get_queryset(self):
        return visible_cases_for(self.request.user)

    @extend_schema(tags=["Casos"], operation_id="casos_list")
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(tags=["Casos"], operation_id="casos_create",
                   request=CasoCreateSerializer, responses={201: CasoSerializer})
    def post(self, request):
        s = CasoCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        caso = create_case(s.to_command(), request.user)
        return Response(CasoSerializer(caso).data, status=status.HTTP_201_CREATED)


class CasoDetailView(APIView):
    permission_classes = [IsActiveUser]

    @extend_schema(tags=["Casos"], operation_id="casos_detail", responses=CasoSerializer)
    def get(self, request, caso_id: int):
        caso, caps = get_case_for(request.user, caso_id, "can_view")
        data = CasoSerializer(caso).data
        data["permisos"] = caps.as_dict()
        data["documentos"] = DocumentoSerializer(list_documents(caso), many=True).data
        return Response(data)

    @extend_schema(tags=["Casos"], operation_id="casos_delete", responses={204: None})
    def delete(self, request, caso_id: int):
        delete_case(caso_id=caso_id, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Casos"], operation_id="casos_permisos")
class CasoPermisosView(APIView):
    permission_classes = [IsActiveUser]

    def get(self, request, caso_id: int):
        _, caps = get_case_for(request.user, caso_id, "can_view")
        return Response(caps.as_dict())


@extend_schema(tags=["Casos"], operation_id="casos_supervisor",
               request=SupervisorSerializer, responses=CasoSerializer)
class CasoSupervisorView(APIView):
    permission_classes = [IsActiveUser]

    def patch(self, request, caso_id: int):
        s = SupervisorSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        caso = reassign_supervisor(caso_id=caso_id,
                                   supervisor_id=s.validated_data["supervisor_id"],
                                   actor=request.user)
        return Response(CasoSerializer(caso).data)
