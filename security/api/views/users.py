from django.contrib.auth import get_user_model
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.generics import ListAPIView
from rest_framework.response import Response
from rest_framework.views import APIView

from security.api.serializers.users import (
    RoleSerializer,
    StorageAccessSerializer,
    UserAdminSerializer,
)
from security.application.policies import IsAdmin
from security.application.use_cases.manage_users import (
    approve_user,
    change_user_role,
    set_storage_access,
    toggle_user_status,
)
from security.domain.enums import EstadoRegistro

User = get_user_model()


@extend_schema(
    tags=["Admin · Usuarios"],
    operation_id="users_list",
    parameters=[
        OpenApiParameter("estado_registro", str, required=False),
        OpenApiParameter("role", str, required=False),
    ],
)
class UserListView(ListAPIView):
    permission_classes = [IsAdmin]
    serializer_class = UserAdminSerializer
    search_fields = ("email", "nombre_completo")

    def get_queryset(self):
        qs = User.objects.all().order_by("-fecha_creacion")
        if (estado := self.request.query_params.get("estado_registro")):
            qs = qs.filter(estado_registro=estado)
        if (role := self.request.query_params.get("role")):
            qs = qs.filter(role=role)
        return qs


@extend_schema(tags=["Admin · Usuarios"], operation_id="users_pending")
class PendingUserListView(ListAPIView):
    permission_classes = [IsAdmin]
    serializer_class = UserAdminSerializer

    def get_queryset(self):
        return User.objects.filter(estado_registro=EstadoRegistro.PENDIENTE).order_by(
            "fecha_creacion"
        )


@extend_schema(tags=["Admin · Usuarios"], operation_id="users_approve", request=RoleSerializer)
class ApproveUserView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, user_id: int):
        s = RoleSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = approve_user(user_id=user_id, role=s.validated_data["role"], admin=request.user)
        return Response({"user": UserAdminSerializer(user).data,
                         "message": "Usuario aprobado"})


@extend_schema(tags=["Admin · Usuarios"], operation_id="users_role", request=RoleSerializer)
class ChangeUserRoleView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, user_id: int):
        s = RoleSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = change_user_role(user_id=user_id, role=s.validated_data["role"],
                                admin=request.user)
        return Response({"user": UserAdminSerializer(user).data})


@extend_schema(tags=["Admin · Usuarios"], operation_id="users_toggle_status", request=None)
class ToggleUserStatusView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, user_id: int):
        user = toggle_user_status(user_id=user_id, admin=request.user)
        return Response({"user": UserAdminSerializer(user).data})


@extend_schema(tags=["Admin · Usuarios"], operation_id="users_storage_access",
               request=StorageAccessSerializer)
class StorageAccessView(APIView):
    permission_classes = [IsAdmin]

    def patch(self, request, user_id: int):
        s = StorageAccessSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = set_storage_access(user_id=user_id,
                                  permitido=s.validated_data["puede_gestionar_s3"],
                                  admin=request.user)
        return Response({"user": UserAdminSerializer(user).data})
