# security/api/views/auth.py
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

from common.domain.errors import AuthenticationFailed
from security.api.serializers.auth import (
    ChangePasswordSerializer,
    ProfileSerializer,
    RegisterSerializer,
    SignInSerializer,
    UserMeSerializer,
)
from security.application.use_cases.register_user import RegisterUserInput, register_user
from security.application.use_cases.sign_in import sign_in


def _user_payload(user):
    return {
        "id": user.id,
        "email": user.email,
        "nombre_completo": user.nombre_completo,
        "role": user.role,
        "activo": user.activo,
    }


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    refresh["role"] = user.role
    access = refresh.access_token
    return refresh, access


@extend_schema(
    tags=["Auth"],
    operation_id="auth_register",
    request=RegisterSerializer,
    responses={201: OpenApiResponse(description="Registro pendiente de aprobación")},
)
class RegisterView(APIView):
    permission_classes = (permissions.AllowAny,)
    authentication_classes = ()
    throttle_scope = "auth"

    def post(self, request):
        ser = RegisterSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = register_user(RegisterUserInput(**ser.validated_data))
        return Response(
            {
                "user": {
                    "id": user.id,
                    "email": user.email,
                    "nombre_completo": user.nombre_completo,
                    "estado_registro": user.estado_registro,
                },
                "message": "Registro exitoso. Tu cuenta será activada por un administrador.",
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Auth"], operation_id="auth_sign_in", request=SignInSerializer)
class SignInView(APIView):
    permission_classes = (permissions.AllowAny,)
    authentication_classes = ()
    throttle_scope = "auth"

    def post(self, request):
        ser = SignInSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = sign_in(
            email=ser.validated_data["email"],
            password=ser.validated_data["password"],
            request=request,
        )

        refresh, access = _tokens_for(user)
        data = {
            "user": _user_payload(user),
            "access_token": str(access),
            "refresh_token": str(refresh),
            "expires_in": int(access.lifetime.total_seconds()),
        }
        return Response(data, status=status.HTTP_200_OK)


@extend_schema(tags=["Auth"], operation_id="auth_refresh")
class RefreshView(TokenRefreshView):
    permission_classes = (permissions.AllowAny,)
    authentication_classes = ()


@extend_schema(tags=["Auth"], operation_id="auth_me")
class MeView(APIView):
    permission_classes = (permissions.IsAuthenticated,)

    def get(self, request):
        ser = UserMeSerializer(request.user)
        return Response({"user": ser.data}, status=status.HTTP_200_OK)


@extend_schema(tags=["Auth"], operation_id="auth_profile", request=ProfileSerializer)
class ProfileView(APIView):
    permission_classes = (permissions.IsAuthenticated,)

    def put(self, request):
        ser = ProfileSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = request.user
        for field, value in ser.validated_data.items():
            setattr(user, field, value)
        if ser.validated_data:
            user.save(update_fields=list(ser.validated_data))
        return Response({"user": UserMeSerializer(user).data})


@extend_schema(tags=["Auth"], operation_id="auth_password", request=ChangePasswordSerializer)
class ChangePasswordView(APIView):
    permission_classes = (permissions.IsAuthenticated,)

    def put(self, request):
        ser = ChangePasswordSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        user = request.user
        if not user.check_password(ser.validated_data["currentPassword"]):
            raise AuthenticationFailed("Contraseña actual incorrecta")
        user.set_password(ser.validated_data["newPassword"])
        user.save(update_fields=["password"])
        return Response({"message": "Contraseña actualizada exitosamente"})
