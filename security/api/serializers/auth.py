# security/api/serializers/auth.py
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    nombre_completo = serializers.CharField(max_length=200)
    password = serializers.CharField(min_length=8, write_only=True)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_nombre_completo(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("nombre_completo requerido.")
        return value


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField()


class ProfileSerializer(serializers.Serializer):
    nombre_completo = serializers.CharField(max_length=200, required=False)
    atlassian_id = serializers.CharField(max_length=120, required=False, allow_blank=True)
    github_username = serializers.CharField(max_length=120, required=False, allow_blank=True)


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField()
    newPassword = serializers.CharField(min_length=8)

    def validate_newPassword(self, value):
        validate_password(value)
        return value


class UserMeSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = (
            "id",
            "email",
            "nombre_completo",
            "role",
            "activo",
            "estado_registro",
            "email_verificado",
            "puede_gestionar_s3",
            "atlassian_id",
            "github_username",
            "fecha_creacion",
            "last_login",
        )
        read_only_fields = fields
