from django.contrib.auth import get_user_model
from rest_framework import serializers

from security.domain.enums import Role

User = get_user_model()


class UserAdminSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = (
            "id",
            "email",
            "nombre_completo",
            "role",
            "activo",
            "estado_registro",
            "puede_gestionar_s3",
            "fecha_creacion",
            "last_login",
        )
        read_only_fields = fields


class RoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Role.choices)


class StorageAccessSerializer(serializers.Serializer):
    puede_gestionar_s3 = serializers.BooleanField()
