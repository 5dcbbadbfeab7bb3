from rest_framework import serializers

from casos.application.use_cases.add_comment import AddCommentCommand
from casos.domain.models import ComentarioCaso, VersionCaso


class VersionCasoSerializer(serializers.ModelSerializer):
    actualizado_por_nombre = serializers.CharField(
        source="actualizado_por.nombre_completo", read_only=True
    )

    class Meta:
        model = VersionCaso
        fields = (
            "id",
            "version_numero",
            "tipo_actualizacion",
            "estado_anterior",
            "estado_nuevo",
            "cambios_realizados",
            "comentarios",
            "actualizado_por",
            "actualizado_por_nombre",
            "fecha_actualizacion",
            "datos_snapshot",
        )
        read_only_fields = fields


class ComentarioCasoSerializer(serializers.ModelSerializer):
    usuario_nombre = serializers.CharField(source="usuario.nombre_completo", read_only=True)

    class Meta:
        model = ComentarioCaso
        fields = ("id", "usuario", "usuario_nombre", "comentario", "fecha_comentario")
        read_only_fields = fields


class ComentarioInSerializer(serializers.Serializer):
    comentario = serializers.CharField()

    def to_command(self, caso_id: int) -> AddCommentCommand:
        return AddCommentCommand(caso_id=caso_id, texto=self.validated_data["comentario"])


class CompareQuerySerializer(serializers.Serializer):
    version1 = serializers.IntegerField(min_value=1)
    version2 = serializers.IntegerField(min_value=1)


class DiferenciaSerializer(serializers.Serializer):
    field = serializers.CharField()
    old_value = serializers.JSONField(allow_null=True)
    new_value = serializers.JSONField(allow_null=True)
