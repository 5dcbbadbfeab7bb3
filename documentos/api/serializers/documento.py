from rest_framework import serializers

from documentos.application.use_cases.manage_documents import UploadDocumentInput
from documentos.infrastructure.models import Documento


class DocumentoSerializer(serializers.ModelSerializer):
    subido_por_nombre = serializers.CharField(source="subido_por.nombre_completo",
                                              read_only=True)

    class Meta:
        model = Documento
        fields = (
            "id",
            "caso",
            "nombre_archivo",
            "tipo_documento",
            "tamano",
            "subido_por",
            "subido_por_nombre",
            "fecha_subida",
            "notas",
        )
        read_only_fields = fields


class DocumentoUploadSerializer(serializers.Serializer):
    archivo = serializers.FileField()
    notas = serializers.CharField(required=False, allow_blank=True, default="")

    def to_input(self, caso_id: int) -> UploadDocumentInput:
        return UploadDocumentInput(
            caso_id=caso_id,
            archivo=self.validated_data["archivo"],
            notas=self.validated_data["notas"],
        )


class DescargaSerializer(serializers.Serializer):
    url = serializers.CharField()
    filename = serializers.CharField()
    expires_in = serializers.IntegerField()
