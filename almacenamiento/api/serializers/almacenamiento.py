from rest_framework import serializers

from almacenamiento.application.use_cases.manage_buckets import CreateBucketInput
from almacenamiento.application.use_cases.manage_storage import (
    CreateFolderInput,
    UploadFileInput,
)
from almacenamiento.infrastructure.models import ArchivoS3, BucketS3, CarpetaS3


class CarpetaSerializer(serializers.ModelSerializer):
    class Meta:
        model = CarpetaS3
        fields = ("id", "nombre", "ruta_completa", "carpeta_padre", "creado_por",
                  "fecha_creacion")
        read_only_fields = fields


class CarpetaCreateSerializer(serializers.Serializer):
    nombre = serializers.CharField(max_length=255)
    carpeta_padre_id = serializers.IntegerField(required=False, allow_null=True)

    def to_input(self) -> CreateFolderInput:
        return CreateFolderInput(**self.validated_data)


class ArchivoSerializer(serializers.ModelSerializer):
    subido_por_nombre = serializers.CharField(source="subido_por.nombre_completo",
                                              read_only=True)
    carpeta_nombre = serializers.CharField(source="carpeta.nombre", read_only=True,
                                           default=None)

    class Meta:
        model = ArchivoS3
        fields = (
            "id",
            "carpeta",
            "carpeta_nombre",
            "nombre_archivo",
            "tipo_archivo",
            "tamano_bytes",
            "subido_por",
            "subido_por_nombre",
            "fecha_subida",
            "metadata",
        )
        read_only_fields = fields


class ArchivoUploadSerializer(serializers.Serializer):
    archivo = serializers.FileField()
    carpeta_id = serializers.IntegerField(required=False, allow_null=True)

    def to_input(self) -> UploadFileInput:
        return UploadFileInput(archivo=self.validated_data["archivo"],
                               carpeta_id=self.validated_data.get("carpeta_id"))


class BucketSerializer(serializers.ModelSerializer):
    class Meta:
        model = BucketS3
        fields = ("id", "nombre", "region", "descripcion", "creado_por", "activo",
                  "fecha_creacion")
        read_only_fields = fields


class BucketCreateSerializer(serializers.Serializer):
    # Reglas de nombres de S3: minúsculas, dígitos, punto y guion
    nombre = serializers.RegexField(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")
    region = serializers.CharField(max_length=32, required=False, default="us-east-1")
    descripcion = serializers.CharField(required=False, allow_blank=True, default="")

    def to_input(self) -> CreateBucketInput:
        return CreateBucketInput(**self.validated_data)


class RemoteBucketSerializer(serializers.Serializer):
    nombre = serializers.CharField()
    fecha_creacion = serializers.DateTimeField(allow_null=True)


class BucketListSerializer(serializers.Serializer):
    aws_buckets = RemoteBucketSerializer(many=True)
    registered_buckets = BucketSerializer(many=True)
