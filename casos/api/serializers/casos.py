from rest_framework import serializers

from casos.application.use_cases.add_version import EDITABLE_FIELDS, AddVersionCommand
from casos.application.use_cases.create_case import CreateCaseCommand
from casos.domain.enums import EstadoCaso, TipoCaso
from casos.domain.models import Caso


class UsuarioRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    nombre_completo = serializers.CharField()
    email = serializers.EmailField()


class CasoSerializer(serializers.ModelSerializer):
    creado_por = UsuarioRefSerializer(read_only=True)
    supervisor = UsuarioRefSerializer(read_only=True)
    asignado_a = UsuarioRefSerializer(read_only=True, allow_null=True)

    class Meta:
        model = Caso
        fields = (
            "id",
            "numero_caso",
            "tipo_caso",
            "titulo",
            "descripcion",
            "estado",
            "cliente_nombre",
            "cliente_rfc",
            "rubro",
            "contra_quien",
            "numero_expediente",
            "juzgado_autoridad",
            "ubicacion_autoridad",
            "creado_por",
            "supervisor",
            "asignado_a",
            "version_actual",
            "fecha_creacion",
            "fecha_actualizacion",
        )
        read_only_fields = fields


class _CamposCasoSerializer(serializers.Serializer):
    titulo = serializers.CharField(max_length=255)
    descripcion = serializers.CharField(required=False, allow_blank=True)
    cliente_nombre = serializers.CharField(max_length=255)
    cliente_rfc = serializers.CharField(max_length=20, required=False, allow_null=True,
                                        allow_blank=True)
    rubro = serializers.CharField(max_length=255, required=False, allow_blank=True)
    contra_quien = serializers.CharField(max_length=255, required=False, allow_blank=True)
    numero_expediente = serializers.CharField(max_length=120, required=False, allow_blank=True)
    juzgado_autoridad = serializers.CharField(max_length=255, required=False, allow_blank=True)
    ubicacion_autoridad = serializers.CharField(max_length=255, required=False,
                                                allow_blank=True)
    asignado_a_id = serializers.IntegerField(required=False, allow_null=True)

    def validate_cliente_rfc(self, value):
        # RFC en blanco equivale a "sin RFC"
        return (value or "").strip() or None


class CasoCreateSerializer(_CamposCasoSerializer):
    tipo_caso = serializers.ChoiceField(choices=TipoCaso.choices)

    def to_command(self) -> CreateCaseCommand:
        return CreateCaseCommand(**self.validated_data)


class AddVersionSerializer(_CamposCasoSerializer):
    titulo = serializers.CharField(max_length=255, required=False)
    cliente_nombre = serializers.CharField(max_length=255, required=False)
    nuevo_estado = serializers.ChoiceField(choices=EstadoCaso.choices, required=False)
    cambios_realizados = serializers.CharField(required=False, allow_blank=True)
    comentarios = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def to_command(self, caso_id: int) -> AddVersionCommand:
        data = self.validated_data
        return AddVersionCommand(
            caso_id=caso_id,
            cambios_realizados=data.get("cambios_realizados", ""),
            nuevo_estado=data.get("nuevo_estado"),
            comentarios=data.get("comentarios") or None,
            campos={k: data[k] for k in EDITABLE_FIELDS if k in data},
        )


class SupervisorSerializer(serializers.Serializer):
    supervisor_id = serializers.IntegerField()
