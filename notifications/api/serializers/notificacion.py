from rest_framework import serializers

from notifications.infrastructure.models import Notificacion


class NotificacionSerializer(serializers.ModelSerializer):
    numero_caso = serializers.CharField(source="caso.numero_caso", default=None, read_only=True)

    class Meta:
        model = Notificacion
        fields = (
            "id",
            "caso",
            "numero_caso",
            "tipo",
            "mensaje",
            "leida",
            "email_enviado",
            "fecha_creacion",
        )
        read_only_fields = fields
