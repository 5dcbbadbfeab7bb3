from django.db import models


class TipoCaso(models.TextChoices):
    CONTABLE = "CONTABLE", "Contable"
    JURIDICO = "JURIDICO", "Jurídico"


class EstadoCaso(models.TextChoices):
    ABIERTO = "ABIERTO", "Abierto"
    EN_PROCESO = "EN_PROCESO", "En proceso"
    CERRADO = "CERRADO", "Cerrado"


class TipoActualizacion(models.TextChoices):
    VERSION = "VERSION", "Versión"  # actualización formal (supervisor o admin)
    COMENTARIO = "COMENTARIO", "Comentario"  # usuario de la misma categoría


PREFIJOS = {
    TipoCaso.CONTABLE: "CON",
    TipoCaso.JURIDICO: "JUR",
}
