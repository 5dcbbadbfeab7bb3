from django.db import models


class Role(models.TextChoices):
    ADMIN = "ADMIN", "Administrador"
    CONTABLE = "CONTABLE", "Contable"
    JURIDICO = "JURIDICO", "Jurídico"


class EstadoRegistro(models.TextChoices):
    PENDIENTE = "PENDIENTE", "Pendiente"
    ACTIVO = "ACTIVO", "Activo"
    INACTIVO = "INACTIVO", "Inactivo"
