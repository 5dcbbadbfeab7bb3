from django.db import models


class TipoNotificacion(models.TextChoices):
    CASO_CREADO = "CASO_CREADO", "Caso creado"
    NUEVA_VERSION = "NUEVA_VERSION", "Nueva versión"
    NUEVO_COMENTARIO = "NUEVO_COMENTARIO", "Nuevo comentario"
    CASO_ASIGNADO = "CASO_ASIGNADO", "Caso asignado"
    NUEVO_REGISTRO = "NUEVO_REGISTRO", "Nuevo registro"
    CUENTA_APROBADA = "CUENTA_APROBADA", "Cuenta aprobada"
