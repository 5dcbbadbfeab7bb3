from django.contrib import admin

from casos.domain.models import Caso, ComentarioCaso, VersionCaso
from common.admin import ReadOnlyAdmin


@admin.register(Caso)
class CasoAdmin(ReadOnlyAdmin):
    list_display = ("numero_caso", "tipo_caso", "titulo", "estado", "supervisor",
                    "version_actual", "activo", "fecha_actualizacion")
    search_fields = ("numero_caso", "titulo", "cliente_nombre")
    list_filter = ("tipo_caso", "estado", "activo")


@admin.register(VersionCaso)
class VersionCasoAdmin(ReadOnlyAdmin):
    list_display = ("caso", "version_numero", "tipo_actualizacion", "estado_anterior",
                    "estado_nuevo", "actualizado_por", "fecha_actualizacion")
    list_filter = ("tipo_actualizacion",)
    search_fields = ("caso__numero_caso",)


@admin.register(ComentarioCaso)
class ComentarioCasoAdmin(ReadOnlyAdmin):
    list_display = ("caso", "usuario", "fecha_comentario")
    search_fields = ("caso__numero_caso", "comentario")
