from django.contrib import admin

from common.admin import ReadOnlyAdmin
from documentos.infrastructure.models import Documento


@admin.register(Documento)
class DocumentoAdmin(ReadOnlyAdmin):
    list_display = ("nombre_archivo", "caso", "tipo_documento", "tamano", "subido_por",
                    "fecha_subida")
    search_fields = ("nombre_archivo", "caso__numero_caso")
