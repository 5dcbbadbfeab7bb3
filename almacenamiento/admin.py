from django.contrib import admin

from almacenamiento.infrastructure.models import ArchivoS3, BucketS3, CarpetaS3
from common.admin import ReadOnlyAdmin


@admin.register(CarpetaS3)
class CarpetaS3Admin(ReadOnlyAdmin):
    list_display = ("ruta_completa", "creado_por", "fecha_creacion")
    search_fields = ("ruta_completa",)


@admin.register(ArchivoS3)
class ArchivoS3Admin(ReadOnlyAdmin):
    list_display = ("nombre_archivo", "carpeta", "tipo_archivo", "tamano_bytes", "subido_por",
                    "fecha_subida")
    search_fields = ("nombre_archivo", "s3_key")


@admin.register(BucketS3)
class BucketS3Admin(admin.ModelAdmin):
    list_display = ("nombre", "region", "activo", "creado_por", "fecha_creacion")
    list_filter = ("activo", "region")
    readonly_fields = ("nombre", "region", "creado_por", "fecha_creacion")
