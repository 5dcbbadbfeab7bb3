from django.contrib import admin

from security.infrastructure.models import Usuario


@admin.register(Usuario)
class UsuarioAdmin(admin.ModelAdmin):
    list_display = ("email", "nombre_completo", "role", "estado_registro", "activo",
                    "fecha_creacion")
    search_fields = ("email", "nombre_completo")
    list_filter = ("role", "estado_registro", "activo", "puede_gestionar_s3")
    readonly_fields = ("password", "last_login", "fecha_creacion")
    exclude = ("groups", "user_permissions")

    def has_delete_permission(self, request, obj=None):
        # Los usuarios se desactivan, no se borran
        return False
