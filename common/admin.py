from django.contrib import admin


class ReadOnlyAdmin(admin.ModelAdmin):
    """Para tablas append-only: se consultan, no se editan desde el admin."""

    actions = None

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
