# security/management/commands/crear_admin.py
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from security.domain.enums import EstadoRegistro, Role


class Command(BaseCommand):
    help = "Crea (o reactiva) un usuario ADMIN activo para arrancar el sistema."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)
        parser.add_argument("--nombre", required=False, default=None)

    def handle(self, *args, **opts):
        User = get_user_model()
        email = opts["email"].strip().lower()
        nombre = opts["nombre"] or email

        user, created = User.objects.get_or_create(
            email=email, defaults={"nombre_completo": nombre}
        )
        if created:
            user.set_password(opts["password"])
        user.role = Role.ADMIN
        user.activo = True
        user.estado_registro = EstadoRegistro.ACTIVO
        user.is_staff = True
        user.save()

        self.stdout.write(
            self.style.SUCCESS(
                f"{'CREATED' if created else 'EXISTING'} admin={user.id} email={user.email}"
            )
        )
