from security.infrastructure.models import Usuario, UsuarioManager  # noqa: F401
