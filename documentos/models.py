from documentos.infrastructure.models import Documento  # noqa: F401
