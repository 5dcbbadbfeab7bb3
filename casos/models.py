from casos.domain.models import Caso, ComentarioCaso, SecuenciaCaso, VersionCaso  # noqa: F401
