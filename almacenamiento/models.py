from almacenamiento.infrastructure.models import ArchivoS3, BucketS3, CarpetaS3  # noqa: F401
