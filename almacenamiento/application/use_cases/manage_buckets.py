import logging
from dataclasses import dataclass

from almacenamiento.application.selectors.almacenamiento import registered_buckets
from almacenamiento.infrastructure import buckets
from almacenamiento.infrastructure.models import BucketS3
from common.domain.errors import ConflictError

logger = logging.getLogger(__name__)


@dataclass
class CreateBucketInput:
    nombre: str
    region: str = buckets.REGION_POR_DEFECTO
    descripcion: str = ""


def list_buckets() -> dict:
    return {
        "aws_buckets": buckets.list_remote_buckets(),
        "registered_buckets": list(registered_buckets()),
    }


def create_bucket(inp: CreateBucketInput, actor) -> BucketS3:
    """Crea el bucket remoto y luego lo registra; sin bucket remoto no hay fila."""
    if BucketS3.objects.filter(nombre=inp.nombre).exists():
        raise ConflictError(f"El bucket {inp.nombre} ya está registrado", code="BUCKET_EXISTS")

    buckets.create_remote_bucket(inp.nombre, inp.region)
    bucket = BucketS3.objects.create(
        nombre=inp.nombre, region=inp.region, descripcion=inp.descripcion, creado_por=actor
    )
    logger.info("Bucket creado: %s (%s) por %s", bucket.nombre, bucket.region, actor.email)
    return bucket
