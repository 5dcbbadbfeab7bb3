"""
Operaciones de bucket contra S3/MinIO con boto3. Las credenciales y el
endpoint salen de los mismos ajustes ``AWS_*`` que usa django-storages;
si no están definidos, boto3 recurre a su cadena de credenciales habitual.
"""
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from common.domain.errors import ConflictError, StorageError

logger = logging.getLogger(__name__)

REGION_POR_DEFECTO = "us-east-1"
_YA_EXISTE = {"BucketAlreadyExists", "BucketAlreadyOwnedByYou"}


def s3_client(region: str | None = None):
    return boto3.client(
        "s3",
        region_name=region or getattr(settings, "AWS_S3_REGION_NAME", REGION_POR_DEFECTO),
        endpoint_url=getattr(settings, "AWS_S3_ENDPOINT_URL", None),
        aws_access_key_id=getattr(settings, "AWS_ACCESS_KEY_ID", None),
        aws_secret_access_key=getattr(settings, "AWS_SECRET_ACCESS_KEY", None),
    )


def list_remote_buckets() -> list[dict]:
    try:
        resp = s3_client().list_buckets()
    except (BotoCoreError, ClientError) as exc:
        logger.error("ListBuckets falló: %s", exc)
        raise StorageError("No se pudo consultar el almacenamiento") from exc
    return [
        {"nombre": b["Name"], "fecha_creacion": b.get("CreationDate")}
        for b in resp.get("Buckets", [])
    ]


def create_remote_bucket(nombre: str, region: str) -> None:
    kwargs = {"Bucket": nombre}
    # us-east-1 no acepta LocationConstraint
    if region != REGION_POR_DEFECTO:
        kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}
    try:
        s3_client(region).create_bucket(**kwargs)
    except ClientError as exc:
        code = exc.response.get("Error", {}).get("Code", "")
        if code in _YA_EXISTE:
            raise ConflictError(f"El bucket {nombre} ya existe", code="BUCKET_EXISTS") from exc
        logger.error("CreateBucket %s falló: %s", nombre, exc)
        raise StorageError(f"No se pudo crear el bucket {nombre}") from exc
    except BotoCoreError as exc:
        logger.error("CreateBucket %s falló: %s", nombre, exc)
        raise StorageError(f"No se pudo crear el bucket {nombre}") from exc
