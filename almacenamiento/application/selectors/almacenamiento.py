from almacenamiento.infrastructure.models import ArchivoS3, BucketS3, CarpetaS3
from common.domain.errors import NotFound


def list_folders():
    return CarpetaS3.objects.select_related("creado_por").order_by("ruta_completa")


def get_folder(carpeta_id: int) -> CarpetaS3:
    carpeta = CarpetaS3.objects.filter(id=carpeta_id).first()
    if not carpeta:
        raise NotFound("Carpeta no encontrada", code="CARPETA_NOT_FOUND")
    return carpeta


def list_files(carpeta_id: int | None = None):
    qs = ArchivoS3.objects.select_related("subido_por", "carpeta")
    if carpeta_id is not None:
        qs = qs.filter(carpeta_id=get_folder(carpeta_id).id)
    return qs


def get_file(archivo_id: int) -> ArchivoS3:
    archivo = ArchivoS3.objects.select_related("subido_por", "carpeta").filter(
        id=archivo_id
    ).first()
    if not archivo:
        raise NotFound("Archivo no encontrado", code="ARCHIVO_NOT_FOUND")
    return archivo


def registered_buckets():
    return BucketS3.objects.filter(activo=True).select_related("creado_por")
