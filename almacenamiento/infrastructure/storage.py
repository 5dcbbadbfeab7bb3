import uuid

from django.utils.text import get_valid_filename


def build_key(ruta_carpeta: str | None, nombre: str) -> str:
    prefijo = (ruta_carpeta or "").strip("/")
    base = f"almacenamiento/{prefijo}/" if prefijo else "almacenamiento/"
    return f"{base}{uuid.uuid4()}-{get_valid_filename(nombre)}"
