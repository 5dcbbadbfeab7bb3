from dataclasses import dataclass


@dataclass(frozen=True)
class NumeroCaso:
    value: str  # p.ej. "CON-2026-000123"

    @classmethod
    def build(cls, prefijo: str, periodo: str, secuencia: int) -> "NumeroCaso":
        return cls(f"{prefijo}-{periodo}-{secuencia:06d}")

    def parts(self):
        prefijo, periodo, secuencia = self.value.split("-")
        return prefijo, periodo, int(secuencia)
