"""
Modelo de dominio: Transferencia.

Una Transferencia representa una línea del historial ya parseada:
a quién (o de quién), cuándo y cuánto.

Decisiones de diseño:
- `monto` es `Decimal`, nunca `float`: las sumas por nombre deben
  conservar los centavos exactos.
- `fecha` es `date` sin hora; el historial solo trae MM/DD/YYYY.
- Solo se construye cuando los tres campos se extrajeron con éxito.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Transferencia:
    """Una transferencia individual del historial."""

    nombre: str
    """Contraparte extraída de la frase "to ..." / "by ...".
    Se usa tal cual como clave de agrupación (sensible a mayúsculas)."""

    fecha: date
    """Fecha de la transferencia."""

    monto: Decimal
    """Monto exacto, sin el símbolo $ ni comas de miles."""

    def __post_init__(self) -> None:
        """Impide crear transferencias parciales o con tipos incorrectos."""
        if not self.nombre.strip():
            raise ValueError("El nombre de la transferencia no puede estar vacío")
        if not isinstance(self.monto, Decimal):
            raise ValueError(f"monto debe ser Decimal, recibió {type(self.monto).__name__}")
        if not isinstance(self.fecha, date):
            raise ValueError(f"fecha debe ser date, recibió {type(self.fecha).__name__}")
