"""
Modelo de dominio: Fallo de extracción de un campo.

Los extractores de monto, nombre y fecha no lanzan excepciones ni
terminan el proceso: devuelven el valor extraído o un FalloExtraccion.
El procesador es quien decide convertir el primer fallo en ParseError.

Uso:
    resultado = money_from(linea)
    if isinstance(resultado, FalloExtraccion):
        ...
"""

from dataclasses import dataclass
from enum import Enum


class TipoFallo(Enum):
    """Tipos de fallo posibles al extraer los campos de una línea."""

    SIN_MONTO = "sin monto"
    SIN_NOMBRE = "sin nombre"
    SIN_FECHA = "sin fecha"
    FECHA_INVALIDA = "fecha no parseable"


@dataclass(frozen=True)
class FalloExtraccion:
    """Describe por qué una línea no produjo un campo válido."""

    tipo: TipoFallo
    """Qué campo falló y cómo."""

    linea: str
    """Texto completo de la línea problemática, tal como viene del archivo."""

    detalle: str = ""
    """Información adicional opcional (ej: el texto de fecha que no se pudo parsear)."""

    @property
    def mensaje(self) -> str:
        """Mensaje legible para el usuario.

        Ejemplo: "Transacción inválida, sin fecha: Paid $5 to Ann on"
        """
        mensaje = f"Transacción inválida, {self.tipo.value}: {self.linea}"
        if self.detalle:
            mensaje += f" — {self.detalle}"
        return mensaje
