"""
Puerto de salida: Escritor de resultados.

El dominio produce un Resumen y se lo entrega a quien implemente este
puerto. Hoy la única salida es texto plano en consola.
"""

from abc import ABC, abstractmethod
from typing import TextIO

from src.domain.models.resumen import Resumen


class OutputWriter(ABC):
    """Interfaz para escribir los totales por nombre."""

    @abstractmethod
    def write(self, resumen: Resumen, stream: TextIO | None = None) -> None:
        """Escribe una línea por contraparte.

        Args:
            resumen: Totales agrupados por nombre.
            stream: Destino. None significa la salida estándar.
        """
        ...
