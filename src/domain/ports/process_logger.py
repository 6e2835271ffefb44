"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio que ocurren al procesar un historial:
- "Se recibió un archivo"
- "Se parseó una línea"
- "Se parsearon todas las líneas"
- "Se agruparon los totales"
- "Hubo un error"

La implementación decide cómo mostrarlos (consola, memoria en tests).
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.resumen import Resumen
from src.domain.models.transferencia import Transferencia


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    @abstractmethod
    def log_file_received(self, file_path: Path) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_line_parsed(self, numero_linea: int, transferencia: Transferencia) -> None:
        """Registra una línea convertida con éxito en Transferencia.

        Args:
            numero_linea: Número de línea no vacía (1-indexed).
            transferencia: Resultado del parseo.
        """
        ...

    @abstractmethod
    def log_extraction_complete(self, file_path: Path, num_transferencias: int) -> None:
        """Registra que todas las líneas del archivo se parsearon."""
        ...

    @abstractmethod
    def log_aggregation_complete(self, resumen: Resumen) -> None:
        """Registra el fin de la agrupación por nombre.

        Args:
            resumen: Totales ya calculados (nombres distintos y total general).
        """
        ...

    @abstractmethod
    def log_error(self, error: Exception) -> None:
        """Registra un error fatal. Se espera que la implementación
        muestre solo el mensaje, nunca un traceback."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen del procesamiento.

        Returns:
            {
                'archivos_recibidos': int,
                'total_transferencias': int,
                'total_nombres': int,
                'total_general': Decimal,
                'errores': List[str],
            }
        """
        ...
