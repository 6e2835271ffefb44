"""
Servicio de dominio: Procesador del historial de transferencias.

Orquesta el flujo completo:
1. Recibe la ruta del archivo.
2. Lee el texto (UTF-8) y lo divide en líneas no vacías.
3. Convierte cada línea en Transferencia (parse_line).
4. Agrupa y suma por nombre (sum_by_name).

Política de errores: la PRIMERA línea inválida aborta todo el proceso.
No se saltan líneas ni se devuelven resultados parciales; el historial
se asume como una exportación limpia y cualquier desviación se reporta.
"""

from pathlib import Path

from src.domain.exceptions import ArchivoNoEncontradoError, ExtractionError, ParseError
from src.domain.models.fallo_extraccion import FalloExtraccion
from src.domain.models.resumen import Resumen
from src.domain.models.transferencia import Transferencia
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.aggregator import sum_by_name
from src.domain.services.line_parser import parse_line
from src.domain.shared.text_cleaner import split_statement_lines


class StatementProcessor:
    """Procesa un historial y produce el Resumen de totales por nombre.

    Recibe el logger por constructor; no sabe si imprime a consola o
    acumula en memoria.
    """

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger

    def process_file(self, file_path: Path) -> Resumen:
        """Procesa un archivo y devuelve los totales.

        Raises:
            ArchivoNoEncontradoError: Si la ruta no existe.
            ExtractionError: Si el archivo no se puede leer como UTF-8.
            ParseError: En la primera línea sin monto, nombre o fecha válidos.
        """
        if not file_path.exists():
            raise ArchivoNoEncontradoError(str(file_path))

        self._logger.log_file_received(file_path)
        text = self._read_text(file_path)

        transferencias = self.parse_lines(split_statement_lines(text), file_name=str(file_path))
        self._logger.log_extraction_complete(file_path, len(transferencias))

        resumen = sum_by_name(transferencias)
        self._logger.log_aggregation_complete(resumen)
        return resumen

    def parse_lines(self, lines: list[str], file_name: str = "") -> list[Transferencia]:
        """Convierte las líneas en transferencias, deteniéndose en el primer fallo.

        Raises:
            ParseError: Con el número de línea y el FalloExtraccion original.
        """
        transferencias: list[Transferencia] = []
        for numero, line in enumerate(lines, start=1):
            resultado = parse_line(line)
            if isinstance(resultado, FalloExtraccion):
                raise ParseError(file_name, numero, resultado)
            self._logger.log_line_parsed(numero, resultado)
            transferencias.append(resultado)
        return transferencias

    @staticmethod
    def _read_text(file_path: Path) -> str:
        """Lee el archivo completo como UTF-8.

        Se usa newline="" para que splitlines() vea los terminadores
        originales.
        """
        try:
            with open(file_path, encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ExtractionError(str(file_path), f"no es texto UTF-8 ({e.reason})")
        except OSError as e:
            raise ExtractionError(str(file_path), e.strerror or str(e))
