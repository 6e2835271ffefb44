"""
Adaptador de salida: Logger a consola.

Implementación de ProcessLogger para la terminal:
- Los errores SIEMPRE se imprimen en stdout con el marcador ❌.
- El progreso (archivo recibido, líneas parseadas, resumen) solo se
  muestra con verbose=True y va a stderr, para que stdout contenga
  únicamente los totales o el diagnóstico.
"""

import sys
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from src.domain.models.resumen import Resumen
from src.domain.models.transferencia import Transferencia
from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(
        self,
        verbose: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._verbose = verbose
        self._out = out
        self._err = err
        self._archivos_recibidos: int = 0
        self._total_transferencias: int = 0
        self._total_nombres: int = 0
        self._total_general: Decimal = Decimal("0")
        self._errores: list[str] = []

    def log_file_received(self, file_path: Path) -> None:
        self._archivos_recibidos += 1
        self._progress(f"  📄 Recibido: {file_path.name}")

    def log_line_parsed(self, numero_linea: int, transferencia: Transferencia) -> None:
        self._progress(
            f"  🔍 Línea {numero_linea}: {transferencia.nombre} — "
            f"{transferencia.monto} ({transferencia.fecha.isoformat()})"
        )

    def log_extraction_complete(self, file_path: Path, num_transferencias: int) -> None:
        self._total_transferencias += num_transferencias
        self._progress(f"  ✅ Completado: {file_path.name} — {num_transferencias} transferencias")

    def log_aggregation_complete(self, resumen: Resumen) -> None:
        self._total_nombres = len(resumen)
        self._total_general = resumen.total_general
        self._progress(f"  📊 Agrupado en {len(resumen)} nombres — total {self._total_general}")

    def log_error(self, error: Exception) -> None:
        self._errores.append(str(error))
        print(f"❌ {error}", file=self._out or sys.stdout)

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "total_transferencias": self._total_transferencias,
            "total_nombres": self._total_nombres,
            "total_general": self._total_general,
            "errores": list(self._errores),
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento (solo en modo verbose)."""
        if not self._verbose:
            return
        resumen = self.get_summary()
        self._progress("=" * 60)
        self._progress("RESUMEN DE PROCESAMIENTO")
        self._progress("=" * 60)
        self._progress(f"  Archivos recibidos:   {resumen['archivos_recibidos']}")
        self._progress(f"  Transferencias:       {resumen['total_transferencias']}")
        self._progress(f"  Nombres distintos:    {resumen['total_nombres']}")
        self._progress(f"  Total general:        {resumen['total_general']}")
        self._progress(f"  Errores:              {len(resumen['errores'])}")
        self._progress("=" * 60)

    def _progress(self, message: str) -> None:
        if self._verbose:
            print(message, file=self._err or sys.stderr)
