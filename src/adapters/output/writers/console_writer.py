"""
Adaptador de salida: Totales por nombre en texto plano.

Formato de cada línea:
    <nombre> : <total>

El total se imprime con str(Decimal), así que conserva los centavos
que tenga la suma ("1500.50", no "1500.5").
"""

import sys
from typing import TextIO

from src.domain.models.resumen import Resumen
from src.domain.ports.output_writer import OutputWriter


class ConsoleWriter(OutputWriter):
    """Escribe el Resumen en stdout (o en el stream indicado)."""

    def write(self, resumen: Resumen, stream: TextIO | None = None) -> None:
        destino = stream or sys.stdout
        for nombre, total in resumen.items():
            print(f"{nombre} : {total}", file=destino)
