"""
Puertos (interfaces) del dominio.

Uso:
    from src.domain.ports import OutputWriter, ProcessLogger
"""

from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.process_logger import ProcessLogger

__all__ = [
    "OutputWriter",
    "ProcessLogger",
]
