"""
Punto de entrada CLI: transfer-history.

Uso:
    # Totales por contraparte de un historial
    transfer-history /ruta/historial.txt

    # Igual, mostrando el progreso en stderr
    transfer-history /ruta/historial.txt --verbose

Este módulo es el ÚNICO lugar donde:
- Se ensamblan los componentes (ConsoleLogger, StatementProcessor, ConsoleWriter).
- Se decide el código de salida del proceso (0 éxito, 1 cualquier error).
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.console_writer import ConsoleWriter
from src.domain.exceptions import ArgumentosInvalidosError, ParserBaseError
from src.domain.services.statement_processor import StatementProcessor


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser que lanza ArgumentosInvalidosError en vez de
    imprimir en stderr y salir con código 2.

    Sin -h/--help: cualquier argumento fuera de la ruta y --verbose es un
    error de uso (código 1)."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentosInvalidosError(message)


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    logger = ConsoleLogger()

    try:
        args = _parse_args(argv)
        logger = ConsoleLogger(verbose=args.verbose)

        processor = StatementProcessor(logger=logger)
        resumen = processor.process_file(Path(args.file_path))
    except ParserBaseError as e:
        logger.log_error(e)
        logger.print_summary()
        sys.exit(1)

    ConsoleWriter().write(resumen)
    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = _ArgumentParser(
        prog="transfer-history",
        add_help=False,
        description="Suma los montos de un historial de transferencias por contraparte",
        epilog="Ejemplo: transfer-history historial.txt",
    )

    parser.add_argument(
        "file_path",
        help="Ruta al archivo de texto con una transferencia por línea",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Muestra el progreso y un resumen final en stderr",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
