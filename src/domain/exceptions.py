"""
Excepciones de dominio del proyecto transfer-history.

El CLI captura ParserBaseError en un solo lugar, reporta el mensaje
y termina con código 1. Ningún otro módulo llama a sys.exit().

Jerarquía:
    ParserBaseError
    ├── ArgumentosInvalidosError   → Número de argumentos incorrecto
    ├── ArchivoNoEncontradoError   → La ruta del historial no existe
    ├── ExtractionError            → No se pudo leer el texto del archivo
    └── ParseError                 → Una línea no tiene monto, nombre o fecha
"""

from src.domain.models.fallo_extraccion import FalloExtraccion


class ParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class ArgumentosInvalidosError(ParserBaseError):
    """Se lanza cuando el CLI no recibe exactamente una ruta de archivo."""

    def __init__(self, detalle: str = ""):
        self.detalle = detalle
        mensaje = "Argumentos inválidos, indique la ruta del historial de transferencias"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ArchivoNoEncontradoError(ParserBaseError):
    """Se lanza cuando la ruta recibida no existe o no es un archivo."""

    def __init__(self, archivo: str):
        self.archivo = archivo
        super().__init__(f"El archivo no existe: {archivo}")


class ExtractionError(ParserBaseError):
    """Se lanza cuando falla la lectura del texto de un archivo.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - El archivo no está codificado en UTF-8.
    - La ruta es un directorio.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo texto de '{archivo}': {causa}")


class ParseError(ParserBaseError):
    """Se lanza cuando una línea del historial no se puede convertir
    en Transferencia.

    Envuelve el FalloExtraccion devuelto por el parser de líneas para
    que el mensaje incluya el número de línea y el texto problemático.
    """

    def __init__(self, archivo: str, numero_linea: int, fallo: FalloExtraccion):
        self.archivo = archivo
        self.numero_linea = numero_linea
        self.fallo = fallo
        super().__init__(f"{fallo.mensaje} (línea {numero_linea} de '{archivo}')")
