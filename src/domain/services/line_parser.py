"""
Servicio de dominio: Parser de una línea del historial.

Combina los tres extractores (monto, nombre, fecha) en una Transferencia.
Cada extractor recorre la línea de forma independiente, así que el orden
de los campos dentro de la línea no importa.
"""

from src.domain.models.fallo_extraccion import FalloExtraccion
from src.domain.models.transferencia import Transferencia
from src.domain.shared.date_parser import date_from
from src.domain.shared.money import money_from
from src.domain.shared.name_parser import name_from


def parse_line(line: str) -> Transferencia | FalloExtraccion:
    """Convierte una línea del historial en Transferencia.

    Se extrae en orden monto → nombre → fecha y se devuelve el primer
    FalloExtraccion encontrado, sin intentar los campos restantes.

    Ejemplos:
        >>> parse_line("Paid $300.50 to John Smith on 04/01/2023")
        Transferencia(nombre='John Smith', fecha=datetime.date(2023, 4, 1), monto=Decimal('300.50'))
    """
    monto = money_from(line)
    if isinstance(monto, FalloExtraccion):
        return monto

    nombre = name_from(line)
    if isinstance(nombre, FalloExtraccion):
        return nombre

    fecha = date_from(line)
    if isinstance(fecha, FalloExtraccion):
        return fecha

    return Transferencia(nombre=nombre, fecha=fecha, monto=monto)
