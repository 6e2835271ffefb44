"""
Servicio de dominio: Agregador de transferencias por nombre.

Agrupa por coincidencia EXACTA de `nombre` ("John Smith" y "john smith"
son contrapartes distintas) y suma los montos con aritmética Decimal,
sin redondeos intermedios.
"""

from collections.abc import Sequence

from src.domain.models.resumen import Resumen
from src.domain.models.transferencia import Transferencia
from src.domain.shared.decimal_math import exact_sum
from src.domain.shared.grouping import group_by


def sum_by_name(transferencias: Sequence[Transferencia]) -> Resumen:
    """Suma los montos de las transferencias agrupadas por nombre.

    El resultado no depende del orden de entrada: la suma Decimal es
    exacta (sin el límite de 28 dígitos del contexto por defecto),
    conmutativa y asociativa. Dos transferencias a "John Smith"
    por 1200.00 y 300.50 producen {"John Smith": Decimal("1500.50")}.
    """
    grupos = group_by(transferencias, key=lambda t: t.nombre)
    totales = {nombre: exact_sum(t.monto for t in grupo) for nombre, grupo in grupos.items()}
    return Resumen(totales=totales, num_transferencias=len(transferencias))
