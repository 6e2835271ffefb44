"""
Aritmética Decimal exacta para los totales.

El contexto por defecto de Python tiene 28 dígitos de precisión: una
suma más larga se redondea en silencio y sale en notación científica
("1.234567890123456789012345679E+28"). Los totales por nombre no pueden
perder centavos, así que la precisión se calcula a partir de los montos.
"""

from collections.abc import Iterable
from decimal import Decimal, Inexact, localcontext


def exact_sum(montos: Iterable[Decimal]) -> Decimal:
    """Suma montos Decimal sin redondear, sin importar cuántos dígitos tengan.

    Ejemplos:
        >>> exact_sum([Decimal("12345678901234567890123456789.01"), Decimal("0.99")])
        Decimal('12345678901234567890123456790.00')
        >>> exact_sum([])
        Decimal('0')
    """
    montos = list(montos)
    if not montos:
        return Decimal("0")

    mayor_exponente = max(m.adjusted() for m in montos)
    menor_exponente = min(m.as_tuple().exponent for m in montos)
    # Dígitos entre la posición más alta y la más baja, más los acarreos.
    digitos = mayor_exponente - menor_exponente + 1 + len(str(len(montos)))

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digitos)
        ctx.traps[Inexact] = True
        return sum(montos, Decimal("0"))
