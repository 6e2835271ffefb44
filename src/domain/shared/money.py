"""
Utilidades para manejo de montos monetarios.

Cada línea del historial trae un monto con signo de dólar en alguna
posición: "Paid $1,200.00 to John Smith on 03/15/2023".

Reglas:
1. Siempre se devuelve Decimal (precisión exacta al sumar por nombre).
2. El monto debe llevar "$"; una línea sin "$" no tiene monto.
3. Formatos aceptados: "$300", "$300.50", "$1,200.00", "$1,234,567.89".
4. Se toma la PRIMERA coincidencia de la línea.
"""

from decimal import Decimal, InvalidOperation

from src.domain.models.fallo_extraccion import FalloExtraccion, TipoFallo
from src.domain.shared.regex_utils import compile_pattern, regex_matches

# $ + (miles agrupados con comas | dígitos corridos) + centavos opcionales.
MONEY_PATTERN = compile_pattern(r"\$([0-9]{1,3},([0-9]{3},)*[0-9]{3}|[0-9]+)(\.[0-9][0-9])?")


def money_from(line: str) -> Decimal | FalloExtraccion:
    """Extrae el monto de una línea del historial.

    Args:
        line: Línea completa del historial.

    Returns:
        Decimal con el monto de la primera coincidencia, o
        FalloExtraccion(SIN_MONTO) si la línea no contiene un monto.

    Ejemplos:
        >>> money_from("Paid $1,200.00 to John Smith on 03/15/2023")
        Decimal('1200.00')
        >>> money_from("Received $45 by Jane Doe on 01/02/2024")
        Decimal('45')
    """
    matches = regex_matches(MONEY_PATTERN, line)
    if not matches:
        return FalloExtraccion(TipoFallo.SIN_MONTO, line)
    return parse_money(matches[0])


def parse_money(text: str) -> Decimal:
    """Convierte un texto con formato monetario a Decimal.

    Quita el símbolo "$" y las comas de miles.

    Raises:
        TypeError: Si `text` no es str.
        ValueError: Si el texto está vacío o no es numérico.

    Ejemplos:
        >>> parse_money("$1,234.56")
        Decimal('1234.56')
        >>> parse_money("1234.50")
        Decimal('1234.50')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_money espera str, recibió {type(text).__name__}")
    if not text.strip():
        raise ValueError("El texto del monto está vacío")

    cleaned = text.strip().replace("$", "").replace(",", "")
    if not cleaned:
        raise ValueError(f"No se pudo extraer un monto de: '{text}'")

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}' (limpio: '{cleaned}')")
