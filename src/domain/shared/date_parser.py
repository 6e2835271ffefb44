"""
Extracción de la fecha de una transferencia.

El historial usa formato americano MM/DD/YYYY. El patrón valida el día
contra el mes, incluyendo la regla de años bisiestos para el 29 de
febrero (divisible entre 4 y no entre 100, salvo que sea divisible
entre 400):
    02/29/2000 → válida
    02/29/2024 → válida
    02/29/1900 → NO coincide
    02/30/2023 → NO coincide

El mes y el día aceptan el cero inicial opcional ("3/5/2023").
Años soportados: 1900-9999.
"""

from datetime import date, datetime

from src.domain.models.fallo_extraccion import FalloExtraccion, TipoFallo
from src.domain.shared.regex_utils import compile_pattern, regex_matches

DATE_FORMAT = "%m/%d/%Y"

DATE_PATTERN = compile_pattern(
    r"("
    # Días 1-28 de cualquier mes, 29-30 de todo mes salvo febrero, 31 de meses largos
    r"((0?[1-9]|1[012])/(0?[1-9]|1\d|2[0-8])|(0?[13456789]|1[012])/(29|30)|(0?[13578]|1[02])/31)"
    r"/(19|[2-9]\d)\d{2}"
    # 29 de febrero solo en bisiestos
    r"|0?2/29/((19|[2-9]\d)(0[48]|[2468][048]|[13579][26])|(([2468][048]|[3579][26])00))"
    r")"
)


def date_from(line: str) -> date | FalloExtraccion:
    """Extrae la primera fecha MM/DD/YYYY válida de una línea.

    Returns:
        Objeto date, o FalloExtraccion con:
        - SIN_FECHA si ninguna subcadena coincide con el patrón.
        - FECHA_INVALIDA si la coincidencia no se puede parsear con
          DATE_FORMAT.

    Ejemplos:
        >>> date_from("Paid $10 to Ann Lee on 03/15/2023")
        datetime.date(2023, 3, 15)
    """
    matches = regex_matches(DATE_PATTERN, line)
    if not matches:
        return FalloExtraccion(TipoFallo.SIN_FECHA, line)
    return parse_american_date(matches[0], line)


def parse_american_date(date_text: str, line: str = "") -> date | FalloExtraccion:
    """Parsea un texto MM/DD/YYYY con DATE_FORMAT.

    Un texto que ya pasó DATE_PATTERN no debería fallar aquí; si falla,
    se reporta como FECHA_INVALIDA en vez de propagar el ValueError.

    Args:
        date_text: Texto de la fecha. Ejemplo: "03/15/2023".
        line: Línea de origen, para el mensaje de error.
    """
    try:
        return datetime.strptime(date_text, DATE_FORMAT).date()
    except ValueError as e:
        return FalloExtraccion(
            TipoFallo.FECHA_INVALIDA,
            line or date_text,
            f"no se pudo obtener fecha de '{date_text}': {e}",
        )
