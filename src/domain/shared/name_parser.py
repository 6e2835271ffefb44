"""
Extracción del nombre de la contraparte.

El nombre viene después de "to" (pagos) o "by" (cobros):
    "Paid $1,200.00 to John Smith on 03/15/2023"      → "John Smith"
    "Received $50 by O'Neil-Park Jr. for 02/01/2022"  → "O'Neil-Park Jr."

LIMITACIÓN CONOCIDA (se conserva a propósito):
El patrón captura de más: además del nombre se lleva la palabra que
sigue ("on", "for", "via", ...). Por eso se descarta el último token.
Si después del nombre vienen DOS palabras, la primera queda pegada al
nombre; si el nombre termina la línea, se pierde su último token.
Cambiar esta heurística cambiaría la salida para historiales existentes.

La palabra clave tampoco exige límite de palabra: "into Ann ..." también
coincide, a partir de "to".
"""

from src.domain.models.fallo_extraccion import FalloExtraccion, TipoFallo
from src.domain.shared.regex_utils import compile_pattern, regex_matches

NAME_PATTERN = compile_pattern(r"(to|by) [a-zA-Z]+(([',. -][a-zA-Z ])?[a-zA-Z]*)*")


def name_from(line: str) -> str | FalloExtraccion:
    """Extrae el nombre de la contraparte de una línea.

    Pasos:
    1. Primera coincidencia de NAME_PATTERN, sin espacios en los extremos.
    2. Se divide por espacios simples.
    3. Se descarta el primer token ("to"/"by") y el último (palabra de más).
    4. Se unen los tokens restantes con un espacio.

    Returns:
        El nombre, o FalloExtraccion(SIN_NOMBRE) si no hay coincidencia
        o si la heurística deja el nombre vacío.
    """
    matches = regex_matches(NAME_PATTERN, line)
    if not matches:
        return FalloExtraccion(TipoFallo.SIN_NOMBRE, line)

    tokens = matches[0].strip().split(" ")
    nombre = " ".join(tokens[1:-1])

    if not nombre.strip():
        return FalloExtraccion(
            TipoFallo.SIN_NOMBRE,
            line,
            f"'{matches[0].strip()}' no deja nombre al quitar la primera y la última palabra",
        )
    return nombre
