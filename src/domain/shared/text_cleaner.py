"""
Utilidades de limpieza de texto.

Operan sobre strings puros; no saben de montos, nombres ni fechas.
"""


def split_statement_lines(text: str) -> list[str]:
    """Divide el contenido del historial en líneas y descarta las vacías.

    Se usa str.splitlines() para aceptar \\n, \\r\\n y \\r por igual.
    Solo se descartan las líneas EXACTAMENTE vacías: una línea con solo
    espacios se conserva y fallará después al no tener monto.

    Ejemplos:
        >>> split_statement_lines("a\\r\\n\\nb\\n")
        ['a', 'b']
        >>> split_statement_lines("a\\n   \\nb")
        ['a', '   ', 'b']
    """
    return [line for line in text.splitlines() if line != ""]
