"""
Utilidades de expresiones regulares compartidas por los extractores.

Los patrones de monto, nombre y fecha son constantes de módulo que se
compilan una sola vez al importar. Si un patrón no compila, se reporta
y se trata como "cero coincidencias": el extractor correspondiente
devuelve su FalloExtraccion normal en vez de romper con un traceback.
"""

import re


def compile_pattern(source: str) -> re.Pattern[str] | None:
    """Compila un patrón regex.

    Returns:
        El patrón compilado, o None si `source` no es una regex válida
        (el error se imprime con el marcador ❌).
    """
    try:
        return re.compile(source)
    except re.error as e:
        print(f"❌ Regex inválida '{source}': {e}")
        return None


def regex_matches(pattern: re.Pattern[str] | None, text: str) -> list[str]:
    """Devuelve todas las coincidencias completas de `pattern` en `text`.

    Se usa group(0) y no findall() porque los patrones tienen grupos
    y findall() devolvería los grupos en lugar del texto completo.

    Ejemplos:
        >>> regex_matches(re.compile(r"\\$\\d+"), "pagó $10 y $20")
        ['$10', '$20']
        >>> regex_matches(None, "pagó $10")
        []
    """
    if pattern is None:
        return []
    return [m.group(0) for m in pattern.finditer(text)]
