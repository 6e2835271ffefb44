"""
Agrupación genérica de secuencias por una clave.
"""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Agrupa `items` en un dict clave → lista de elementos.

    Las claves quedan en el orden en que aparecen por primera vez y cada
    lista conserva el orden de entrada.

    Ejemplos:
        >>> group_by(["ana", "beto", "alma"], key=lambda s: s[0])
        {'a': ['ana', 'alma'], 'b': ['beto']}
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
