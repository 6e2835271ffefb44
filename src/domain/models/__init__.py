"""
Modelos de dominio del proyecto transfer-history.

Todos los modelos son dataclasses inmutables (frozen=True) sin
dependencias externas.

Uso:
    from src.domain.models import Transferencia, FalloExtraccion, Resumen
"""

from src.domain.models.fallo_extraccion import FalloExtraccion, TipoFallo
from src.domain.models.resumen import Resumen
from src.domain.models.transferencia import Transferencia

__all__ = [
    "FalloExtraccion",
    "Resumen",
    "TipoFallo",
    "Transferencia",
]
