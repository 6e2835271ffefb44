"""
Modelo de dominio: Resumen de totales por contraparte.

Es la salida del agregador y la entrada del OutputWriter.
Se construye una sola vez por ejecución y no se modifica después.
"""

from collections.abc import ItemsView, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from src.domain.shared.decimal_math import exact_sum


@dataclass(frozen=True)
class Resumen:
    """Totales de transferencias agrupados por nombre."""

    totales: Mapping[str, Decimal]
    """nombre → suma exacta de montos. Se expone como vista de solo lectura."""

    num_transferencias: int = 0
    """Cantidad de transferencias que se sumaron."""

    def __post_init__(self) -> None:
        if self.num_transferencias < 0:
            raise ValueError(f"num_transferencias no puede ser negativo: {self.num_transferencias}")
        # Se copia: el dict del llamador puede seguir cambiando.
        object.__setattr__(self, "totales", MappingProxyType(dict(self.totales)))

    @property
    def total_general(self) -> Decimal:
        """Suma de todos los totales. Decimal("0") si no hay transferencias."""
        return exact_sum(self.totales.values())

    def items(self) -> ItemsView[str, Decimal]:
        return self.totales.items()

    def __len__(self) -> int:
        return len(self.totales)
