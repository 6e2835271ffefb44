"""
Tests para los modelos de dominio.

Verifican validaciones, propiedades derivadas e inmutabilidad.
"""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import FalloExtraccion, Resumen, TipoFallo, Transferencia


class TestTransferencia:
    """Pruebas para el modelo Transferencia."""

    def test_crear_transferencia(self):
        t = Transferencia(nombre="John Smith", fecha=date(2023, 3, 15), monto=Decimal("1200.00"))
        assert t.nombre == "John Smith"
        assert t.monto == Decimal("1200.00")

    def test_nombre_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            Transferencia(nombre="   ", fecha=date(2023, 3, 15), monto=Decimal("1"))

    def test_monto_float_lanza_error(self):
        with pytest.raises(ValueError, match="Decimal"):
            Transferencia(nombre="Ann", fecha=date(2023, 3, 15), monto=1.5)  # type: ignore

    def test_fecha_string_lanza_error(self):
        with pytest.raises(ValueError, match="date"):
            Transferencia(nombre="Ann", fecha="03/15/2023", monto=Decimal("1"))  # type: ignore

    def test_es_inmutable(self):
        t = Transferencia(nombre="Ann", fecha=date(2023, 3, 15), monto=Decimal("1"))
        with pytest.raises(FrozenInstanceError):
            t.monto = Decimal("2")  # type: ignore


class TestFalloExtraccion:
    """Pruebas para el modelo FalloExtraccion."""

    def test_mensaje_incluye_tipo_y_linea(self):
        fallo = FalloExtraccion(TipoFallo.SIN_FECHA, "Paid $5 to Ann Lee today")
        assert fallo.mensaje == "Transacción inválida, sin fecha: Paid $5 to Ann Lee today"

    def test_mensaje_incluye_detalle(self):
        fallo = FalloExtraccion(TipoFallo.FECHA_INVALIDA, "linea", "detalle extra")
        assert fallo.mensaje.endswith("— detalle extra")


class TestResumen:
    """Pruebas para el modelo Resumen."""

    def test_total_general(self):
        resumen = Resumen(
            totales={"Ann": Decimal("10.50"), "Bob": Decimal("4.50")},
            num_transferencias=3,
        )
        assert resumen.total_general == Decimal("15.00")
        assert len(resumen) == 2
        assert list(resumen.totales) == ["Ann", "Bob"]

    def test_total_general_con_mas_de_28_digitos(self):
        resumen = Resumen(
            totales={"Ann": Decimal("12345678901234567890123456789.01"), "Bob": Decimal("0.99")},
            num_transferencias=2,
        )
        assert str(resumen.total_general) == "12345678901234567890123456790.00"

    def test_resumen_vacio(self):
        resumen = Resumen(totales={})
        assert resumen.total_general == Decimal("0")
        assert len(resumen) == 0

    def test_totales_son_de_solo_lectura(self):
        resumen = Resumen(totales={"Ann": Decimal("1")}, num_transferencias=1)
        with pytest.raises(TypeError):
            resumen.totales["Bob"] = Decimal("2")  # type: ignore

    def test_copia_el_dict_original(self):
        totales = {"Ann": Decimal("1")}
        resumen = Resumen(totales=totales, num_transferencias=1)
        totales["Bob"] = Decimal("2")
        assert "Bob" not in resumen.totales

    def test_num_transferencias_negativo_lanza_error(self):
        with pytest.raises(ValueError, match="negativo"):
            Resumen(totales={}, num_transferencias=-1)
