"""Unit tests for the shared value types."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from prestaciones.models import (
    Concepto,
    LineaDetalle,
    ResultadoCalculo,
    TipoLinea,
)


def _linea(concepto, monto, tipo=TipoLinea.INGRESO):
    return LineaDetalle(concepto=concepto, descripcion=concepto.value, monto=Decimal(monto), tipo=tipo)


class TestLineaDetalle:
    """Test line items."""

    def test_deduction_sign(self) -> None:
        linea = _linea(Concepto.SEGURO_SOCIAL, "97.5", TipoLinea.DEDUCCION)
        assert linea.monto_con_signo == Decimal("-97.5")

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _linea(Concepto.PREAVISO, "-1")

    def test_frozen(self) -> None:
        linea = _linea(Concepto.PREAVISO, "1")
        with pytest.raises(ValidationError):
            linea.monto = Decimal("2")


class TestResultadoCalculo:
    """Test the total invariant."""

    def test_total_must_match_lines(self) -> None:
        with pytest.raises(ValidationError):
            ResultadoCalculo(lineas=(_linea(Concepto.PREAVISO, "10"),), total=Decimal("5"))

    def test_signed_total_and_lookup(self) -> None:
        result = ResultadoCalculo(
            lineas=(
                _linea(Concepto.SALARIO_BRUTO, "1000"),
                _linea(Concepto.SEGURO_SOCIAL, "97.5", TipoLinea.DEDUCCION),
            ),
            total=Decimal("902.5"),
        )

        assert result.ok is True
        assert result.monto(Concepto.SEGURO_SOCIAL) == Decimal("97.5")
        assert result.monto(Concepto.IMPUESTO_RENTA) == 0
        assert result.linea(Concepto.IMPUESTO_RENTA) is None
