"""Pytest configuration and shared fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from prestaciones.config import EngineSettings
from prestaciones.models import (
    LiquidacionInput,
    MotivoTerminacion,
    TipoContrato,
)


@pytest.fixture
def settings() -> EngineSettings:
    """Statutory defaults, independent of any .env file."""
    return EngineSettings(_env_file=None)


@pytest.fixture
def liquidacion_input():
    """Factory for severance inputs around the four-year reference case."""
    def _build(**overrides) -> LiquidacionInput:
        values = {
            "fecha_inicio": date(2020, 1, 1),
            "fecha_fin": date(2024, 1, 1),
            "salario_mensual": Decimal("1000"),
            "dias_vacaciones_pendientes": Decimal("0"),
            "decimo_pendiente": Decimal("0"),
            "tipo_contrato": TipoContrato.INDEFINIDO,
            "motivo": MotivoTerminacion.DESPIDO_INJUSTIFICADO,
            "preaviso_otorgado": False,
        }
        values.update(overrides)
        return LiquidacionInput(**values)

    return _build
