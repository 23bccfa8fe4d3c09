"""Unit tests for configuration management."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from prestaciones.config import AppSettings, EngineSettings


class TestEngineSettings:
    """Test suite for engine settings."""

    def test_statutory_defaults(self) -> None:
        settings = EngineSettings(_env_file=None)

        assert settings.DIAS_POR_MES == Decimal("30")
        assert settings.DIAS_POR_ANIO == Decimal("365.25")
        assert settings.DIAS_MES_PROMEDIO == Decimal("30.44")
        assert settings.TASA_SEGURO_SOCIAL == Decimal("0.0975")
        assert settings.TASA_SEGURO_EDUCATIVO == Decimal("0.0125")
        assert settings.MESES_VENTANA_DECIMO == 4

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("PRESTACIONES_DIAS_MES_PROMEDIO", "30.42")
        settings = EngineSettings(_env_file=None)

        assert settings.DIAS_MES_PROMEDIO == Decimal("30.42")

    def test_zero_divisor_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EngineSettings(_env_file=None, DIAS_POR_MES=Decimal("0"))


class TestAppSettings:
    """Test suite for application settings."""

    def test_defaults(self) -> None:
        settings = AppSettings(_env_file=None)

        assert settings.APP_NAME == "prestaciones"
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_JSON is False

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, LOG_LEVEL="VERBOSE")
