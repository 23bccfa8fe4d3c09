"""
Application configuration management.

This module handles all configuration settings for the application,
including every statutory rate and day-count convention used by the
calculators, so they can be corrected without touching calculation code.
"""

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application environment settings.

    Loads configuration from .env file.
    Settings:
        - APP_NAME: Application name
        - ENV: Environment (dev, prod, staging)
        - DEBUG: Debug mode flag
        - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        - LOG_JSON: Render logs as JSON instead of console output
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    APP_NAME: str = "prestaciones"
    ENV: str = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    LOG_JSON: bool = False


class EngineSettings(BaseSettings):
    """
    Statutory constants for the labor entitlement calculators.

    Every value can be overridden with an environment variable prefixed
    with PRESTACIONES_ (ex: PRESTACIONES_DIAS_MES_PROMEDIO=30.42).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PRESTACIONES_",
        case_sensitive=True,
        extra="ignore"
    )

    # Convenciones de días
    DIAS_POR_MES: Decimal = Field(default=Decimal("30"), gt=0, description="Mes legal para el salario diario")
    DIAS_POR_ANIO: Decimal = Field(default=Decimal("365.25"), gt=0, description="Año continuo para la fracción de años")
    DIAS_MES_PROMEDIO: Decimal = Field(default=Decimal("30.44"), gt=0, description="Mes promedio para el décimo proporcional")
    DIAS_TRABAJO_POR_DIA_VACACION: Decimal = Field(default=Decimal("11"), gt=0, description="Días trabajados por cada día de vacaciones")
    MESES_POR_ANIO: Decimal = Field(default=Decimal("12"), gt=0)
    SEMANAS_POR_ANIO: Decimal = Field(default=Decimal("52"), gt=0)

    # Liquidación
    FACTOR_INDEMNIZACION_DESPIDO: Decimal = Field(default=Decimal("3.4"), ge=0, description="Semanas de salario por año (despido injustificado)")
    FACTOR_INDEMNIZACION_OBRA: Decimal = Field(default=Decimal("3"), ge=0, description="Semanas de salario por año (conclusión de obra)")

    # Salario neto
    TASA_SEGURO_SOCIAL: Decimal = Field(default=Decimal("0.0975"), ge=0, le=1)
    TASA_SEGURO_EDUCATIVO: Decimal = Field(default=Decimal("0.0125"), ge=0, le=1)
    SEMANAS_POR_MES: Decimal = Field(default=Decimal("4.33"), gt=0)
    HORAS_POR_SEMANA: Decimal = Field(default=Decimal("40"), gt=0)
    RECARGO_HORAS_EXTRAS: Decimal = Field(default=Decimal("1.5"), ge=0)

    # Décimo tercer mes
    MESES_VENTANA_DECIMO: int = Field(default=4, ge=4, le=5, description="4: meses previos al corte; 5: incluye el mes de corte")
    DIVISOR_DECIMO: Decimal = Field(default=Decimal("12"), gt=0)


app_settings = AppSettings()
engine_settings = EngineSettings()
