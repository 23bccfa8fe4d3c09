"""Modelos para el cálculo del décimo tercer mes parcial."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .common import ResultadoCalculo


class PeriodoDecimo(str, Enum):
    """Partida del décimo tercer mes, identificada por su fecha de corte."""
    PRIMER = "primer"  # corte 15 de abril
    SEGUNDO = "segundo"  # corte 15 de agosto
    TERCER = "tercer"  # corte 15 de diciembre


class Mes(str, Enum):
    """Mes calendario."""
    ENERO = "enero"
    FEBRERO = "febrero"
    MARZO = "marzo"
    ABRIL = "abril"
    MAYO = "mayo"
    JUNIO = "junio"
    JULIO = "julio"
    AGOSTO = "agosto"
    SEPTIEMBRE = "septiembre"
    OCTUBRE = "octubre"
    NOVIEMBRE = "noviembre"
    DICIEMBRE = "diciembre"


class DecimoInput(BaseModel):
    """Datos de entrada para el décimo tercer mes parcial."""

    model_config = ConfigDict(frozen=True)

    periodo: PeriodoDecimo = Field(..., description="Partida a calcular")
    salarios: dict[Mes, Decimal] = Field(
        default_factory=dict,
        description="Ingresos por mes; un mes ausente cuenta como cero"
    )


class IngresoMensual(BaseModel):
    """Ingreso de un mes incluido en la partida."""

    model_config = ConfigDict(frozen=True)

    mes: Mes
    monto: Decimal


class ResultadoDecimo(ResultadoCalculo):
    """Resultado del décimo tercer mes parcial."""

    periodo: PeriodoDecimo = Field(..., description="Partida calculada")
    meses_incluidos: tuple[Mes, ...] = Field(..., description="Meses sumados, en orden")
    desglose: tuple[IngresoMensual, ...] = Field(..., description="Ingreso usado por cada mes incluido")
    ingresos_periodo: Decimal = Field(..., description="Suma de los ingresos del período")
