"""Models package."""

from .common import (
    CodigoError,
    Concepto,
    FallaValidacion,
    LineaDetalle,
    ResultadoCalculo,
    TiempoServicio,
    TipoLinea,
    sumar_lineas,
)
from .liquidacion import (
    LiquidacionInput,
    MotivoTerminacion,
    ResultadoLiquidacion,
    TipoContrato,
)
from .salario import (
    FrecuenciaPago,
    ResultadoSalario,
    SalarioInput,
    TramoISR,
)
from .decimo import (
    DecimoInput,
    IngresoMensual,
    Mes,
    PeriodoDecimo,
    ResultadoDecimo,
)

__all__ = [
    "CodigoError",
    "Concepto",
    "FallaValidacion",
    "LineaDetalle",
    "ResultadoCalculo",
    "TiempoServicio",
    "TipoLinea",
    "sumar_lineas",
    "LiquidacionInput",
    "MotivoTerminacion",
    "ResultadoLiquidacion",
    "TipoContrato",
    "FrecuenciaPago",
    "ResultadoSalario",
    "SalarioInput",
    "TramoISR",
    "DecimoInput",
    "IngresoMensual",
    "Mes",
    "PeriodoDecimo",
    "ResultadoDecimo",
]
