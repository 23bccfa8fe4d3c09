"""Modelos para el cálculo del salario neto."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .common import ResultadoCalculo


class FrecuenciaPago(str, Enum):
    """Frecuencia de pago del salario."""
    MENSUAL = "mensual"
    QUINCENAL = "quincenal"


class TramoISR(BaseModel):
    """Tramo de la tarifa progresiva del impuesto sobre la renta."""

    model_config = ConfigDict(frozen=True)

    desde: Decimal = Field(..., ge=0, description="Límite inferior (exclusivo) de la renta anual")
    hasta: Decimal | None = Field(default=None, description="Límite superior (inclusivo); None = sin límite")
    tasa: Decimal = Field(..., ge=0, le=1, description="Tasa marginal del tramo")


class SalarioInput(BaseModel):
    """Datos de entrada para el cálculo del salario neto."""

    model_config = ConfigDict(frozen=True)

    salario_bruto: Decimal = Field(..., description="Salario bruto del período de pago")
    frecuencia_pago: FrecuenciaPago = Field(default=FrecuenciaPago.MENSUAL, description="Mensual o quincenal")
    horas_extras: Decimal = Field(default=Decimal("0"), description="Horas extras del mes")
    otros_ingresos: Decimal = Field(default=Decimal("0"), description="Otros ingresos del mes")
    otras_deducciones: Decimal = Field(default=Decimal("0"), description="Otras deducciones del período de pago")


class ResultadoSalario(ResultadoCalculo):
    """Resultado del cálculo del salario neto (cifras por período de pago)."""

    frecuencia_pago: FrecuenciaPago = Field(..., description="Frecuencia aplicada")
    salario_mensual: Decimal = Field(..., description="Salario bruto normalizado a un mes")
    tarifa_horaria: Decimal = Field(..., description="Salario mensual / (4.33 x 40)")
    base_gravable_anual: Decimal = Field(..., description="Base anual del ISR")
    impuesto_anual: Decimal = Field(..., description="ISR anual según la tarifa")
    ingreso_total: Decimal = Field(..., description="Bruto + horas extras + otros ingresos")
    total_deducciones: Decimal = Field(..., description="Suma de todas las deducciones")
    salario_neto: Decimal = Field(..., description="Ingreso total - deducciones (igual al total)")
    nota: str | None = Field(default=None, description="Advertencia si el neto resulta negativo")
