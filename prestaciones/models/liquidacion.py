"""Modelos para el cálculo de la liquidación por terminación de la relación laboral."""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .common import ResultadoCalculo, TiempoServicio


class TipoContrato(str, Enum):
    """Tipo de contrato de trabajo."""
    INDEFINIDO = "indefinido"
    DEFINIDO = "definido"


class MotivoTerminacion(str, Enum):
    """Motivo de la terminación de la relación laboral."""
    DESPIDO_INJUSTIFICADO = "despido_injustificado"
    DESPIDO_JUSTIFICADO = "despido_justificado"
    RENUNCIA_VOLUNTARIA = "renuncia_voluntaria"
    RENUNCIA_JUSTIFICADA = "renuncia_justificada"
    MUTUO_ACUERDO = "mutuo_acuerdo"
    VENCIMIENTO_CONTRATO = "vencimiento_contrato"
    CONCLUSION_OBRA = "conclusion_obra"


class LiquidacionInput(BaseModel):
    """Datos de entrada para el cálculo de la liquidación."""

    model_config = ConfigDict(frozen=True)

    # Fechas clave
    fecha_inicio: date = Field(
        ...,
        description="Fecha de inicio de la relación laboral"
    )

    fecha_fin: date = Field(
        ...,
        description="Fecha de terminación de la relación laboral"
    )

    salario_mensual: Decimal = Field(
        ...,
        description="Salario mensual (debe ser mayor que cero)"
    )

    # Saldos acumulados
    dias_vacaciones_pendientes: Decimal = Field(
        default=Decimal("0"),
        description="Días de vacaciones vencidas no disfrutadas"
    )

    decimo_pendiente: Decimal = Field(
        default=Decimal("0"),
        description="Monto de décimo tercer mes adeudado de períodos anteriores"
    )

    tipo_contrato: TipoContrato = Field(
        default=TipoContrato.INDEFINIDO,
        description="Tipo de contrato: indefinido o definido"
    )

    motivo: MotivoTerminacion = Field(
        ...,
        description="Motivo de la terminación"
    )

    preaviso_otorgado: bool | None = Field(
        default=None,
        description="Si el empleador dio el preaviso (solo relevante en despido injustificado)"
    )


class ResultadoLiquidacion(ResultadoCalculo):
    """Resultado del cálculo de la liquidación."""

    motivo: MotivoTerminacion = Field(..., description="Motivo aplicado")
    tipo_contrato: TipoContrato = Field(..., description="Tipo de contrato aplicado")

    # Tiempo de servicio
    tiempo_servicio: TiempoServicio = Field(..., description="Años, meses y días (método de aniversario)")
    dias_trabajados: int = Field(..., description="Días entre la fecha de inicio y la de fin")
    anios_fraccion: Decimal = Field(..., description="Años continuos usados en los montos")
    ultimo_aniversario: date = Field(..., description="Último aniversario no posterior a la fecha de fin")

    # Bases salariales
    salario_diario: Decimal = Field(..., description="Salario mensual / 30")
    salario_semanal: Decimal = Field(..., description="Salario mensual x 12 / 52")

    # Proporcionales
    dias_vacaciones_proporcionales: Decimal = Field(..., description="Días de vacaciones generados desde el último aniversario")
    inicio_periodo_decimo: date = Field(..., description="Inicio del período de décimo en curso")
    dias_periodo_decimo: int = Field(..., description="Días del período de décimo en curso")

    nota: str | None = Field(default=None, description="Observación sobre los conceptos aplicados")
