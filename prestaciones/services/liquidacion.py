"""Servicio de cálculo de la liquidación por terminación de la relación laboral."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict

from prestaciones.config import EngineSettings, engine_settings
from prestaciones.log import get_logger
from prestaciones.models.common import Concepto, FallaValidacion, LineaDetalle, sumar_lineas
from prestaciones.models.liquidacion import (
    LiquidacionInput,
    MotivoTerminacion,
    ResultadoLiquidacion,
    TipoContrato,
)
from prestaciones.services.fechas import (
    calcular_inicio_periodo_decimo,
    calcular_tiempo_servicio,
    calcular_ultimo_aniversario,
)
from prestaciones.services.validacion import (
    primera_falla,
    validar_cantidad,
    validar_rango,
    validar_salario,
)

logger = get_logger(__name__)


class TipoIndemnizacion(str, Enum):
    """Fórmula de indemnización aplicable."""
    NINGUNA = "ninguna"
    DESPIDO = "despido"
    CONCLUSION_OBRA = "conclusion_obra"


class ReglaTerminacion(BaseModel):
    """Conceptos que corresponden a un motivo de terminación."""

    model_config = ConfigDict(frozen=True)

    prima_antiguedad: bool
    indemnizacion: TipoIndemnizacion
    preaviso: bool
    nota: str
    # Nota cuando el contrato definido excluye la prima
    nota_definido: str | None = None


_NOTA_INDEMNIZACION = "Incluye indemnización y prima de antigüedad."
_NOTA_DERECHOS_Y_PRIMA = "Derechos adquiridos y prima de antigüedad."
_NOTA_INDEMNIZACION_DEFINIDO = "Incluye indemnización."
_NOTA_DERECHOS_DEFINIDO = "Solo aplican los derechos adquiridos."

REGLAS_TERMINACION: dict[MotivoTerminacion, ReglaTerminacion] = {
    MotivoTerminacion.DESPIDO_INJUSTIFICADO: ReglaTerminacion(
        prima_antiguedad=True,
        indemnizacion=TipoIndemnizacion.DESPIDO,
        preaviso=True,
        nota=_NOTA_INDEMNIZACION,
        nota_definido=_NOTA_INDEMNIZACION_DEFINIDO,
    ),
    MotivoTerminacion.RENUNCIA_JUSTIFICADA: ReglaTerminacion(
        prima_antiguedad=True,
        indemnizacion=TipoIndemnizacion.DESPIDO,
        preaviso=False,
        nota=_NOTA_INDEMNIZACION,
        nota_definido=_NOTA_INDEMNIZACION_DEFINIDO,
    ),
    MotivoTerminacion.RENUNCIA_VOLUNTARIA: ReglaTerminacion(
        prima_antiguedad=True,
        indemnizacion=TipoIndemnizacion.NINGUNA,
        preaviso=False,
        nota=_NOTA_DERECHOS_Y_PRIMA,
        nota_definido=_NOTA_DERECHOS_DEFINIDO,
    ),
    MotivoTerminacion.VENCIMIENTO_CONTRATO: ReglaTerminacion(
        prima_antiguedad=True,
        indemnizacion=TipoIndemnizacion.NINGUNA,
        preaviso=False,
        nota=_NOTA_DERECHOS_Y_PRIMA,
        nota_definido=_NOTA_DERECHOS_DEFINIDO,
    ),
    MotivoTerminacion.MUTUO_ACUERDO: ReglaTerminacion(
        prima_antiguedad=True,
        indemnizacion=TipoIndemnizacion.NINGUNA,
        preaviso=False,
        nota="Derechos adquiridos y prima de antigüedad; cualquier bonificación adicional queda sujeta al acuerdo entre las partes.",
        nota_definido="Derechos adquiridos; cualquier bonificación adicional queda sujeta al acuerdo entre las partes.",
    ),
    MotivoTerminacion.CONCLUSION_OBRA: ReglaTerminacion(
        prima_antiguedad=False,
        indemnizacion=TipoIndemnizacion.CONCLUSION_OBRA,
        preaviso=False,
        nota="Indemnización especial por conclusión de obra; no aplica prima de antigüedad.",
    ),
    MotivoTerminacion.DESPIDO_JUSTIFICADO: ReglaTerminacion(
        prima_antiguedad=False,
        indemnizacion=TipoIndemnizacion.NINGUNA,
        preaviso=False,
        nota="Solo aplican los derechos adquiridos.",
    ),
}

NOTA_DEFINIDO_SIN_PRIMA = "No aplica prima de antigüedad en contratos por tiempo definido."
NOTA_DEFINIDO_INDEMNIZACION = (
    "Contrato por tiempo definido: la indemnización equivale a los salarios "
    "restantes del contrato y no puede calcularse automáticamente."
)


def _verificar_reglas() -> None:
    """Todo motivo de terminación debe tener su regla."""
    faltantes = [m.value for m in MotivoTerminacion if m not in REGLAS_TERMINACION]
    if faltantes:
        raise RuntimeError(f"Motivos de terminación sin regla: {', '.join(faltantes)}")
    sin_nota = [m.value for m, r in REGLAS_TERMINACION.items() if r.prima_antiguedad and r.nota_definido is None]
    if sin_nota:
        raise RuntimeError(f"Reglas con prima sin nota para contrato definido: {', '.join(sin_nota)}")


_verificar_reglas()


def _validar(data: LiquidacionInput) -> FallaValidacion | None:
    return primera_falla(
        validar_rango(data.fecha_inicio, data.fecha_fin),
        validar_salario(data.salario_mensual, "salario_mensual"),
        validar_cantidad(data.dias_vacaciones_pendientes, "dias_vacaciones_pendientes"),
        validar_cantidad(data.decimo_pendiente, "decimo_pendiente"),
    )


def _factor_indemnizacion(tipo: TipoIndemnizacion, settings: EngineSettings) -> Decimal:
    if tipo == TipoIndemnizacion.DESPIDO:
        return settings.FACTOR_INDEMNIZACION_DESPIDO
    if tipo == TipoIndemnizacion.CONCLUSION_OBRA:
        return settings.FACTOR_INDEMNIZACION_OBRA
    return Decimal("0")


def calcular_liquidacion(
    data: LiquidacionInput,
    settings: EngineSettings | None = None,
) -> ResultadoLiquidacion | FallaValidacion:
    """
    Calcula la liquidación por terminación de la relación laboral.

    Siempre se calculan:
    - Vacaciones vencidas (días pendientes x salario diario)
    - Vacaciones proporcionales (1 día por cada 11 trabajados desde el último aniversario)
    - Décimo tercer mes proporcional (desde el inicio del período en curso)
    - Décimo tercer mes adeudado (monto pendiente)

    Según el motivo de terminación (ver REGLAS_TERMINACION):
    - Prima de antigüedad: una semana de salario por año (solo contratos indefinidos)
    - Indemnización: 3.4 semanas por año (despido injustificado, renuncia justificada)
      o 3 semanas por año (conclusión de obra)
    - Preaviso: un mes de salario si el despido injustificado no fue preavisado

    Devuelve una FallaValidacion si las fechas o montos de entrada no son válidos.
    """
    settings = settings or engine_settings

    falla = _validar(data)
    if falla is not None:
        logger.info("liquidacion_rechazada", campo=falla.campo, codigo=falla.codigo.value)
        return falla

    regla = REGLAS_TERMINACION[data.motivo]
    indefinido = data.tipo_contrato == TipoContrato.INDEFINIDO
    salario = data.salario_mensual

    # Cantidades derivadas
    dias_trabajados = (data.fecha_fin - data.fecha_inicio).days
    anios_fraccion = Decimal(dias_trabajados) / settings.DIAS_POR_ANIO
    salario_diario = salario / settings.DIAS_POR_MES
    salario_semanal = salario * settings.MESES_POR_ANIO / settings.SEMANAS_POR_ANIO

    ultimo_aniversario = calcular_ultimo_aniversario(data.fecha_inicio, data.fecha_fin)
    dias_desde_aniversario = (data.fecha_fin - ultimo_aniversario).days
    dias_vacaciones_proporcionales = Decimal(dias_desde_aniversario) / settings.DIAS_TRABAJO_POR_DIA_VACACION

    inicio_periodo_decimo = calcular_inicio_periodo_decimo(data.fecha_inicio, data.fecha_fin)
    dias_periodo_decimo = (data.fecha_fin - inicio_periodo_decimo).days

    # Derechos adquiridos
    montos: list[tuple[Concepto, str, Decimal]] = [
        (Concepto.VACACIONES_ACUMULADAS, "Vacaciones vencidas", data.dias_vacaciones_pendientes * salario_diario),
        (Concepto.VACACIONES_PROPORCIONALES, "Vacaciones proporcionales", dias_vacaciones_proporcionales * salario_diario),
        (Concepto.DECIMO_ACUMULADO, "Décimo tercer mes adeudado", data.decimo_pendiente),
        (
            Concepto.DECIMO_PROPORCIONAL,
            "Décimo tercer mes proporcional",
            salario * (Decimal(dias_periodo_decimo) / settings.DIAS_MES_PROMEDIO),
        ),
    ]

    notas = [regla.nota]

    # Prima de antigüedad
    if regla.prima_antiguedad:
        if indefinido:
            montos.append((Concepto.PRIMA_ANTIGUEDAD, "Prima de antigüedad", salario_semanal * anios_fraccion))
        else:
            notas = [regla.nota_definido, NOTA_DEFINIDO_SIN_PRIMA]

    # Indemnización
    if regla.indemnizacion != TipoIndemnizacion.NINGUNA:
        if data.motivo == MotivoTerminacion.DESPIDO_INJUSTIFICADO and not indefinido:
            notas = [NOTA_DEFINIDO_INDEMNIZACION, NOTA_DEFINIDO_SIN_PRIMA]
        else:
            factor = _factor_indemnizacion(regla.indemnizacion, settings)
            montos.append((Concepto.INDEMNIZACION, "Indemnización", factor * salario_semanal * anios_fraccion))

    # Preaviso no otorgado
    if regla.preaviso and not data.preaviso_otorgado:
        montos.append((Concepto.PREAVISO, "Preaviso no otorgado", salario))

    lineas = [
        LineaDetalle(concepto=concepto, descripcion=descripcion, monto=monto)
        for concepto, descripcion, monto in montos
        if monto != 0
    ]
    total = sumar_lineas(lineas)

    logger.debug(
        "liquidacion_calculada",
        motivo=data.motivo.value,
        tipo_contrato=data.tipo_contrato.value,
        dias_trabajados=dias_trabajados,
        lineas=len(lineas),
        total=str(total),
    )

    return ResultadoLiquidacion(
        lineas=tuple(lineas),
        total=total,
        motivo=data.motivo,
        tipo_contrato=data.tipo_contrato,
        tiempo_servicio=calcular_tiempo_servicio(data.fecha_inicio, data.fecha_fin),
        dias_trabajados=dias_trabajados,
        anios_fraccion=anios_fraccion,
        ultimo_aniversario=ultimo_aniversario,
        salario_diario=salario_diario,
        salario_semanal=salario_semanal,
        dias_vacaciones_proporcionales=dias_vacaciones_proporcionales,
        inicio_periodo_decimo=inicio_periodo_decimo,
        dias_periodo_decimo=dias_periodo_decimo,
        nota=" ".join(notas),
    )
