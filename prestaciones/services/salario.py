"""
Cálculo del salario neto.

Salario neto = Bruto + Horas extras + Otros ingresos
               - Seguro Social (9.75%) - Seguro Educativo (1.25%)
               - ISR - Otras deducciones

El ISR se calcula sobre la base anual (bruto mensual - CSS - SE) x 12,
sin horas extras ni otros ingresos, y se retiene en doceavas partes.
"""

from decimal import Decimal

from prestaciones.config import EngineSettings, engine_settings
from prestaciones.log import get_logger
from prestaciones.models.common import (
    Concepto,
    FallaValidacion,
    LineaDetalle,
    TipoLinea,
    sumar_lineas,
)
from prestaciones.models.salario import (
    FrecuenciaPago,
    ResultadoSalario,
    SalarioInput,
    TramoISR,
)
from prestaciones.services.validacion import primera_falla, validar_cantidad, validar_salario

logger = get_logger(__name__)


# Tarifa progresiva anual
TRAMOS_ISR: tuple[TramoISR, ...] = (
    TramoISR(desde=Decimal("0"), hasta=Decimal("11000"), tasa=Decimal("0")),
    TramoISR(desde=Decimal("11000"), hasta=Decimal("50000"), tasa=Decimal("0.15")),
    TramoISR(desde=Decimal("50000"), hasta=None, tasa=Decimal("0.25")),
)

# Períodos de pago por mes
PERIODOS_POR_MES = {
    FrecuenciaPago.MENSUAL: Decimal("1"),
    FrecuenciaPago.QUINCENAL: Decimal("2"),
}


def calcular_isr_anual(base_anual: Decimal, tramos: tuple[TramoISR, ...] = TRAMOS_ISR) -> Decimal:
    """
    Calcula el impuesto sobre la renta anual según la tarifa por tramos.

    Cada tramo grava solo la porción de la base que cae dentro de él, por lo
    que la función es continua en todos los límites:
    - hasta 11 000: exento
    - de 11 000 a 50 000: 15% del excedente de 11 000
    - más de 50 000: 5 850 + 25% del excedente de 50 000
    """
    impuesto = Decimal("0")
    for tramo in tramos:
        if base_anual <= tramo.desde:
            break
        tope = base_anual if tramo.hasta is None else min(base_anual, tramo.hasta)
        impuesto += (tope - tramo.desde) * tramo.tasa
    return impuesto


def _validar(data: SalarioInput) -> FallaValidacion | None:
    return primera_falla(
        validar_salario(data.salario_bruto, "salario_bruto"),
        validar_cantidad(data.horas_extras, "horas_extras"),
        validar_cantidad(data.otros_ingresos, "otros_ingresos"),
        validar_cantidad(data.otras_deducciones, "otras_deducciones"),
    )


def calcular_salario_neto(
    data: SalarioInput,
    settings: EngineSettings | None = None,
) -> ResultadoSalario | FallaValidacion:
    """
    Calcula el salario neto del período de pago.

    Todas las cifras se calculan primero sobre el mes y luego se dividen
    entre los períodos de pago del mes (2 si es quincenal). Las otras
    deducciones ya vienen expresadas por período y no se dividen.

    Args:
        data: Salario bruto del período, frecuencia y conceptos opcionales.
        settings: Tasas y convenciones; por defecto las del entorno.

    Returns:
        ResultadoSalario con el desglose del período, o FallaValidacion.
    """
    settings = settings or engine_settings

    falla = _validar(data)
    if falla is not None:
        logger.info("salario_rechazado", campo=falla.campo, codigo=falla.codigo.value)
        return falla

    periodos = PERIODOS_POR_MES[data.frecuencia_pago]

    # Cifras mensuales
    salario_mensual = data.salario_bruto * periodos
    seguro_social = salario_mensual * settings.TASA_SEGURO_SOCIAL
    seguro_educativo = salario_mensual * settings.TASA_SEGURO_EDUCATIVO

    tarifa_horaria = salario_mensual / (settings.SEMANAS_POR_MES * settings.HORAS_POR_SEMANA)
    pago_horas_extras = data.horas_extras * tarifa_horaria * settings.RECARGO_HORAS_EXTRAS

    base_gravable_anual = (salario_mensual * settings.MESES_POR_ANIO) - (
        (seguro_social + seguro_educativo) * settings.MESES_POR_ANIO
    )
    impuesto_anual = calcular_isr_anual(base_gravable_anual)
    impuesto_mensual = impuesto_anual / settings.MESES_POR_ANIO

    # Cifras del período
    ingresos = [
        (Concepto.SALARIO_BRUTO, "Salario bruto", salario_mensual / periodos),
        (Concepto.HORAS_EXTRAS, "Horas extras", pago_horas_extras / periodos),
        (Concepto.OTROS_INGRESOS, "Otros ingresos", data.otros_ingresos / periodos),
    ]
    deducciones = [
        (Concepto.SEGURO_SOCIAL, "Seguro Social (CSS)", seguro_social / periodos),
        (Concepto.SEGURO_EDUCATIVO, "Seguro Educativo", seguro_educativo / periodos),
        (Concepto.IMPUESTO_RENTA, "Impuesto sobre la renta (ISR)", impuesto_mensual / periodos),
        (Concepto.OTRAS_DEDUCCIONES, "Otras deducciones", data.otras_deducciones),
    ]

    # Bruto y deducciones legales siempre; el resto solo si hay monto
    siempre = {
        Concepto.SALARIO_BRUTO,
        Concepto.SEGURO_SOCIAL,
        Concepto.SEGURO_EDUCATIVO,
        Concepto.IMPUESTO_RENTA,
    }
    lineas = [
        LineaDetalle(concepto=concepto, descripcion=descripcion, monto=monto, tipo=TipoLinea.INGRESO)
        for concepto, descripcion, monto in ingresos
        if monto != 0 or concepto in siempre
    ] + [
        LineaDetalle(concepto=concepto, descripcion=descripcion, monto=monto, tipo=TipoLinea.DEDUCCION)
        for concepto, descripcion, monto in deducciones
        if monto != 0 or concepto in siempre
    ]

    ingreso_total = sum((l.monto for l in lineas if l.tipo == TipoLinea.INGRESO), Decimal("0"))
    total_deducciones = sum((l.monto for l in lineas if l.tipo == TipoLinea.DEDUCCION), Decimal("0"))
    salario_neto = sumar_lineas(lineas)

    nota = None
    if salario_neto < 0:
        nota = "Las deducciones superan el ingreso del período: el salario neto es negativo."
        logger.warning("salario_neto_negativo", salario_neto=str(salario_neto))

    logger.debug(
        "salario_calculado",
        frecuencia=data.frecuencia_pago.value,
        base_gravable_anual=str(base_gravable_anual),
        salario_neto=str(salario_neto),
    )

    return ResultadoSalario(
        lineas=tuple(lineas),
        total=salario_neto,
        frecuencia_pago=data.frecuencia_pago,
        salario_mensual=salario_mensual,
        tarifa_horaria=tarifa_horaria,
        base_gravable_anual=base_gravable_anual,
        impuesto_anual=impuesto_anual,
        ingreso_total=ingreso_total,
        total_deducciones=total_deducciones,
        salario_neto=salario_neto,
        nota=nota,
    )
