"""Cálculo del décimo tercer mes parcial (una de las tres partidas del año)."""

from decimal import Decimal

from prestaciones.config import EngineSettings, engine_settings
from prestaciones.log import get_logger
from prestaciones.models.common import Concepto, FallaValidacion, LineaDetalle, sumar_lineas
from prestaciones.models.decimo import (
    DecimoInput,
    IngresoMensual,
    Mes,
    PeriodoDecimo,
    ResultadoDecimo,
)
from prestaciones.services.validacion import validar_cantidad

logger = get_logger(__name__)


# Meses candidatos de cada partida, en orden; el último es el mes de corte.
MESES_POR_PERIODO: dict[PeriodoDecimo, tuple[Mes, ...]] = {
    PeriodoDecimo.PRIMER: (Mes.DICIEMBRE, Mes.ENERO, Mes.FEBRERO, Mes.MARZO, Mes.ABRIL),
    PeriodoDecimo.SEGUNDO: (Mes.ABRIL, Mes.MAYO, Mes.JUNIO, Mes.JULIO, Mes.AGOSTO),
    PeriodoDecimo.TERCER: (Mes.AGOSTO, Mes.SEPTIEMBRE, Mes.OCTUBRE, Mes.NOVIEMBRE, Mes.DICIEMBRE),
}

ETIQUETAS_PERIODO = {
    PeriodoDecimo.PRIMER: "primera partida, abril",
    PeriodoDecimo.SEGUNDO: "segunda partida, agosto",
    PeriodoDecimo.TERCER: "tercera partida, diciembre",
}

if set(MESES_POR_PERIODO) != set(PeriodoDecimo):
    raise RuntimeError("Cada partida del décimo debe tener su lista de meses.")


def meses_del_periodo(periodo: PeriodoDecimo, ventana: int) -> tuple[Mes, ...]:
    """Primeros `ventana` meses candidatos de la partida (4: sin el mes de corte, 5: con él)."""
    return MESES_POR_PERIODO[periodo][:ventana]


def _validar(data: DecimoInput) -> FallaValidacion | None:
    for mes, monto in data.salarios.items():
        falla = validar_cantidad(monto, f"salarios.{mes.value}")
        if falla is not None:
            return falla
    return None


def calcular_decimo_tercer_mes(
    data: DecimoInput,
    settings: EngineSettings | None = None,
) -> ResultadoDecimo | FallaValidacion:
    """
    Calcula una partida del décimo tercer mes.

    Décimo = Suma de ingresos de los meses de la partida / 12

    El número de meses sumados lo fija MESES_VENTANA_DECIMO en la
    configuración. Un mes sin ingreso informado cuenta como cero.
    """
    settings = settings or engine_settings

    falla = _validar(data)
    if falla is not None:
        logger.info("decimo_rechazado", campo=falla.campo, codigo=falla.codigo.value)
        return falla

    meses = meses_del_periodo(data.periodo, settings.MESES_VENTANA_DECIMO)
    desglose = tuple(
        IngresoMensual(mes=mes, monto=data.salarios.get(mes, Decimal("0")))
        for mes in meses
    )
    ingresos_periodo = sum((ingreso.monto for ingreso in desglose), Decimal("0"))

    lineas = (
        LineaDetalle(
            concepto=Concepto.DECIMO_TERCER_MES,
            descripcion=f"Décimo tercer mes ({ETIQUETAS_PERIODO[data.periodo]})",
            monto=ingresos_periodo / settings.DIVISOR_DECIMO,
        ),
    )
    total = sumar_lineas(lineas)

    logger.debug(
        "decimo_calculado",
        periodo=data.periodo.value,
        meses=[mes.value for mes in meses],
        total=str(total),
    )

    return ResultadoDecimo(
        lineas=lineas,
        total=total,
        periodo=data.periodo,
        meses_incluidos=meses,
        desglose=desglose,
        ingresos_periodo=ingresos_periodo,
    )
