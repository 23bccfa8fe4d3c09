"""Aritmética de fechas para la liquidación."""

from datetime import date

from dateutil.relativedelta import relativedelta

from prestaciones.models.common import TiempoServicio


# Inicio de cada período de décimo: (mes, día). El corte es el día anterior.
INICIOS_PERIODO_DECIMO = ((4, 16), (8, 16), (12, 16))


def calcular_tiempo_servicio(fecha_inicio: date, fecha_fin: date) -> TiempoServicio:
    """
    Calcula años, meses y días de servicio por el método de aniversario.

    Se avanza la fecha de inicio por años completos, luego por meses
    completos, sin pasar la fecha de fin; el resto queda en días.
    """
    delta = relativedelta(fecha_fin, fecha_inicio)
    return TiempoServicio(anios=delta.years, meses=delta.months, dias=delta.days)


def calcular_ultimo_aniversario(fecha_inicio: date, fecha_fin: date) -> date:
    """
    Devuelve el aniversario más reciente de la fecha de inicio que no sea posterior a la fecha de fin.

    Si todavía no se cumple el primer año, devuelve la propia fecha de inicio.
    Un inicio el 29 de febrero cumple aniversario el 28 en años no bisiestos.
    """
    anios = relativedelta(fecha_fin, fecha_inicio).years
    return fecha_inicio + relativedelta(years=anios)


def calcular_inicio_periodo_decimo(fecha_inicio: date, fecha_fin: date) -> date:
    """
    Devuelve el inicio del período de décimo en curso a la fecha de fin.

    Es el 16 de diciembre, 16 de abril o 16 de agosto más reciente que no
    sea posterior a la fecha de fin, sin ser anterior a la fecha de inicio.
    """
    candidatos = [
        date(anio, mes, dia)
        for anio in (fecha_fin.year - 1, fecha_fin.year)
        for mes, dia in INICIOS_PERIODO_DECIMO
    ]
    inicio_periodo = max(c for c in candidatos if c <= fecha_fin)
    return max(inicio_periodo, fecha_inicio)
