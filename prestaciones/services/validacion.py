"""Validaciones de frontera compartidas por las calculadoras."""

from datetime import date
from decimal import Decimal

from prestaciones.models.common import CodigoError, FallaValidacion


def validar_rango(fecha_inicio: date, fecha_fin: date, campo: str = "fecha_fin") -> FallaValidacion | None:
    """La fecha de fin no puede ser anterior a la de inicio."""
    if fecha_fin < fecha_inicio:
        return FallaValidacion(
            campo=campo,
            codigo=CodigoError.RANGO_INVALIDO,
            mensaje=(
                f"La fecha de fin ({fecha_fin.isoformat()}) no puede ser anterior "
                f"a la fecha de inicio ({fecha_inicio.isoformat()})."
            ),
        )
    return None


def validar_salario(salario: Decimal, campo: str) -> FallaValidacion | None:
    """El salario debe ser estrictamente positivo."""
    if not salario.is_finite() or salario <= 0:
        return FallaValidacion(
            campo=campo,
            codigo=CodigoError.SALARIO_INVALIDO,
            mensaje=f"El salario debe ser mayor que cero (recibido: {salario}).",
        )
    return None


def validar_cantidad(valor: Decimal, campo: str) -> FallaValidacion | None:
    """Las cantidades y montos opcionales no pueden ser negativos."""
    if not valor.is_finite() or valor < 0:
        return FallaValidacion(
            campo=campo,
            codigo=CodigoError.CANTIDAD_INVALIDA,
            mensaje=f"El valor de {campo} no puede ser negativo (recibido: {valor}).",
        )
    return None


def primera_falla(*fallas: FallaValidacion | None) -> FallaValidacion | None:
    """Devuelve la primera falla encontrada, en el orden dado."""
    for falla in fallas:
        if falla is not None:
            return falla
    return None
