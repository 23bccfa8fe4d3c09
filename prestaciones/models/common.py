"""Tipos de valor compartidos por las tres calculadoras."""

from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CodigoError(str, Enum):
    """Código de la falla de validación."""
    RANGO_INVALIDO = "rango_invalido"
    SALARIO_INVALIDO = "salario_invalido"
    CANTIDAD_INVALIDA = "cantidad_invalida"


class TipoLinea(str, Enum):
    """Sentido de una línea del desglose."""
    INGRESO = "ingreso"
    DEDUCCION = "deduccion"


class Concepto(str, Enum):
    """Concepto monetario de una línea del desglose."""
    # Liquidación
    VACACIONES_ACUMULADAS = "vacaciones_acumuladas"
    VACACIONES_PROPORCIONALES = "vacaciones_proporcionales"
    DECIMO_ACUMULADO = "decimo_acumulado"
    DECIMO_PROPORCIONAL = "decimo_proporcional"
    PRIMA_ANTIGUEDAD = "prima_antiguedad"
    INDEMNIZACION = "indemnizacion"
    PREAVISO = "preaviso"
    # Salario neto
    SALARIO_BRUTO = "salario_bruto"
    HORAS_EXTRAS = "horas_extras"
    OTROS_INGRESOS = "otros_ingresos"
    SEGURO_SOCIAL = "seguro_social"
    SEGURO_EDUCATIVO = "seguro_educativo"
    IMPUESTO_RENTA = "impuesto_renta"
    OTRAS_DEDUCCIONES = "otras_deducciones"
    # Décimo tercer mes
    DECIMO_TERCER_MES = "decimo_tercer_mes"


class LineaDetalle(BaseModel):
    """Una línea del desglose monetario."""

    model_config = ConfigDict(frozen=True)

    concepto: Concepto = Field(..., description="Concepto de la línea")
    descripcion: str = Field(..., description="Etiqueta legible de la línea")
    monto: Decimal = Field(..., ge=0, description="Monto sin redondear, siempre positivo")
    tipo: TipoLinea = Field(default=TipoLinea.INGRESO, description="Ingreso o deducción")

    @property
    def monto_con_signo(self) -> Decimal:
        if self.tipo == TipoLinea.DEDUCCION:
            return -self.monto
        return self.monto


def sumar_lineas(lineas: list[LineaDetalle] | tuple[LineaDetalle, ...]) -> Decimal:
    """Suma con signo de las líneas del desglose."""
    return sum((linea.monto_con_signo for linea in lineas), Decimal("0"))


class ResultadoCalculo(BaseModel):
    """
    Base de todo resultado exitoso.

    El total es siempre la suma con signo de las líneas; el modelo rechaza
    cualquier construcción que rompa esa igualdad.
    """

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    lineas: tuple[LineaDetalle, ...] = Field(default=(), description="Desglose ordenado")
    total: Decimal = Field(..., description="Suma con signo de las líneas")

    @model_validator(mode="after")
    def verificar_total(self):
        esperado = sumar_lineas(self.lineas)
        if self.total != esperado:
            raise ValueError(f"total {self.total} no coincide con la suma de las líneas {esperado}")
        return self

    def linea(self, concepto: Concepto) -> LineaDetalle | None:
        for linea in self.lineas:
            if linea.concepto == concepto:
                return linea
        return None

    def monto(self, concepto: Concepto) -> Decimal:
        linea = self.linea(concepto)
        return linea.monto if linea is not None else Decimal("0")


class FallaValidacion(BaseModel):
    """Falla de validación: el cálculo no produjo ningún desglose."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    campo: str = Field(..., description="Campo de entrada rechazado")
    codigo: CodigoError = Field(..., description="Código de la falla")
    mensaje: str = Field(..., description="Explicación legible")


class TiempoServicio(BaseModel):
    """Tiempo de servicio calendario (solo informativo, nunca entra en los montos)."""

    model_config = ConfigDict(frozen=True)

    anios: int = Field(..., ge=0)
    meses: int = Field(..., ge=0, le=11)
    dias: int = Field(..., ge=0)
