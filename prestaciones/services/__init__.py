from .liquidacion import calcular_liquidacion, REGLAS_TERMINACION
from .salario import calcular_salario_neto, calcular_isr_anual, TRAMOS_ISR
from .decimo import calcular_decimo_tercer_mes, MESES_POR_PERIODO

__all__ = [
    "calcular_liquidacion",
    "REGLAS_TERMINACION",
    "calcular_salario_neto",
    "calcular_isr_anual",
    "TRAMOS_ISR",
    "calcular_decimo_tercer_mes",
    "MESES_POR_PERIODO",
]
