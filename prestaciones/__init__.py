"""
Motor de cálculo de prestaciones laborales de Panamá.

Tres calculadoras puras e independientes:
- calcular_liquidacion: liquidación por terminación de la relación laboral
- calcular_salario_neto: salario neto después de CSS, Seguro Educativo e ISR
- calcular_decimo_tercer_mes: partida del décimo tercer mes
"""

from prestaciones.services import (
    calcular_decimo_tercer_mes,
    calcular_isr_anual,
    calcular_liquidacion,
    calcular_salario_neto,
)

__all__ = [
    "calcular_decimo_tercer_mes",
    "calcular_isr_anual",
    "calcular_liquidacion",
    "calcular_salario_neto",
]
