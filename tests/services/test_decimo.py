"""Tests for the partial thirteenth-month calculator"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from prestaciones.config import EngineSettings
from prestaciones.models import (
    CodigoError,
    Concepto,
    DecimoInput,
    FallaValidacion,
    Mes,
    PeriodoDecimo,
    ResultadoDecimo,
    sumar_lineas,
)
from prestaciones.services.decimo import MESES_POR_PERIODO, calcular_decimo_tercer_mes


def _salarios(meses, monto="1200"):
    return {mes: Decimal(monto) for mes in meses}


class TestAmount:
    """Test the one-twelfth computation"""

    def test_no_salaries(self, settings):
        result = calcular_decimo_tercer_mes(DecimoInput(periodo=PeriodoDecimo.PRIMER), settings)

        assert isinstance(result, ResultadoDecimo)
        assert result.ingresos_periodo == 0
        assert result.total == 0

    def test_single_month(self, settings):
        result = calcular_decimo_tercer_mes(
            DecimoInput(periodo=PeriodoDecimo.PRIMER, salarios={Mes.ENERO: Decimal("600")}),
            settings,
        )

        assert result.total == Decimal("600") / 12
        assert result.monto(Concepto.DECIMO_TERCER_MES) == Decimal("50")

    def test_total_matches_lines(self, settings):
        result = calcular_decimo_tercer_mes(
            DecimoInput(
                periodo=PeriodoDecimo.TERCER,
                salarios={Mes.AGOSTO: Decimal("1013.27"), Mes.OCTUBRE: Decimal("998.41")},
            ),
            settings,
        )
        assert result.total == sumar_lineas(result.lineas)


class TestWindow:
    """Test month selection per period"""

    def test_every_period_has_five_candidates(self):
        assert set(MESES_POR_PERIODO) == set(PeriodoDecimo)
        assert all(len(meses) == 5 for meses in MESES_POR_PERIODO.values())

    def test_default_window_excludes_cutoff_month(self, settings):
        result = calcular_decimo_tercer_mes(
            DecimoInput(periodo=PeriodoDecimo.PRIMER, salarios=_salarios(MESES_POR_PERIODO[PeriodoDecimo.PRIMER])),
            settings,
        )

        assert result.meses_incluidos == (Mes.DICIEMBRE, Mes.ENERO, Mes.FEBRERO, Mes.MARZO)
        assert result.ingresos_periodo == Decimal("4800")
        assert result.total == Decimal("400")

    def test_five_month_window(self):
        settings = EngineSettings(_env_file=None, MESES_VENTANA_DECIMO=5)
        result = calcular_decimo_tercer_mes(
            DecimoInput(periodo=PeriodoDecimo.PRIMER, salarios=_salarios(MESES_POR_PERIODO[PeriodoDecimo.PRIMER])),
            settings,
        )

        assert result.meses_incluidos[-1] == Mes.ABRIL
        assert result.total == Decimal("500")

    @pytest.mark.parametrize("periodo, incluido, excluido", [
        (PeriodoDecimo.SEGUNDO, Mes.ABRIL, Mes.AGOSTO),
        (PeriodoDecimo.TERCER, Mes.AGOSTO, Mes.DICIEMBRE),
    ])
    def test_period_boundaries(self, settings, periodo, incluido, excluido):
        result = calcular_decimo_tercer_mes(
            DecimoInput(periodo=periodo, salarios={incluido: Decimal("1200"), excluido: Decimal("9999")}),
            settings,
        )
        assert result.total == Decimal("100")

    def test_months_outside_period_ignored(self, settings):
        result = calcular_decimo_tercer_mes(
            DecimoInput(periodo=PeriodoDecimo.PRIMER, salarios={Mes.JULIO: Decimal("1000")}),
            settings,
        )

        assert result.total == 0
        assert [ingreso.monto for ingreso in result.desglose] == [0, 0, 0, 0]

    def test_window_length_bounds(self):
        with pytest.raises(ValidationError):
            EngineSettings(_env_file=None, MESES_VENTANA_DECIMO=6)


class TestValidation:
    """Validation failures"""

    def test_negative_salary(self, settings):
        result = calcular_decimo_tercer_mes(
            DecimoInput(periodo=PeriodoDecimo.PRIMER, salarios={Mes.MARZO: Decimal("-1")}),
            settings,
        )

        assert isinstance(result, FallaValidacion)
        assert result.codigo == CodigoError.CANTIDAD_INVALIDA
        assert result.campo == "salarios.marzo"

    def test_raw_month_names(self, settings):
        data = DecimoInput.model_validate({"periodo": "tercer", "salarios": {"octubre": "900"}})
        result = calcular_decimo_tercer_mes(data, settings)

        assert result.total == Decimal("75")
