# tests/test_datas.py
"""
Testes das regras de expiração e status
"""
import pytest
from datetime import date, datetime, timedelta
from app.utils.datas import (
    somar_meses, calcular_expiracao, derivar_status,
    STATUS_ATIVO, STATUS_EXPIRANDO, STATUS_EXPIRADO,
)


class TestSomarMeses:
    """Testes de soma de meses"""

    def test_soma_simples(self):
        assert somar_meses(date(2024, 1, 15), 3) == date(2024, 4, 15)

    def test_vira_o_ano(self):
        assert somar_meses(date(2024, 11, 10), 3) == date(2025, 2, 10)

    def test_limita_ao_fim_do_mes(self):
        assert somar_meses(date(2023, 11, 30), 3) == date(2024, 2, 29)
        assert somar_meses(date(2024, 1, 31), 3) == date(2024, 4, 30)

    def test_aceita_datetime(self):
        assert somar_meses(datetime(2024, 5, 20, 14, 30), 3) == date(2024, 8, 20)

    def test_meses_negativos(self):
        assert somar_meses(date(2024, 2, 15), -3) == date(2023, 11, 15)

    def test_calcular_expiracao_padrao_tres_meses(self):
        assert calcular_expiracao(date(2024, 3, 1)) == date(2024, 6, 1)


class TestDerivarStatus:
    """Testes do status derivado"""

    hoje = date(2024, 6, 10)

    def test_expirado_quando_data_passou(self):
        assert derivar_status(self.hoje - timedelta(days=1), self.hoje) == STATUS_EXPIRADO

    def test_vence_hoje_ainda_nao_expirou(self):
        assert derivar_status(self.hoje, self.hoje) == STATUS_EXPIRANDO

    def test_sete_dias_esta_expirando(self):
        assert derivar_status(self.hoje + timedelta(days=7), self.hoje) == STATUS_EXPIRANDO

    def test_oito_dias_esta_ativo(self):
        assert derivar_status(self.hoje + timedelta(days=8), self.hoje) == STATUS_ATIVO

    def test_recem_criado_esta_ativo(self):
        assert derivar_status(calcular_expiracao(self.hoje), self.hoje) == STATUS_ATIVO

    def test_janela_de_aviso_configuravel(self):
        expira = self.hoje + timedelta(days=10)
        assert derivar_status(expira, self.hoje, dias_aviso=14) == STATUS_EXPIRANDO
        assert derivar_status(expira, self.hoje, dias_aviso=7) == STATUS_ATIVO

    @pytest.mark.parametrize('dias,esperado', [
        (-30, STATUS_EXPIRADO),
        (0, STATUS_EXPIRANDO),
        (3, STATUS_EXPIRANDO),
        (60, STATUS_ATIVO),
    ])
    def test_aceita_datetime_como_hoje(self, dias, esperado):
        agora = datetime(2024, 6, 10, 23, 59)
        assert derivar_status(agora.date() + timedelta(days=dias), agora) == esperado
