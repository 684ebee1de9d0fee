"""
Regras de data dos objetos: expiração e status derivado
"""
import calendar
from datetime import date, datetime

STATUS_ATIVO = 'ativo'
STATUS_EXPIRANDO = 'expirando'
STATUS_EXPIRADO = 'expirado'

MESES_EXPIRACAO_PADRAO = 3
DIAS_AVISO_PADRAO = 7


def hoje():
    return date.today()


def somar_meses(data, meses):
    """
    Soma meses de calendário a uma data

    O dia é limitado ao último dia do mês de destino
    (31/01 + 1 mês = 28/02 ou 29/02).

    Args:
        data: date ou datetime
        meses: Quantidade de meses (pode ser negativa)

    Returns:
        date resultante
    """
    if isinstance(data, datetime):
        data = data.date()

    indice = data.month - 1 + meses
    ano = data.year + indice // 12
    mes = indice % 12 + 1
    dia = min(data.day, calendar.monthrange(ano, mes)[1])
    return date(ano, mes, dia)


def calcular_expiracao(data_registro, meses=MESES_EXPIRACAO_PADRAO):
    return somar_meses(data_registro, meses)


def derivar_status(data_expiracao, hoje, dias_aviso=DIAS_AVISO_PADRAO):
    """
    Status de um objeto em relação à data atual

    Returns:
        'expirado' se já passou da expiração, 'expirando' se faltam
        até `dias_aviso` dias, senão 'ativo'
    """
    if isinstance(data_expiracao, datetime):
        data_expiracao = data_expiracao.date()
    if isinstance(hoje, datetime):
        hoje = hoje.date()

    if data_expiracao < hoje:
        return STATUS_EXPIRADO
    if (data_expiracao - hoje).days <= dias_aviso:
        return STATUS_EXPIRANDO
    return STATUS_ATIVO
