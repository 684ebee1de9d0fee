from flask import request


def corpo_requisicao():
    """Corpo da requisição como dict (JSON ou formulário)"""
    dados = request.get_json(silent=True)
    if isinstance(dados, dict):
        return dados
    return request.form.to_dict()
