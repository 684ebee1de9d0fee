"""
Erros da API e tratamento centralizado em JSON
"""
import logging
from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Erro base: vira uma resposta {'error': ..., 'mensagem': ...}"""
    status_code = 500
    error = 'erro_interno'
    mensagem = 'Erro interno do servidor'

    def __init__(self, mensagem=None, **extra):
        super().__init__(mensagem or self.mensagem)
        self.mensagem = mensagem or self.mensagem
        self.extra = extra

    def to_dict(self):
        payload = {'error': self.error, 'mensagem': self.mensagem}
        payload.update(self.extra)
        return payload


class ValidationError(ApiError):
    status_code = 400
    error = 'validacao'
    mensagem = 'Dados inválidos'


class MissingField(ValidationError):
    error = 'campo_obrigatorio'

    def __init__(self, campos):
        campos = list(campos)
        super().__init__(
            f"Campos obrigatórios ausentes: {', '.join(campos)}",
            campos=campos
        )


class InvalidFieldType(ValidationError):
    error = 'tipo_invalido'

    def __init__(self, campos):
        campos = list(campos)
        super().__init__(
            f"Campos devem ser texto: {', '.join(campos)}",
            campos=campos
        )


class SecretInUrl(ValidationError):
    error = 'palavra_na_url'
    mensagem = 'Envie a palavra-passe no corpo de POST /objetos/<id>/validar'


class MissingContact(ValidationError):
    error = 'contato_obrigatorio'
    mensagem = 'Informe pelo menos um contato (Instagram ou WhatsApp)'


class NoUpdatableField(ValidationError):
    error = 'nenhum_campo'
    mensagem = 'Nenhum campo para atualizar foi informado'


class InvalidAction(ValidationError):
    error = 'acao_invalida'
    mensagem = "Ação inválida. Use 'aprovar' ou 'rejeitar'"


class Unauthorized(ApiError):
    status_code = 401
    error = 'nao_autorizado'
    mensagem = 'Não autorizado'


class NotFound(ApiError):
    status_code = 404
    error = 'nao_encontrado'
    mensagem = 'Objeto não encontrado'


class InternalError(ApiError):
    pass


def register_error_handlers(app):
    """Registra os handlers que convertem exceções em respostas JSON"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error(f"{error.error}: {error.mensagem}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        codes = {
            400: 'requisicao_invalida',
            404: 'nao_encontrado',
            405: 'metodo_nao_permitido',
        }
        payload = {
            'error': codes.get(error.code, 'erro_http'),
            'mensagem': error.description,
        }
        return jsonify(payload), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        from app import db
        db.session.rollback()
        logger.exception(f"Erro inesperado: {error}")

        erro = InternalError()
        if current_app.config.get('MOSTRAR_DETALHES_ERRO'):
            erro.extra['detalhe'] = str(error)
        return jsonify(erro.to_dict()), erro.status_code
