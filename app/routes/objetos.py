# app/routes/objetos.py
import logging
from flask import Blueprint, jsonify, request, current_app
from app.errors import SecretInUrl
from app.routes import corpo_requisicao
from app.services.objeto_service import get_objeto_service

bp = Blueprint('objetos', __name__, url_prefix='/objetos')
logger = logging.getLogger(__name__)


@bp.route('', methods=['GET'])
def listar():
    """Objetos ativos (não expirados), com filtros opcionais ?local=&categoria="""
    logger.info("Rota GET /objetos solicitada")
    service = get_objeto_service()

    objetos = service.listar(
        local=request.args.get('local'),
        categoria=request.args.get('categoria'),
    )
    return jsonify([service.serializar(o) for o in objetos])


@bp.route('/local/<local>/categoria/<categoria>', methods=['GET'])
def listar_filtrado(local, categoria):
    logger.info(f"Rota GET /objetos/local/{local}/categoria/{categoria} solicitada")
    service = get_objeto_service()

    objetos = service.listar(local=local, categoria=categoria)
    return jsonify([service.serializar(o) for o in objetos])


@bp.route('/<int:objeto_id>', methods=['GET'])
def obter(objeto_id):
    logger.info(f"Rota GET /objetos/{objeto_id} solicitada")
    service = get_objeto_service()
    return jsonify(service.serializar(service.obter(objeto_id)))


@bp.route('', methods=['POST'])
def criar():
    logger.info("Rota POST /objetos solicitada")
    service = get_objeto_service()

    objeto = service.criar(corpo_requisicao())
    return jsonify({
        'mensagem': 'Objeto cadastrado com sucesso! Guarde sua palavra-passe: '
                    'ela será pedida para editar ou excluir o objeto.',
        'id': objeto.id,
        'titulo': objeto.titulo,
        'dataRegistro': objeto.data_registro.isoformat(),
        'dataExpiracao': objeto.data_expiracao.isoformat(),
        'status': objeto.status(service.hoje(), service.dias_aviso),
    }), 201


@bp.route('/<int:objeto_id>', methods=['PUT'])
def atualizar(objeto_id):
    logger.info(f"Rota PUT /objetos/{objeto_id} solicitada")
    service = get_objeto_service()

    objeto = service.atualizar(objeto_id, corpo_requisicao())
    return jsonify({
        'mensagem': 'Objeto atualizado com sucesso',
        'objeto': service.serializar(objeto),
    })


@bp.route('/<int:objeto_id>', methods=['DELETE'])
def remover(objeto_id):
    logger.info(f"Rota DELETE /objetos/{objeto_id} solicitada")
    service = get_objeto_service()

    service.remover(objeto_id, corpo_requisicao().get('palavraPasse'))
    return jsonify({'mensagem': 'Objeto excluído com sucesso'})


@bp.route('/<int:objeto_id>/validar', methods=['POST'])
def validar(objeto_id):
    logger.info(f"Rota POST /objetos/{objeto_id}/validar solicitada")
    service = get_objeto_service()

    valida = service.validar_palavra_passe(objeto_id, corpo_requisicao().get('palavraPasse'))
    return jsonify({
        'valida': valida,
        'mensagem': 'Palavra-passe correta' if valida else 'Palavra-passe incorreta',
    })


@bp.route('/<int:objeto_id>/palavra/<path:palavra_passe>', methods=['GET'])
def validar_pela_url(objeto_id, palavra_passe):
    """Rota legada: a palavra-passe fica exposta em logs e histórico"""
    if not current_app.config.get('PERMITIR_PALAVRA_NA_URL'):
        logger.warning(f"Tentativa de validar palavra-passe pela URL (objeto {objeto_id}) bloqueada")
        raise SecretInUrl()

    logger.warning(f"Palavra-passe do objeto {objeto_id} validada pela URL (inseguro)")
    service = get_objeto_service()
    valida = service.validar_palavra_passe(objeto_id, palavra_passe)
    return jsonify({
        'valida': valida,
        'mensagem': 'Palavra-passe correta' if valida else 'Palavra-passe incorreta',
    })


@bp.route('/<int:objeto_id>/denunciar', methods=['POST'])
def denunciar(objeto_id):
    logger.info(f"Rota POST /objetos/{objeto_id}/denunciar solicitada")
    get_objeto_service().denunciar(objeto_id)
    return jsonify({'mensagem': 'Objeto denunciado. Um administrador irá analisar.'})
