import logging
from flask import Blueprint, jsonify
from flask_login import current_user
from app.routes import corpo_requisicao
from app.services.objeto_service import get_objeto_service
from app.utils.decorators import admin_required

bp = Blueprint('admin', __name__, url_prefix='/admin')
logger = logging.getLogger(__name__)


@bp.route('/objetos', methods=['GET'])
@admin_required
def listar_todos():
    """Todos os objetos, inclusive expirados, com o status calculado"""
    logger.info(f"Admin {current_user.username}: GET /admin/objetos")
    service = get_objeto_service()

    objetos = service.listar(incluir_expirados=True)
    return jsonify([service.serializar(o) for o in objetos])


@bp.route('/denuncias', methods=['GET'])
@admin_required
def denuncias():
    logger.info(f"Admin {current_user.username}: GET /admin/denuncias")
    service = get_objeto_service()

    objetos = service.listar_denunciados()
    return jsonify([service.serializar(o) for o in objetos])


@bp.route('/objetos/<int:objeto_id>/denunciar', methods=['POST'])
@admin_required
def denunciar(objeto_id):
    logger.info(f"Admin {current_user.username}: denunciar objeto {objeto_id}")
    service = get_objeto_service()

    objeto = service.denunciar(objeto_id)
    return jsonify({
        'mensagem': 'Objeto marcado como denunciado',
        'objeto': service.serializar(objeto),
    })


@bp.route('/objetos/<int:objeto_id>/resolver-denuncia', methods=['POST'])
@admin_required
def resolver_denuncia(objeto_id):
    acao = corpo_requisicao().get('acao')
    logger.info(f"Admin {current_user.username}: resolver denúncia do objeto {objeto_id} ({acao})")
    service = get_objeto_service()

    objeto = service.resolver_denuncia(objeto_id, acao)
    if objeto is None:
        return jsonify({'mensagem': 'Denúncia aprovada. Objeto removido.'})

    return jsonify({
        'mensagem': 'Denúncia rejeitada. Objeto mantido.',
        'objeto': service.serializar(objeto),
    })


@bp.route('/objetos/<int:objeto_id>', methods=['DELETE'])
@admin_required
def remover(objeto_id):
    logger.info(f"Admin {current_user.username}: remover objeto {objeto_id}")
    get_objeto_service().remover_admin(objeto_id)
    return jsonify({'mensagem': 'Objeto excluído pelo administrador'})
