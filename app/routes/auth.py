import logging
from flask import Blueprint, jsonify, current_app
from app.errors import Unauthorized, MissingField, InvalidFieldType
from app.models import Admin
from app.routes import corpo_requisicao
from app.utils.security import generate_admin_token
from app.utils.validators import texto

bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)


@bp.route('/login', methods=['POST'])
def login():
    """Login do administrador: devolve um token Bearer para as rotas /admin"""
    logger.info("Rota POST /login solicitada")
    dados = corpo_requisicao()

    invalidos = []
    credenciais = {}
    for campo in ('username', 'password'):
        try:
            credenciais[campo] = texto(dados.get(campo)) or ''
        except TypeError:
            invalidos.append(campo)
    if invalidos:
        raise InvalidFieldType(invalidos)

    username = credenciais['username']
    password = credenciais['password']

    faltando = [campo for campo, valor in (('username', username), ('password', password)) if not valor]
    if faltando:
        raise MissingField(faltando)

    admin = Admin.query.filter_by(username=username).first()
    if not admin or not admin.check_password(password):
        logger.warning(f"Login de admin recusado para '{username}'")
        raise Unauthorized('Usuário ou senha incorretos')

    expira_em = current_app.config.get('ADMIN_TOKEN_EXPIRA_EM', 8 * 3600)
    token = generate_admin_token(admin.id, expires_in=expira_em)

    logger.info(f"Admin '{username}' autenticado")
    return jsonify({
        'mensagem': 'Login realizado com sucesso',
        'token': token,
        'expiraEm': expira_em,
    })
