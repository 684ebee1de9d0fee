# app/services/objeto_service.py
"""
Regras de negócio do mural de achados e perdidos
"""
import logging
from datetime import datetime
from sqlalchemy import func

from app.errors import NotFound, Unauthorized, InvalidAction, MissingContact
from app.models import Objeto
from app.utils.datas import (
    calcular_expiracao,
    MESES_EXPIRACAO_PADRAO, DIAS_AVISO_PADRAO,
)
from app.utils.validators import (
    validar_criacao, validar_atualizacao, validar_propriedade,
)

logger = logging.getLogger(__name__)

# Mapeamento campo da API -> atributo do model
ATRIBUTOS = {
    'titulo': 'titulo',
    'categoria': 'categoria',
    'descricao': 'descricao',
    'local': 'local',
    'foto': 'foto',
    'contatoInstagram': 'contato_instagram',
    'contatoWhatsapp': 'contato_whatsapp',
}

ACOES_DENUNCIA = ('aprovar', 'rejeitar')


class ObjetoService:
    """Operações sobre objetos usando a sessão de banco recebida"""

    def __init__(self, session, meses_expiracao=MESES_EXPIRACAO_PADRAO,
                 dias_aviso=DIAS_AVISO_PADRAO, relogio=datetime.now):
        self.session = session
        self.meses_expiracao = meses_expiracao
        self.dias_aviso = dias_aviso
        self.relogio = relogio

    @classmethod
    def from_app(cls, app, session):
        return cls(
            session,
            meses_expiracao=app.config.get('MESES_EXPIRACAO', MESES_EXPIRACAO_PADRAO),
            dias_aviso=app.config.get('DIAS_AVISO_EXPIRACAO', DIAS_AVISO_PADRAO),
        )

    def hoje(self):
        return self.relogio().date()

    def serializar(self, objeto):
        return objeto.to_dict(hoje=self.hoje(), dias_aviso=self.dias_aviso)

    # ---- leitura ----

    def listar(self, local=None, categoria=None, incluir_expirados=False):
        """Objetos mais recentes primeiro; filtros de local/categoria ignoram maiúsculas"""
        query = self.session.query(Objeto)

        if not incluir_expirados:
            query = query.filter(Objeto.data_expiracao >= self.hoje())
        if local:
            query = query.filter(func.lower(Objeto.local) == func.lower(local.strip()))
        if categoria:
            query = query.filter(func.lower(Objeto.categoria) == func.lower(categoria.strip()))

        return query.order_by(Objeto.data_registro.desc(), Objeto.id.desc()).all()

    def listar_denunciados(self):
        return self.session.query(Objeto).filter(
            Objeto.denuncia == True
        ).order_by(Objeto.data_registro.desc(), Objeto.id.desc()).all()

    def obter(self, objeto_id):
        objeto = self.session.get(Objeto, objeto_id)
        if objeto is None:
            raise NotFound()
        return objeto

    # ---- escrita pelo dono ----

    def criar(self, dados):
        dados = validar_criacao(dados)
        agora = self.relogio()

        objeto = Objeto(
            titulo=dados['titulo'],
            categoria=dados['categoria'],
            descricao=dados.get('descricao') or None,
            local=dados['local'],
            foto=dados.get('foto') or None,
            contato_instagram=dados.get('contatoInstagram') or None,
            contato_whatsapp=dados.get('contatoWhatsapp') or None,
            data_registro=agora,
            data_expiracao=calcular_expiracao(agora, self.meses_expiracao),
            denuncia=False,
            status_denuncia=False,
        )
        objeto.set_palavra_passe(dados['palavraPasse'])

        self.session.add(objeto)
        self.session.commit()

        logger.info(f"Objeto {objeto.id} criado (expira em {objeto.data_expiracao})")
        return objeto

    def _autorizar(self, objeto_id, palavra_passe):
        objeto = self.obter(objeto_id)
        if not validar_propriedade(objeto, palavra_passe):
            logger.warning(f"Palavra-passe incorreta para o objeto {objeto_id}")
            raise Unauthorized('Palavra-passe incorreta')
        return objeto

    def atualizar(self, objeto_id, dados):
        """Atualiza apenas os campos enviados; exige a palavra-passe do dono"""
        dados = dados or {}
        objeto = self._autorizar(objeto_id, dados.get('palavraPasse'))
        campos = validar_atualizacao(dados)

        instagram = campos.get('contatoInstagram', objeto.contato_instagram)
        whatsapp = campos.get('contatoWhatsapp', objeto.contato_whatsapp)
        if not instagram and not whatsapp:
            raise MissingContact()

        for campo, valor in campos.items():
            setattr(objeto, ATRIBUTOS[campo], valor)

        self.session.commit()
        logger.info(f"Objeto {objeto_id} atualizado: {', '.join(sorted(campos))}")
        return objeto

    def remover(self, objeto_id, palavra_passe):
        objeto = self._autorizar(objeto_id, palavra_passe)
        self.session.delete(objeto)
        self.session.commit()
        logger.info(f"Objeto {objeto_id} removido pelo dono")

    def validar_palavra_passe(self, objeto_id, palavra_passe):
        """Confere a palavra-passe sem alterar nada"""
        objeto = self.obter(objeto_id)
        return validar_propriedade(objeto, palavra_passe)

    # ---- denúncias e administração ----

    def denunciar(self, objeto_id):
        objeto = self.obter(objeto_id)
        objeto.denuncia = True
        self.session.commit()
        logger.info(f"Objeto {objeto_id} denunciado")
        return objeto

    def resolver_denuncia(self, objeto_id, acao):
        """
        'aprovar' remove o objeto; 'rejeitar' limpa denuncia e statusDenuncia

        Returns:
            O objeto atualizado, ou None se foi removido
        """
        if isinstance(acao, str):
            acao = acao.strip().lower()
        if acao not in ACOES_DENUNCIA:
            raise InvalidAction()

        objeto = self.obter(objeto_id)

        if acao == 'aprovar':
            self.session.delete(objeto)
            self.session.commit()
            logger.info(f"Denúncia do objeto {objeto_id} aprovada: objeto removido")
            return None

        objeto.denuncia = False
        objeto.status_denuncia = False
        self.session.commit()
        logger.info(f"Denúncia do objeto {objeto_id} rejeitada")
        return objeto

    def remover_admin(self, objeto_id):
        objeto = self.obter(objeto_id)
        self.session.delete(objeto)
        self.session.commit()
        logger.info(f"Objeto {objeto_id} removido pelo admin")


def get_objeto_service():
    """Serviço ligado à aplicação e à sessão da requisição atual"""
    from flask import current_app
    from app import db
    return ObjetoService.from_app(current_app, db.session)
