from app import db
from app.utils.datas import derivar_status, hoje as data_hoje, DIAS_AVISO_PADRAO
from app.utils.security import hash_password, verify_password
from datetime import datetime


class Objeto(db.Model):
    """Objeto perdido/encontrado publicado no mural"""
    __tablename__ = 'objetos'

    id = db.Column(db.Integer, primary_key=True)
    titulo = db.Column(db.String(150), nullable=False)
    categoria = db.Column(db.String(80), nullable=False)
    descricao = db.Column(db.Text)
    local = db.Column(db.String(150), nullable=False)
    data_registro = db.Column('dataRegistro', db.DateTime, nullable=False, default=datetime.now)
    data_expiracao = db.Column('dataExpiracao', db.Date, nullable=False)
    foto = db.Column(db.Text)  # URL ou imagem codificada
    palavra_passe_hash = db.Column('palavraPasse', db.String(128), nullable=False)
    contato_instagram = db.Column('contatoInstagram', db.String(100))
    contato_whatsapp = db.Column('contatoWhatsapp', db.String(50))
    denuncia = db.Column(db.Boolean, nullable=False, default=False)
    status_denuncia = db.Column('statusDenuncia', db.Boolean, nullable=False, default=False)

    def set_palavra_passe(self, palavra_passe):
        self.palavra_passe_hash = hash_password(str(palavra_passe).strip())

    def check_palavra_passe(self, palavra_passe):
        if not self.palavra_passe_hash or palavra_passe is None:
            return False
        try:
            return verify_password(str(palavra_passe).strip(), self.palavra_passe_hash)
        except ValueError:
            # Hash corrompido ou em formato desconhecido
            return False

    def tem_contato(self):
        return bool(self.contato_instagram or self.contato_whatsapp)

    def status(self, hoje=None, dias_aviso=DIAS_AVISO_PADRAO):
        return derivar_status(self.data_expiracao, hoje or data_hoje(), dias_aviso)

    def to_dict(self, hoje=None, dias_aviso=DIAS_AVISO_PADRAO):
        """Representação pública (nunca inclui a palavra-passe)"""
        return {
            'id': self.id,
            'titulo': self.titulo,
            'categoria': self.categoria,
            'descricao': self.descricao,
            'local': self.local,
            'dataRegistro': self.data_registro.isoformat() if self.data_registro else None,
            'dataExpiracao': self.data_expiracao.isoformat() if self.data_expiracao else None,
            'foto': self.foto,
            'contatoInstagram': self.contato_instagram,
            'contatoWhatsapp': self.contato_whatsapp,
            'denuncia': bool(self.denuncia),
            'statusDenuncia': bool(self.status_denuncia),
            'status': self.status(hoje, dias_aviso),
        }

    def __repr__(self):
        return f'<Objeto {self.id} {self.titulo}>'
