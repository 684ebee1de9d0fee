# tests/conftest.py
"""
Fixtures compartilhados para todos os testes da API de achados e perdidos
"""
import os
import pytest
from datetime import datetime, timedelta, date

# Forçar variáveis de ambiente ANTES de importar a app
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['SECRET_KEY'] = 'test-secret-key-for-testing'

from app import create_app, db as _db
from app.models import Objeto, Admin


@pytest.fixture(scope='function')
def app():
    """Cria a aplicação Flask para testes"""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SECRET_KEY': 'test-secret-key-for-testing',
        'MOSTRAR_DETALHES_ERRO': False,
        'PERMITIR_PALAVRA_NA_URL': False,
    })
    return app


@pytest.fixture(scope='function')
def db(app):
    """Cria e limpa o banco de dados para cada teste"""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app, db):
    """Cliente de teste HTTP"""
    with app.test_client() as client:
        with app.app_context():
            yield client


@pytest.fixture
def app_context(app, db):
    """Contexto da aplicação"""
    with app.app_context():
        yield app


def criar_objeto(db, palavra_passe='1234', data_registro=None, data_expiracao=None, **campos):
    """Helper para inserir um objeto direto no banco"""
    data_registro = data_registro or datetime.now()
    dados = {
        'titulo': 'Chave',
        'categoria': 'Chaves',
        'local': 'Bloco A',
        'contato_instagram': '@joao',
    }
    dados.update(campos)
    obj = Objeto(
        data_registro=data_registro,
        data_expiracao=data_expiracao or (data_registro.date() + timedelta(days=90)),
        **dados
    )
    obj.set_palavra_passe(palavra_passe)
    db.session.add(obj)
    db.session.commit()
    return obj


@pytest.fixture
def objeto(db):
    """Cria um objeto ativo de teste"""
    return criar_objeto(db)


@pytest.fixture
def objeto_expirado(db):
    """Cria um objeto já expirado"""
    return criar_objeto(
        db,
        titulo='Guarda-chuva',
        categoria='Acessórios',
        local='Biblioteca',
        data_registro=datetime.now() - timedelta(days=120),
        data_expiracao=date.today() - timedelta(days=1),
    )


@pytest.fixture
def objeto_denunciado(db):
    """Cria um objeto denunciado"""
    return criar_objeto(db, titulo='Anúncio falso', denuncia=True)


@pytest.fixture
def admin_user(db):
    """Cria um admin de teste"""
    admin = Admin(username='admin')
    admin.set_password('AdminPass123')
    db.session.add(admin)
    db.session.commit()
    return admin


def login(client, username, password):
    """Helper para fazer login nos testes"""
    return client.post('/login', json={
        'username': username,
        'password': password,
    })


@pytest.fixture
def auth_headers(client, admin_user):
    """Header Authorization com token de admin válido"""
    resp = login(client, 'admin', 'AdminPass123')
    token = resp.get_json()['token']
    return {'Authorization': f'Bearer {token}'}
