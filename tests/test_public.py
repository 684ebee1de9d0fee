# tests/test_public.py
"""
Testes da rota raiz e dos comandos de linha de comando
"""
from sqlalchemy.exc import OperationalError
from app.cli import criar_ou_redefinir_admin
from app.models import Admin


class TestIndex:

    def test_info_e_banco_ok(self, client):
        resp = client.get('/')
        assert resp.status_code == 200
        data = resp.get_json()
        assert 'IFNMG' in data['descricao']
        assert data['autor']
        assert data['banco'] == 'ok'

    def test_banco_indisponivel(self, client, db, monkeypatch):
        def falha(*args, **kwargs):
            raise OperationalError('SELECT 1', {}, Exception('sem conexão'))

        monkeypatch.setattr(db.session, 'execute', falha)
        resp = client.get('/')
        assert resp.status_code == 200
        assert resp.get_json()['banco'] == 'indisponivel'

    def test_rota_inexistente_em_json(self, client):
        resp = client.get('/nao-existe')
        assert resp.status_code == 404
        assert resp.get_json()['error'] == 'nao_encontrado'


class TestCriarAdmin:

    def test_cria_admin(self, app_context, db):
        admin, criado = criar_ou_redefinir_admin('coordenacao', 'Senha123')
        assert criado is True
        assert admin.check_password('Senha123')

    def test_redefine_senha(self, app_context, db, admin_user):
        admin, criado = criar_ou_redefinir_admin('admin', 'NovaSenha1')
        assert criado is False
        assert admin.id == admin_user.id
        assert admin.check_password('NovaSenha1')
        assert not admin.check_password('AdminPass123')

    def test_comando_criar_admin(self, app, db):
        runner = app.test_cli_runner()
        result = runner.invoke(args=['criar-admin', '--username', 'secretaria', '--password', 'abc123'])
        assert result.exit_code == 0
        assert 'criado' in result.output
        assert Admin.query.filter_by(username='secretaria').first() is not None

    def test_comando_usa_config(self, app, db):
        app.config.update({'ADMIN_USERNAME': 'envadmin', 'ADMIN_PASSWORD': 'envpass'})
        result = app.test_cli_runner().invoke(args=['criar-admin'])
        assert result.exit_code == 0
        assert Admin.query.filter_by(username='envadmin').first() is not None

    def test_comando_sem_credenciais(self, app, db):
        app.config.update({'ADMIN_USERNAME': None, 'ADMIN_PASSWORD': None})
        result = app.test_cli_runner().invoke(args=['criar-admin'])
        assert result.exit_code != 0
