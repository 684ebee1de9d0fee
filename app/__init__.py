# app/__init__.py
import os
import logging
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_cors import CORS
from sqlalchemy import event

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()

logger = logging.getLogger(__name__)


def configure_logging(app):
    """Configura o logging da aplicação (terminal + arquivo fora dos testes)"""
    handlers = [logging.StreamHandler()]
    if not app.config.get('TESTING'):
        os.makedirs('logs', exist_ok=True)
        handlers.append(logging.FileHandler('logs/api.log'))

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def _lower_unicode(valor):
    return valor.lower() if isinstance(valor, str) else valor


def configure_sqlite(app):
    """No SQLite, troca o lower() nativo (só ASCII) por um que entende acentos"""
    with app.app_context():
        engine = db.engine
    if engine.dialect.name != 'sqlite':
        return

    @event.listens_for(engine, 'connect')
    def registrar_funcoes(dbapi_connection, connection_record):
        dbapi_connection.create_function('lower', 1, _lower_unicode)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config.Config')
    if test_config:
        app.config.update(test_config)

    configure_logging(app)

    # Inicializar extensões
    db.init_app(app)
    configure_sqlite(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    CORS(app, origins=app.config.get('CORS_ORIGINS', '*'))

    # Autenticação do admin via token Bearer (sem sessão)
    from app.models.admin import Admin
    from app.utils.security import decode_token

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(Admin, int(user_id))

    @login_manager.request_loader
    def load_admin_from_request(request):
        header = request.headers.get('Authorization', '')
        if not header.startswith('Bearer '):
            return None

        payload = decode_token(header[len('Bearer '):].strip(), purpose='admin')
        if not payload:
            return None
        return db.session.get(Admin, payload.get('admin_id'))

    # Tratamento de erros em JSON
    from app.errors import register_error_handlers
    register_error_handlers(app)

    # Registrar blueprints
    from app.routes import public, objetos, auth, admin
    app.register_blueprint(public.bp)
    app.register_blueprint(objetos.bp)
    app.register_blueprint(auth.bp)
    app.register_blueprint(admin.bp)

    # Comandos de linha de comando (flask criar-admin)
    from app.cli import register_commands
    register_commands(app)

    if not app.config.get('TESTING'):
        os.makedirs(app.instance_path, exist_ok=True)

    logger.debug("Aplicação criada com banco %s", app.config['SQLALCHEMY_DATABASE_URI'])
    return app
