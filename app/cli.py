"""
Comandos de linha de comando registrados na aplicação
"""
import click
from app import db
from app.models import Admin


def criar_ou_redefinir_admin(username, password):
    """
    Cria o admin ou redefine a senha se o username já existir

    Returns:
        (admin, criado)
    """
    admin = Admin.query.filter_by(username=username).first()
    criado = admin is None

    if criado:
        admin = Admin(username=username)
        db.session.add(admin)

    admin.set_password(password)
    db.session.commit()
    return admin, criado


def register_commands(app):

    @app.cli.command('criar-admin')
    @click.option('--username', default=None, help='Usuário do admin (padrão: ADMIN_USERNAME)')
    @click.option('--password', default=None, help='Senha do admin (padrão: ADMIN_PASSWORD)')
    def criar_admin_command(username, password):
        """Cria ou redefine o usuário administrador"""
        username = username or app.config.get('ADMIN_USERNAME')
        password = password or app.config.get('ADMIN_PASSWORD')

        if not username or not password:
            raise click.UsageError('Informe --username e --password ou defina ADMIN_USERNAME/ADMIN_PASSWORD')

        db.create_all()
        admin, criado = criar_ou_redefinir_admin(username, password)
        if criado:
            click.echo(f"✅ Admin '{admin.username}' criado com sucesso!")
        else:
            click.echo(f"⚠️  Admin '{admin.username}' já existia: senha redefinida")
