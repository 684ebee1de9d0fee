"""
Script para criar usuário administrador
Execute: python create_admin.py [username] [senha]
Sem argumentos usa ADMIN_USERNAME e ADMIN_PASSWORD do .env
"""
import sys
from getpass import getpass

from app import create_app, db
from app.cli import criar_ou_redefinir_admin


def create_admin(username=None, password=None):
    app = create_app()

    username = username or app.config.get('ADMIN_USERNAME') or input("👤 Usuário do admin: ").strip()
    password = password or app.config.get('ADMIN_PASSWORD') or getpass("🔑 Senha do admin: ")

    if not username or not password:
        print("❌ Usuário e senha são obrigatórios")
        return False

    with app.app_context():
        db.create_all()
        admin, criado = criar_ou_redefinir_admin(username, password)

        if criado:
            print("✅ Admin criado com sucesso!")
        else:
            print("⚠️  Admin já existe! Senha redefinida.")

        print(f"\n👤 Usuário: {admin.username}")
        print("\n🚀 Agora você pode fazer login em POST /login!")
    return True


if __name__ == '__main__':
    args = sys.argv[1:]
    ok = create_admin(*args[:2])
    sys.exit(0 if ok else 1)
