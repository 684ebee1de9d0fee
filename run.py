from app import create_app, db
import os

app = create_app()


@app.shell_context_processor
def make_shell_context():
    # Importar models aqui para evitar importação circular
    from app.models import Objeto, Admin

    return {'db': db, 'Objeto': Objeto, 'Admin': Admin}


if __name__ == '__main__':
    with app.app_context():
        # Garantir que o diretório instance existe
        os.makedirs('instance', exist_ok=True)

        # Mostrar configuração do banco
        print(f"Banco de dados: {app.config['SQLALCHEMY_DATABASE_URI']}")

        # Criar tabelas
        db.create_all()
        print("Banco de dados criado/atualizado")

    debug = os.environ.get('FLASK_DEBUG', 'False').lower() in ['true', '1', 'on']
    port = int(os.environ.get('PORT', 3000))
    print(f"Achados & Perdidos rodando em http://localhost:{port} (debug={debug})")
    app.run(debug=debug, host='0.0.0.0', port=port)
