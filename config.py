import os
from dotenv import load_dotenv

load_dotenv()

# Diretório base do projeto
basedir = os.path.abspath(os.path.dirname(__file__))


def _env_bool(nome, padrao='False'):
    return os.environ.get(nome, padrao).lower() in ['true', '1', 'on']


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'

    # Database - Usar caminho absoluto
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'achados.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Ciclo de vida dos objetos
    MESES_EXPIRACAO = int(os.environ.get('MESES_EXPIRACAO', 3))
    DIAS_AVISO_EXPIRACAO = int(os.environ.get('DIAS_AVISO_EXPIRACAO', 7))

    # Admin
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    ADMIN_TOKEN_EXPIRA_EM = int(os.environ.get('ADMIN_TOKEN_EXPIRA_EM', 8 * 3600))

    # Erros e segurança
    MOSTRAR_DETALHES_ERRO = _env_bool('MOSTRAR_DETALHES_ERRO')
    # Rota legada GET /objetos/<id>/palavra/<palavraPasse> (expõe o segredo na URL)
    PERMITIR_PALAVRA_NA_URL = _env_bool('PERMITIR_PALAVRA_NA_URL')

    # App
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    DESCRICAO = 'API para plataforma de objetos perdidos no IFNMG-Campus Salinas'
    AUTOR = ('Andrey Paulino Costa, Hugo Barros Correia, João Pedro Almeida Caldeira, '
             'Luick Eduardo Neres Costa, Mizael Miranda Barbosa')
    VERSAO = '1.0.0'
