# app/routes/public.py
import logging
from flask import Blueprint, jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from app import db

bp = Blueprint('public', __name__)
logger = logging.getLogger(__name__)


@bp.route('/')
def index():
    """Informações do projeto e verificação do banco"""
    logger.info("Rota GET / solicitada")

    try:
        db.session.execute(text('SELECT 1'))
        banco = 'ok'
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Banco de dados indisponível: {e}")
        banco = 'indisponivel'

    return jsonify({
        'descricao': current_app.config.get('DESCRICAO'),
        'autor': current_app.config.get('AUTOR'),
        'versao': current_app.config.get('VERSAO'),
        'banco': banco,
    })
