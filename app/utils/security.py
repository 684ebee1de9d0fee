import os
import jwt
import bcrypt
from datetime import datetime, timedelta
from typing import Optional, Dict, Any


def _secret_key() -> str:
    from flask import current_app, has_app_context
    if has_app_context():
        return current_app.config['SECRET_KEY']
    return os.getenv('SECRET_KEY', 'dev-key-change-in-production')


def hash_password(password: str) -> str:
    """
    Hash de senha usando bcrypt

    Usado tanto para a senha do admin quanto para a palavra-passe
    dos objetos.

    Args:
        password: Senha em texto plano

    Returns:
        Hash da senha
    """
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verificar senha contra hash

    Args:
        password: Senha em texto plano
        password_hash: Hash armazenado

    Returns:
        True se corresponde, False caso contrário
    """
    return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))


def create_token(payload: Dict[Any, Any], expires_in: int = 3600) -> str:
    """
    Criar token JWT genérico

    Args:
        payload: Dados do token
        expires_in: Tempo de expiração em segundos

    Returns:
        Token JWT
    """
    agora = datetime.utcnow()
    payload = dict(payload)
    payload['iat'] = agora
    payload['exp'] = agora + timedelta(seconds=expires_in)

    return jwt.encode(
        payload,
        _secret_key(),
        algorithm='HS256'
    )


def decode_token(token: str, purpose: str = None) -> Optional[Dict[Any, Any]]:
    """
    Decodificar token JWT genérico

    Args:
        token: Token JWT
        purpose: Propósito esperado (opcional)

    Returns:
        Payload se válido, None caso contrário
    """
    try:
        payload = jwt.decode(
            token,
            _secret_key(),
            algorithms=['HS256']
        )
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None

    # Verificar propósito se fornecido
    if purpose and payload.get('purpose') != purpose:
        return None

    return payload


def generate_admin_token(admin_id: int, expires_in: int = 8 * 3600) -> str:
    """Token de acesso às rotas /admin"""
    return create_token({'admin_id': admin_id, 'purpose': 'admin'}, expires_in)


def mask_sensitive_data(data: str, visible_chars: int = 4) -> str:
    """
    Mascarar dados sensíveis para log (ex: tokens)

    Args:
        data: Dados para mascarar
        visible_chars: Número de caracteres visíveis no final

    Returns:
        Dados mascarados
    """
    if len(data) <= visible_chars:
        return '*' * len(data)

    masked_length = len(data) - visible_chars
    return '*' * masked_length + data[-visible_chars:]
