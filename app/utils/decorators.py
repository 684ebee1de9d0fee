import logging
from functools import wraps
from flask import request
from flask_login import current_user
from app.errors import Unauthorized
from app.utils.security import mask_sensitive_data

logger = logging.getLogger(__name__)


def admin_required(f):
    """Exige um token de admin válido no header Authorization"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            header = request.headers.get('Authorization', '')
            if header:
                logger.warning(
                    f"Token de admin inválido em {request.path}: "
                    f"{mask_sensitive_data(header)}"
                )
            else:
                logger.warning(f"Acesso admin sem token em {request.path}")
            raise Unauthorized('Token de administrador ausente ou inválido')

        return f(*args, **kwargs)
    return decorated_function
