# Importar todos os models
from .objeto import Objeto
from .admin import Admin

__all__ = ['Objeto', 'Admin']
