# tests/test_security.py
"""
Testes das funções de segurança
"""
import pytest
import time
from app.utils.security import (
    hash_password, verify_password,
    create_token, decode_token, generate_admin_token,
    mask_sensitive_data,
)


class TestPasswordHash:
    """Testes de hash de senha / palavra-passe"""

    def test_hash_nao_e_texto_plano(self):
        assert hash_password('1234') != '1234'

    def test_hash_com_sal(self):
        assert hash_password('1234') != hash_password('1234')

    def test_verificacao(self):
        hashed = hash_password('segredo')
        assert verify_password('segredo', hashed) is True
        assert verify_password('outro', hashed) is False


class TestGenericToken:
    """Testes de create_token e decode_token"""

    def test_create_and_decode(self, app_context):
        token = create_token({'action': 'test', 'data': 123})
        payload = decode_token(token)
        assert payload is not None
        assert payload['action'] == 'test'
        assert payload['data'] == 123

    def test_decode_with_purpose_mismatch(self, app_context):
        token = create_token({'purpose': 'custom', 'val': 1})
        assert decode_token(token, purpose='other') is None

    def test_expired_token(self, app_context):
        token = create_token({'data': 1}, expires_in=0)
        time.sleep(1)
        assert decode_token(token) is None

    def test_invalid_token(self, app_context):
        assert decode_token('invalid.token.here') is None
        assert decode_token('') is None

    def test_token_assinado_com_outra_chave(self, app_context, app):
        token = create_token({'data': 1})
        app.config['SECRET_KEY'] = 'outra-chave'
        assert decode_token(token) is None


class TestAdminToken:

    def test_admin_token(self, app_context):
        payload = decode_token(generate_admin_token(7), purpose='admin')
        assert payload['admin_id'] == 7

    def test_admin_token_expirado(self, app_context):
        token = generate_admin_token(7, expires_in=0)
        time.sleep(1)
        assert decode_token(token, purpose='admin') is None


class TestMaskSensitiveData:

    def test_mask(self):
        assert mask_sensitive_data('abcdefgh') == '****efgh'

    def test_mask_curto(self):
        assert mask_sensitive_data('abc') == '***'
