# apps/core/credentials.py

"""
Serviço de Credenciais - hash de senhas e tokens assinados

Funções puras, sem estado compartilhado entre requests.

Formato do hash (base64):
    version_byte (1) || salt (16) || derived_key (32)

Formato do token:
    TimestampSigner do Django (HMAC-SHA256) sobre um objeto JSON
    com as claims id, username e iss.
"""

import base64
import binascii
import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from django.core import signing
from django.utils.crypto import constant_time_compare, pbkdf2

logger = logging.getLogger(__name__)

HASH_VERSION = 0
SALT_SIZE = 16
KEY_SIZE = 32
PBKDF2_ITERATIONS = 100_000

TOKEN_SALT = 'minipm.auth.token'
TOKEN_ALGORITHM = 'sha256'
TOKEN_LIFETIME = timedelta(days=7)


@dataclass(frozen=True)
class TokenClaims:
    """Claims extraídas de um token válido"""

    subject: str
    username: str
    issuer: str


def _derive(password: str, salt: bytes) -> bytes:
    return pbkdf2(password, salt, PBKDF2_ITERATIONS, dklen=KEY_SIZE, digest=hashlib.sha256)


def hash_password(password: str) -> str:
    """
    Gera o hash da senha com salt aleatório

    Duas chamadas com a mesma senha produzem blobs diferentes.
    """
    salt = secrets.token_bytes(SALT_SIZE)
    blob = bytes([HASH_VERSION]) + salt + _derive(password, salt)
    return base64.b64encode(blob).decode('ascii')


def verify_password(password: str, encoded: str) -> bool:
    """Verifica a senha contra o blob armazenado; blob malformado retorna False"""
    try:
        blob = base64.b64decode(encoded, validate=True)
    except (binascii.Error, TypeError, ValueError):
        return False

    if len(blob) != 1 + SALT_SIZE + KEY_SIZE or blob[0] != HASH_VERSION:
        return False

    salt = blob[1:1 + SALT_SIZE]
    expected = blob[1 + SALT_SIZE:]
    try:
        candidate = _derive(password, salt)
    except (TypeError, ValueError):
        return False
    return constant_time_compare(candidate, expected)


def _signer(signing_key: str) -> signing.TimestampSigner:
    return signing.TimestampSigner(key=signing_key, salt=TOKEN_SALT, algorithm=TOKEN_ALGORITHM)


def issue_token(user_id: int, username: str, signing_key: str, issuer: str) -> str:
    """Emite token assinado com validade limitada (verificada em validate_token)"""
    claims = {
        'id': str(user_id),
        'username': username,
        'iss': issuer,
    }
    return _signer(signing_key).sign_object(claims)


def validate_token(
    token: str,
    signing_key: str,
    issuer: str,
    max_age: timedelta = TOKEN_LIFETIME,
) -> Optional[TokenClaims]:
    """
    Valida assinatura, expiração e emissor

    Returns:
        TokenClaims se válido, None caso contrário
    """
    try:
        claims = _signer(signing_key).unsign_object(token, max_age=max_age)
    except signing.SignatureExpired:
        logger.info("Token expirado rejeitado")
        return None
    except (signing.BadSignature, ValueError, TypeError):
        return None

    if not isinstance(claims, dict):
        return None

    token_issuer = claims.get('iss')
    if not isinstance(token_issuer, str) or not constant_time_compare(token_issuer, issuer):
        logger.info("Token com emissor inesperado rejeitado")
        return None

    return TokenClaims(
        subject=str(claims.get('id', '')),
        username=str(claims.get('username', '')),
        issuer=token_issuer,
    )
