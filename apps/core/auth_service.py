# apps/core/auth_service.py

"""
Serviço de Autenticação - registro e login de contas da API

A view cuida do HTTP; este serviço cuida da lógica de credenciais.
Nenhuma instância global: o serviço é montado em config/services.py.
"""

import logging

from django.conf import settings
from django.db import IntegrityError, transaction

from .credentials import hash_password, issue_token, verify_password
from .exceptions import Conflict, Unauthenticated
from .models import User

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Casos de uso de conta: registrar e autenticar"""

    def __init__(self, signing_key: str, issuer: str):
        self._signing_key = signing_key
        self._issuer = issuer

    @classmethod
    def from_settings(cls):
        return cls(
            signing_key=settings.MINIPM_TOKEN_SIGNING_KEY,
            issuer=settings.MINIPM_TOKEN_ISSUER,
        )

    def register(self, username: str, password: str) -> User:
        """
        Cria a conta com senha protegida

        A unicidade do username é garantida pela constraint do banco,
        não por uma consulta prévia.

        Raises:
            Conflict: username já cadastrado
        """
        password_hash = hash_password(password)

        try:
            with transaction.atomic():
                user = User.objects.create(username=username, password_hash=password_hash)
        except IntegrityError:
            logger.info(f"Registro recusado: username '{username}' já existe")
            raise Conflict('Username already exists')

        return user

    def login(self, username: str, password: str) -> str:
        """
        Autentica e emite o token bearer

        Raises:
            Unauthenticated: usuário inexistente ou senha incorreta
        """
        user = User.objects.filter(username=username).first()

        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Tentativa de login falhada para: {username}")
            raise Unauthenticated('Invalid username or password')

        return issue_token(user.id, user.username, self._signing_key, self._issuer)
