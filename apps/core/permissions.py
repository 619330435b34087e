# apps/core/permissions.py

"""
Guarda de Propriedade (Ownership Guard)

Resolve o token bearer de cada request em um AuthContext explícito.
Todas as consultas a Project/Task recebem o user_id desse contexto e
filtram pelo dono na própria query (ver find_owned em models.py).
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings

from .credentials import TOKEN_LIFETIME, validate_token
from .exceptions import Unauthenticated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Identidade do usuário autenticado, produzida uma única vez por request"""

    user_id: int


class OwnershipGuard:
    """Valida o header Authorization e devolve o AuthContext correspondente"""

    def __init__(self, signing_key: str, issuer: str, token_lifetime: timedelta = TOKEN_LIFETIME):
        self._signing_key = signing_key
        self._issuer = issuer
        self._token_lifetime = token_lifetime

    @classmethod
    def from_settings(cls):
        return cls(
            signing_key=settings.MINIPM_TOKEN_SIGNING_KEY,
            issuer=settings.MINIPM_TOKEN_ISSUER,
            token_lifetime=timedelta(days=settings.MINIPM_TOKEN_LIFETIME_DAYS),
        )

    def authenticate(self, request) -> AuthContext:
        """
        Extrai e valida o token bearer

        Raises:
            Unauthenticated: token ausente, malformado, inválido, expirado
            ou com subject que não é um id válido
        """
        token = self._token_from_request(request)
        if not token:
            logger.warning(f"Auth falhou: token ausente para {request.path}")
            raise Unauthenticated()

        claims = validate_token(token, self._signing_key, self._issuer, max_age=self._token_lifetime)
        if claims is None:
            logger.warning(f"Auth falhou: token inválido para {request.path}")
            raise Unauthenticated()

        user_id = self._parse_user_id(claims.subject)
        if user_id is None:
            logger.warning(f"Auth falhou: subject inválido para {request.path}")
            raise Unauthenticated()

        return AuthContext(user_id=user_id)

    def _token_from_request(self, request) -> str:
        header = request.headers.get('Authorization', '')
        scheme, _, token = header.partition(' ')
        if scheme.lower() != 'bearer':
            return ''
        return token.strip()

    def _parse_user_id(self, subject: str):
        if not (subject.isascii() and subject.isdigit()):
            return None
        user_id = int(subject)
        return user_id if user_id > 0 else None
