# apps/core/exceptions.py

"""
Taxonomia de erros da API

Cada erro carrega o status HTTP e o corpo JSON que deve cruzar a fronteira.
A conversão para resposta acontece no ApiErrorMiddleware.
"""

from typing import Dict, List, Optional


class ApiError(Exception):
    """Erro base - nunca expõe detalhes internos ao cliente"""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def as_payload(self) -> Dict:
        return {'error': self.message}


class ValidationError(ApiError):
    """Entrada malformada ou fora dos limites (400)"""

    status_code = 400
    default_message = 'Invalid request'

    def __init__(self, message: Optional[str] = None, fields: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.fields = fields or {}

    def as_payload(self) -> Dict:
        payload = super().as_payload()
        if self.fields:
            payload['fields'] = self.fields
        return payload


class Unauthenticated(ApiError):
    """Token ausente, inválido ou expirado (401)"""

    status_code = 401
    default_message = 'Authentication required'


class NotFound(ApiError):
    """
    Registro inexistente OU pertencente a outro usuário (404)

    Os dois casos são propositalmente indistinguíveis para o cliente.
    """

    status_code = 404
    default_message = 'Not found'


class Conflict(ApiError):
    """Violação de unicidade, ex: username duplicado (409)"""

    status_code = 409
    default_message = 'Conflict'
