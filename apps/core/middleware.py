# apps/core/middleware.py

import logging

from django.core.exceptions import SuspiciousOperation
from django.http import JsonResponse

from .exceptions import ApiError, Unauthenticated, ValidationError

logger = logging.getLogger(__name__)

API_PREFIX = '/api/'


class ApiErrorMiddleware:
    """
    Converte exceções das views da API em respostas JSON

    - ApiError: status e corpo definidos pela própria exceção
    - SuspiciousOperation em /api/ (ex: corpo acima do limite): 400
    - Qualquer outra exceção em /api/: 500 genérico, sem detalhes internos
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, ApiError):
            response = JsonResponse(exception.as_payload(), status=exception.status_code)
            if isinstance(exception, Unauthenticated):
                response['WWW-Authenticate'] = 'Bearer'
            return response

        if not request.path.startswith(API_PREFIX):
            return None  # Deixar o tratamento padrão do Django

        if isinstance(exception, SuspiciousOperation):
            logger.warning(f"Request recusado em {request.method} {request.path}: {exception.__class__.__name__}")
            error = ValidationError('Bad request')
            return JsonResponse(error.as_payload(), status=error.status_code)

        logger.exception(f"Erro não tratado em {request.method} {request.path}")
        return JsonResponse({'error': 'Internal server error'}, status=500)
