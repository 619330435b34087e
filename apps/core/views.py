# apps/core/views.py

import json
import logging

from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET

import apps

from .exceptions import Unauthenticated, ValidationError
from .forms import LoginForm, RegisterForm
from .models import User
from .utils import first_error_message, form_errors_to_fields, snake_case_keys

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class ApiView(View):
    """
    Base das views JSON da API

    Autenticação é por token bearer, não por cookie, então CSRF não se aplica.
    """

    def parse_body(self, request) -> dict:
        """Corpo JSON como dict; corpo vazio vale {}"""
        if not request.body:
            return {}
        try:
            data = json.loads(request.body)
        except (UnicodeDecodeError, ValueError):
            raise ValidationError('Malformed JSON body')
        try:
            # Escapes como "\ud800" geram surrogates que não viram UTF-8
            json.dumps(data, ensure_ascii=False).encode('utf-8')
        except UnicodeEncodeError:
            raise ValidationError('Malformed JSON body')
        if not isinstance(data, dict):
            raise ValidationError('JSON body must be an object')
        return data

    def validate(self, form_class, data: dict) -> dict:
        """
        Valida o corpo com um form Django e devolve cleaned_data

        Chaves camelCase do JSON viram snake_case antes da validação;
        os erros voltam em camelCase.
        """
        form = form_class(data=snake_case_keys(data))
        if not form.is_valid():
            fields = form_errors_to_fields(form)
            raise ValidationError(first_error_message(fields), fields=fields)
        return form.cleaned_data

    def created(self, payload, location: str) -> JsonResponse:
        response = JsonResponse(payload, status=201)
        response['Location'] = location
        return response

    def no_content(self) -> HttpResponse:
        return HttpResponse(status=204)


class AuthenticatedApiView(ApiView):
    """
    View que exige token bearer válido

    O AuthContext é resolvido uma vez em dispatch e passado explicitamente
    ao handler como argumento `auth`.
    """

    guard = None

    def dispatch(self, request, *args, **kwargs):
        if request.method.lower() not in self.http_method_names or not hasattr(self, request.method.lower()):
            return self.http_method_not_allowed(request, *args, **kwargs)
        auth = self.guard.authenticate(request)
        return super().dispatch(request, *args, auth=auth, **kwargs)


class RegisterView(ApiView):
    """POST /auth/register"""

    auth_service = None

    def post(self, request):
        data = self.validate(RegisterForm, self.parse_body(request))
        user = self.auth_service.register(data['username'], data['password'])
        logger.info(f"Usuário registrado: {user.username} (id={user.id})")
        return self.created(user.as_dict(), f'/api/v1/users/{user.id}')


class LoginView(ApiView):
    """POST /auth/login"""

    auth_service = None

    def post(self, request):
        form = LoginForm(data=self.parse_body(request))
        if not form.is_valid():
            raise Unauthenticated('Invalid username or password')

        token = self.auth_service.login(form.cleaned_data['username'], form.cleaned_data['password'])
        return JsonResponse({'token': token})


@require_GET
def health_check(request):
    """
    Health check para monitoramento
    """
    try:
        # Verificar conexão com banco
        User.objects.exists()

        status = {
            'status': 'healthy',
            'database': 'ok',
            'timestamp': timezone.now().isoformat(),
            'version': apps.__version__
        }

        return JsonResponse(status)

    except Exception:
        logger.exception("Health check falhou")
        status = {
            'status': 'unhealthy',
            'database': 'error',
            'timestamp': timezone.now().isoformat(),
            'version': apps.__version__
        }

        return JsonResponse(status, status=500)
