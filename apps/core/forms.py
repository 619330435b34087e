# apps/core/forms.py

from datetime import date, datetime, timezone as dt_timezone

from django import forms
from django.core.exceptions import ValidationError
from django.utils.dateparse import parse_date, parse_datetime


# === CAMPOS PARA CORPOS JSON ===
# Os campos padrão do Django esperam strings de formulário HTML e
# convertem qualquer valor com str(); aqui o tipo JSON é verificado.


class JsonCharField(forms.CharField):
    """Texto que só aceita string JSON (ou null)"""

    default_error_messages = {
        'invalid': 'Must be a string',
    }

    def to_python(self, value):
        if value is not None and not isinstance(value, str):
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)


class JsonIntegerField(forms.IntegerField):
    """Inteiro JSON; booleanos, floats e strings são recusados"""

    def to_python(self, value):
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return value


class JsonBooleanField(forms.Field):
    """
    true, false ou null

    Substitui o NullBooleanField, cujo widget procura o valor bruto
    em um dicionário de strings de <select>.
    """

    default_error_messages = {
        'invalid': 'Must be true or false',
    }

    def to_python(self, value):
        if value is None or isinstance(value, bool):
            return value
        raise ValidationError(self.error_messages['invalid'], code='invalid')


class IsoDateField(forms.DateField):
    """
    Campo de data que aceita 'YYYY-MM-DD' ou datetime ISO-8601

    O cliente web envia Date.toISOString(); datetimes com fuso são
    normalizados para a data em UTC.
    """

    def to_python(self, value):
        if value is None or value == '':
            return None
        if isinstance(value, datetime):
            return self._to_date(value)
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValidationError(self.error_messages['invalid'], code='invalid')

        value = value.strip()
        try:
            parsed = parse_date(value)
            if parsed is not None:
                return parsed
            parsed_datetime = parse_datetime(value)
        except ValueError:
            raise ValidationError(self.error_messages['invalid'], code='invalid')

        if parsed_datetime is None:
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return self._to_date(parsed_datetime)

    def _to_date(self, value: datetime) -> date:
        if value.tzinfo is not None:
            value = value.astimezone(dt_timezone.utc)
        return value.date()


class RegisterForm(forms.Form):
    """Dados de registro de conta"""

    username = JsonCharField(
        min_length=3,
        max_length=150,
        strip=False,
        error_messages={
            'required': 'Username must be 3+ chars',
            'min_length': 'Username must be 3+ chars',
            'invalid': 'Username must be a string',
            'max_length': 'Username must be at most 150 chars',
        }
    )

    password = JsonCharField(
        min_length=6,
        strip=False,
        error_messages={
            'required': 'Password must be 6+ chars',
            'min_length': 'Password must be 6+ chars',
            'invalid': 'Password must be a string',
        }
    )

    def clean_username(self):
        """Username só com espaços não é aceito"""
        username = self.cleaned_data['username']
        if not username.strip():
            raise ValidationError('Username must be 3+ chars')
        return username

    def clean_password(self):
        password = self.cleaned_data['password']
        if not password.strip():
            raise ValidationError('Password must be 6+ chars')
        return password


class LoginForm(forms.Form):
    """Credenciais de login"""

    username = JsonCharField(max_length=150, strip=False)
    password = JsonCharField(strip=False)
