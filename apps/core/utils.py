# apps/core/utils.py

import re
from typing import Dict, List

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def camel_to_snake(name: str) -> str:
    """
    Converte chave JSON para nome de campo Python
    Ex: dueDate -> due_date
    """
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def snake_to_camel(name: str) -> str:
    """
    Converte nome de campo Python para chave JSON
    Ex: is_completed -> isCompleted
    """
    first, *rest = name.split('_')
    return first + ''.join(part.capitalize() for part in rest)


def snake_case_keys(data: Dict) -> Dict:
    return {camel_to_snake(key): value for key, value in data.items()}


def form_errors_to_fields(form) -> Dict[str, List[str]]:
    """Erros do form com chaves no formato da API (camelCase)"""
    fields = {}
    for name, errors in form.errors.items():
        key = 'body' if name == '__all__' else snake_to_camel(name)
        fields[key] = [str(error) for error in errors]
    return fields


def first_error_message(fields: Dict[str, List[str]]) -> str:
    for messages in fields.values():
        if messages:
            return messages[0]
    return 'Invalid request'
