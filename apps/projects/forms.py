# apps/projects/forms.py

from django import forms
from django.core.exceptions import ValidationError

from apps.core.forms import IsoDateField, JsonBooleanField, JsonCharField


class ProjectForm(forms.Form):
    """Criação de projeto - limites inclusivos, contados na string original"""

    title = JsonCharField(
        min_length=3,
        max_length=100,
        strip=False,
        error_messages={
            'required': 'Title must be 3-100 chars',
            'invalid': 'Title must be a string',
            'min_length': 'Title must be 3-100 chars',
            'max_length': 'Title must be 3-100 chars',
        }
    )

    description = JsonCharField(
        required=False,
        max_length=500,
        strip=False,
        empty_value=None,
        error_messages={
            'max_length': 'Description max 500 chars',
            'invalid': 'Description must be a string',
        }
    )

    def clean_title(self):
        title = self.cleaned_data['title']
        if not title.strip():
            raise ValidationError('Title must be 3-100 chars')
        return title


class TaskForm(forms.Form):
    """Criação de tarefa"""

    title = JsonCharField(
        max_length=200,
        strip=False,
        error_messages={
            'required': 'Title required',
            'invalid': 'Title must be a string',
            'max_length': 'Title max 200 chars',
        }
    )

    due_date = IsoDateField(required=False)

    def clean_title(self):
        title = self.cleaned_data['title']
        if not title.strip():
            raise ValidationError('Title required')
        return title


class TaskUpdateForm(forms.Form):
    """
    Atualização parcial de tarefa

    Campos ausentes chegam como None e são ignorados pelo store.
    """

    title = JsonCharField(
        required=False,
        max_length=200,
        strip=False,
        empty_value=None,
        error_messages={
            'max_length': 'Title max 200 chars',
        }
    )

    due_date = IsoDateField(required=False)

    is_completed = JsonBooleanField(required=False)
