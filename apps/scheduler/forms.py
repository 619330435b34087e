# apps/scheduler/forms.py

from django import forms

from apps.core.forms import IsoDateField, JsonIntegerField

# Cem anos de intervalo entre tarefas
MAX_DAYS_PER_TASK = 36500


class ScheduleForm(forms.Form):
    """
    Parâmetros do agendamento

    days_per_task ausente vale 0, que o agendador trata como 1 dia.
    """

    start_date = IsoDateField(required=False)

    days_per_task = JsonIntegerField(
        required=False,
        max_value=MAX_DAYS_PER_TASK,
        error_messages={
            'invalid': 'daysPerTask must be an integer',
            'max_value': f'daysPerTask must be at most {MAX_DAYS_PER_TASK}',
        }
    )

    def clean_days_per_task(self):
        value = self.cleaned_data['days_per_task']
        return 0 if value is None else value
