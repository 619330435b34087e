# apps/scheduler/clock.py

"""
Relógio injetável para a data inicial padrão do agendamento

Sem startDate no request, o resultado depende do dia atual; injetar
um FixedClock torna o endpoint determinístico nos testes.
"""

from datetime import date

from django.utils import timezone


class SystemClock:
    """Data atual em UTC"""

    def today(self) -> date:
        # timezone.now() é UTC quando USE_TZ=True
        return timezone.now().date()


class FixedClock:
    """Relógio parado em uma data fixa"""

    def __init__(self, fixed: date):
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed
