# apps/scheduler/scheduler.py

"""
Agendador guloso de tarefas

Distribui as tarefas incompletas de um projeto em datas sequenciais.
Função pura: não persiste nada e não consulta relógio - a data inicial
é sempre recebida de quem chama.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List


@dataclass(frozen=True)
class ScheduledTask:
    """Tarefa com a data atribuída pelo agendador (nunca persistida)"""

    task_id: int
    title: str
    scheduled_date: date

    def as_dict(self):
        return {
            'taskId': self.task_id,
            'title': self.title,
            'scheduledDate': self.scheduled_date,
        }


def _due_date_key(task) -> date:
    # Sem prazo vai para o fim
    return task.due_date if task.due_date is not None else date.max


def schedule(tasks: Iterable, start_date: date, days_per_task: int) -> List[ScheduledTask]:
    """
    Agenda tarefas incompletas a partir de start_date

    1. Descarta tarefas concluídas
    2. Ordena por prazo (estável; sem prazo por último)
    3. Atribui datas avançando days_per_task dias por tarefa
       (valores <= 0 avançam 1 dia)

    Args:
        tasks: objetos com id, title, due_date e is_completed
        start_date: data da primeira tarefa
        days_per_task: intervalo entre tarefas consecutivas

    Returns:
        Lista de ScheduledTask na ordem de agendamento

    Raises:
        OverflowError: alguma data passaria de date.max
    """
    step = timedelta(days=days_per_task if days_per_task > 0 else 1)

    pending = [task for task in tasks if not task.is_completed]
    pending = sorted(pending, key=_due_date_key)

    # A data de cada tarefa é calculada a partir do início, sem avançar
    # além da última tarefa agendada
    return [
        ScheduledTask(task_id=task.id, title=task.title, scheduled_date=start_date + step * index)
        for index, task in enumerate(pending)
    ]
