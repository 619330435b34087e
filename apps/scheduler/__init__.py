# apps/scheduler/__init__.py

"""
Scheduler - distribuição de tarefas em datas sequenciais

Contém:
- schedule(): algoritmo puro de agendamento
- Relógios injetáveis (SystemClock, FixedClock)
- Endpoint POST /projects/{id}/schedule
"""
