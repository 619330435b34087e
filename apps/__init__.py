# apps/__init__.py

"""
MiniPM - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Models, autenticação e guarda de propriedade
- projects: API de projetos e tarefas
- scheduler: Agendamento de tarefas em datas sequenciais
"""

__version__ = '0.1.0'
