# apps/projects/__init__.py

"""
Projects - API de projetos e tarefas

Funcionalidades:
- CRUD de projetos escopado pelo dono
- CRUD de tarefas através do projeto pai
- Alternância de conclusão de tarefas
"""
