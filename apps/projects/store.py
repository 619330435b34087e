# apps/projects/store.py

"""
Acesso a Projetos e Tarefas

Toda operação recebe o AuthContext e filtra pela cadeia de propriedade
na mesma query. Registros de outros usuários são tratados como inexistentes.
"""

import logging
from datetime import date
from typing import List, Optional

from django.db import transaction

from apps.core.exceptions import NotFound, Unauthenticated
from apps.core.models import Project, Task, User
from apps.core.permissions import AuthContext

logger = logging.getLogger(__name__)


class ProjectStore:
    """CRUD de projetos e tarefas escopado pelo dono"""

    # =================== PROJETOS ===================

    def list_projects(self, auth: AuthContext) -> List[Project]:
        """Projetos do usuário, mais recentes primeiro"""
        return list(Project.objects.owned_by(auth.user_id).order_by('-created_at', '-id'))

    def create_project(self, auth: AuthContext, title: str, description: Optional[str] = None) -> Project:
        """
        Cria projeto para o dono do token

        A conta é travada na mesma transação: um token de conta removida
        não pode criar projeto órfão.

        Raises:
            Unauthenticated: a conta do token não existe mais
        """
        with transaction.atomic():
            owner = User.objects.select_for_update().filter(pk=auth.user_id).first()
            if owner is None:
                logger.warning(f"Criação de projeto recusada: conta {auth.user_id} não existe")
                raise Unauthenticated()

            project = Project.objects.create(
                owner=owner,
                title=title,
                description=description,
            )
        logger.info(f"Projeto {project.id} criado pelo usuário {auth.user_id}")
        return project

    def get_project(self, auth: AuthContext, project_id: int, with_tasks: bool = False) -> Project:
        """
        Busca projeto do usuário

        Raises:
            NotFound: projeto inexistente ou de outro usuário
        """
        queryset = Project.objects.all()
        if with_tasks:
            queryset = queryset.prefetch_related('tasks')
        return queryset.find_owned(project_id, auth.user_id)

    def delete_project(self, auth: AuthContext, project_id: int) -> None:
        """Remove o projeto e, em cascata, suas tarefas"""
        with transaction.atomic():
            deleted, _ = Project.objects.owned_by(auth.user_id).filter(pk=project_id).delete()
        if not deleted:
            raise NotFound()
        logger.info(f"Projeto {project_id} removido pelo usuário {auth.user_id}")

    # =================== TAREFAS ===================

    def add_task(self, project: Project, title: str, due_date: Optional[date] = None) -> Task:
        """
        Cria tarefa em um projeto já autorizado

        O projeto deve vir de get_project, que aplica o filtro de dono.
        """
        with transaction.atomic():
            task = Task.objects.create(
                project=project,
                title=title,
                due_date=due_date,
                is_completed=False,
            )
        logger.info(f"Tarefa {task.id} criada no projeto {project.id}")
        return task

    def update_task(
        self,
        auth: AuthContext,
        task_id: int,
        title: Optional[str] = None,
        due_date: Optional[date] = None,
        is_completed: Optional[bool] = None,
    ) -> Task:
        """
        Atualização parcial - None significa "não alterar"

        Título em branco também é ignorado.
        """
        with transaction.atomic():
            task = Task.objects.select_for_update().find_owned(task_id, auth.user_id)

            changed = []
            if title is not None and title.strip():
                task.title = title
                changed.append('title')
            if due_date is not None:
                task.due_date = due_date
                changed.append('due_date')
            if is_completed is not None:
                task.is_completed = is_completed
                changed.append('is_completed')

            if changed:
                task.save(update_fields=changed)

        return task

    def toggle_task(self, auth: AuthContext, task_id: int) -> Task:
        """
        Inverte is_completed

        Leitura e escrita na mesma transação, com lock na linha.
        """
        with transaction.atomic():
            task = Task.objects.select_for_update().find_owned(task_id, auth.user_id)
            task.is_completed = not task.is_completed
            task.save(update_fields=['is_completed'])
        return task

    def delete_task(self, auth: AuthContext, task_id: int) -> None:
        with transaction.atomic():
            deleted, _ = Task.objects.owned_by(auth.user_id).filter(pk=task_id).delete()
        if not deleted:
            raise NotFound()
        logger.info(f"Tarefa {task_id} removida pelo usuário {auth.user_id}")
