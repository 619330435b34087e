# apps/core/models.py

from django.core.validators import MinLengthValidator
from django.db import models
from django.utils import timezone

from .exceptions import NotFound


class User(models.Model):
    """
    Conta de usuário da API

    Não confundir com o usuário do admin (django.contrib.auth): este modelo
    guarda apenas o username e o hash opaco gerado por credentials.hash_password.
    """

    username = models.CharField(max_length=150, unique=True)
    password_hash = models.CharField(max_length=128)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'app_user'
        ordering = ['username']

    def __str__(self):
        return self.username

    def as_dict(self):
        return {'id': self.id, 'username': self.username}


class ProjectQuerySet(models.QuerySet):
    """
    Consultas de projeto sempre filtradas pelo dono

    O filtro de propriedade vai na MESMA query que busca o registro,
    nunca buscar-e-depois-checar.
    """

    def owned_by(self, user_id):
        return self.filter(owner_id=user_id)

    def find_owned(self, project_id, user_id):
        try:
            return self.owned_by(user_id).get(pk=project_id)
        except self.model.DoesNotExist:
            raise NotFound()


class Project(models.Model):
    """Projeto - pertence a exatamente um usuário"""

    owner = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='projects'
    )
    title = models.CharField(max_length=100, validators=[MinLengthValidator(3)])
    description = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    objects = ProjectQuerySet.as_manager()

    class Meta:
        db_table = 'project'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='project_owner_created_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.owner.username})"

    def as_summary(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'createdAt': self.created_at,
        }

    def as_dict_with_tasks(self):
        """Resumo + tarefas; usa o cache do prefetch quando disponível"""
        data = self.as_summary()
        data['tasks'] = [task.as_dict() for task in self.tasks.all()]
        return data


class TaskQuerySet(models.QuerySet):
    """Consultas de tarefa filtradas pela cadeia Task -> Project -> User"""

    def owned_by(self, user_id):
        return self.filter(project__owner_id=user_id)

    def find_owned(self, task_id, user_id):
        try:
            return self.owned_by(user_id).get(pk=task_id)
        except self.model.DoesNotExist:
            raise NotFound()


class Task(models.Model):
    """Tarefa - pertence a exatamente um projeto"""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    title = models.CharField(max_length=200)
    due_date = models.DateField(null=True, blank=True)
    is_completed = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=timezone.now)

    objects = TaskQuerySet.as_manager()

    class Meta:
        db_table = 'task'
        ordering = ['created_at', 'id']

    def __str__(self):
        return self.title

    def as_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'dueDate': self.due_date,
            'isCompleted': self.is_completed,
            'createdAt': self.created_at,
        }
