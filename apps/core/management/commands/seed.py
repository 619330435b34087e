# apps/core/management/commands/seed.py

from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.db import connection, transaction
from django.utils import timezone

from apps.core.credentials import hash_password
from apps.core.models import Project, Task, User

DEMO_TASKS = [
    ('Levantar requisitos', 2),
    ('Desenhar o modelo de dados', 5),
    ('Escrever testes de aceitação', None),
]


class Command(BaseCommand):
    help = 'Cria uma conta de demonstração com um projeto e tarefas'

    def add_arguments(self, parser):
        parser.add_argument('--username', default='demo', help='Username da conta demo')
        parser.add_argument('--password', default='demo123', help='Senha da conta demo')

    def handle(self, *args, **options):
        """
        Popula o banco com dados de exemplo

        Idempotente: se a conta já existe, nada é criado.
        """
        username = options['username']
        password = options['password']

        if len(username) < 3 or len(password) < 6:
            raise CommandError('Username precisa de 3+ caracteres e senha de 6+')

        self._testar_conectividade_banco()

        if User.objects.filter(username=username).exists():
            self.stdout.write(
                self.style.WARNING(f"Conta '{username}' já existe - nada a fazer")
            )
            return

        with transaction.atomic():
            user = User.objects.create(username=username, password_hash=hash_password(password))
            projeto = self._criar_projeto_demo(user)

        self.stdout.write(
            self.style.SUCCESS(
                f"Conta '{username}' criada com o projeto '{projeto.title}' "
                f"({projeto.tasks.count()} tarefas)"
            )
        )

    def _testar_conectividade_banco(self):
        """Testa conectividade básica"""
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            result = cursor.fetchone()

            if result[0] != 1:
                raise CommandError("Banco não está respondendo corretamente")

    def _criar_projeto_demo(self, user):
        projeto = Project.objects.create(
            owner=user,
            title='Projeto de demonstração',
            description='Criado pelo comando seed',
        )

        hoje = timezone.now().date()
        for titulo, dias_prazo in DEMO_TASKS:
            Task.objects.create(
                project=projeto,
                title=titulo,
                due_date=hoje + timedelta(days=dias_prazo) if dias_prazo is not None else None,
            )

        return projeto
