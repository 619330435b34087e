# apps/scheduler/apps.py

import logging

from django.apps import AppConfig


class SchedulerConfig(AppConfig):
    """Configuração da app Scheduler"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.scheduler'
    verbose_name = 'Agendador de Tarefas'

    def ready(self):
        logger = logging.getLogger(__name__)
        logger.info("Scheduler App inicializada")
