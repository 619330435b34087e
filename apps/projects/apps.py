# apps/projects/apps.py

import logging

from django.apps import AppConfig


class ProjectsConfig(AppConfig):
    """Configuração da app Projects"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.projects'
    verbose_name = 'Projetos e Tarefas'

    def ready(self):
        logger = logging.getLogger(__name__)
        logger.info("Projects App inicializada")
