# apps/core/signals.py

import logging

from django.db.models.signals import post_delete, post_save, pre_delete
from django.dispatch import receiver

from .models import Project, User

logger = logging.getLogger(__name__)


@receiver(post_save, sender=User)
def registrar_novo_usuario(sender, instance, created, **kwargs):
    """
    Log de auditoria para contas novas
    """
    if created:
        logger.info(f"[AUDITORIA] Conta criada: {instance.username} (id={instance.pk})")


@receiver(pre_delete, sender=Project)
def contar_tarefas_removidas(sender, instance, **kwargs):
    """
    Guarda quantas tarefas sairão junto com o projeto (cascata)
    """
    instance._tarefas_em_cascata = instance.tasks.count()


@receiver(post_delete, sender=Project)
def registrar_projeto_removido(sender, instance, **kwargs):
    """
    Log de auditoria da remoção de projeto
    """
    tarefas = getattr(instance, '_tarefas_em_cascata', 0)
    logger.info(
        f"[AUDITORIA] Projeto {instance.pk} '{instance.title}' removido "
        f"(dono={instance.owner_id}, tarefas em cascata={tarefas})"
    )
