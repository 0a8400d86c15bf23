# workspace/signals.py
import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Member, Workspace
from .roles import Roles

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Workspace)
def workspace_created_or_updated(sender, instance, created, **kwargs):
    """
    On creation the owner is enrolled as the OWNER member of the workspace.
    """
    if created:
        Member.objects.get_or_create(
            user=instance.owner,
            workspace=instance,
            defaults={'role': Roles.OWNER},
        )
        logger.info(f"Workspace {instance.name} (ID: {instance.workspace_id}) created by {instance.owner.user_id}")
    else:
        logger.info(f"Workspace {instance.name} (ID: {instance.workspace_id}) updated")


@receiver(post_save, sender=Member)
def member_created(sender, instance, created, **kwargs):
    if created:
        logger.info(f"User {instance.user_id} joined workspace {instance.workspace_id} as {instance.role}")


@receiver(post_delete, sender=Member)
def member_deleted(sender, instance, **kwargs):
    logger.info(f"User {instance.user_id} left workspace {instance.workspace_id}")
