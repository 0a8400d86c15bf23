# project/services.py
import logging

from django.utils import timezone

from task.models import Task
from task.services import get_task_analytics
from teamassist.exceptions import NotFoundException
from .models import Project

logger = logging.getLogger(__name__)


def get_project_in_workspace(workspace_id, project_id):
    try:
        return Project.objects.select_related('created_by').get(project_id=project_id, workspace_id=workspace_id)
    except Project.DoesNotExist:
        logger.error(f"Project {project_id} not found in workspace {workspace_id} at {timezone.now()}")
        raise NotFoundException("Project not found or does not belong to the specified workspace")


def create_project(workspace_id, user, **fields):
    project = Project.objects.create(workspace_id=workspace_id, created_by=user, **fields)
    logger.info(f"Project {project.project_id} created in workspace {workspace_id} by user {user.user_id} at {timezone.now()}")
    return project


def get_projects_in_workspace(workspace_id):
    return Project.objects.filter(workspace_id=workspace_id).select_related('created_by').order_by('-created_at')


def get_project_analytics(workspace_id, project_id):
    project = get_project_in_workspace(workspace_id, project_id)
    return get_task_analytics(Task.objects.filter(project=project))


def update_project(workspace_id, project_id, **fields):
    project = get_project_in_workspace(workspace_id, project_id)
    for field, value in fields.items():
        setattr(project, field, value)
    project.save()
    logger.info(f"Project {project_id} updated in workspace {workspace_id} at {timezone.now()}")
    return project


def delete_project(workspace_id, project_id):
    project = get_project_in_workspace(workspace_id, project_id)
    # tasks go with the project through the cascade
    project.delete()
    logger.info(f"Project {project_id} deleted from workspace {workspace_id} at {timezone.now()}")
