# task/services.py
import logging

from django.db.models import Count, Prefetch, Q
from django.utils import timezone

from project.models import Project
from teamassist.exceptions import BadRequestException, NotFoundException, UnauthorizedException
from workspace.models import Member
from workspace.roles import Roles
from .models import ClarificationResponse, Task, TaskClarification, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'description', 'priority', 'status', 'assigned_to', 'due_date')
STATUS_ONLY_FIELDS = ('status',)


def _get_project_in_workspace(workspace_id, project_id):
    project = Project.objects.filter(project_id=project_id, workspace_id=workspace_id).first()
    if project is None:
        logger.error(f"Project {project_id} not found in workspace {workspace_id} at {timezone.now()}")
        raise NotFoundException("Project not found or does not belong to this workspace")
    return project


def _ensure_workspace_member(workspace_id, user_id):
    if not Member.objects.filter(user_id=user_id, workspace_id=workspace_id).exists():
        logger.warning(f"User {user_id} is not a member of workspace {workspace_id}")
        raise BadRequestException("Assigned user is not a member of this workspace")


def verify_task_belongs_to_workspace(workspace_id, task_id):
    task = Task.objects.filter(task_id=task_id, workspace_id=workspace_id).first()
    if task is None:
        logger.error(f"Task {task_id} not found in workspace {workspace_id} at {timezone.now()}")
        raise NotFoundException("Task not found or does not belong to this workspace")
    return task


def get_task_analytics(queryset):
    today = timezone.localdate()
    return queryset.aggregate(
        total_tasks=Count('task_id'),
        overdue_tasks=Count('task_id', filter=Q(due_date__lt=today) & ~Q(status=TaskStatus.DONE)),
        completed_tasks=Count('task_id', filter=Q(status=TaskStatus.DONE)),
    )


def create_task(workspace_id, project_id, user, data):
    project = _get_project_in_workspace(workspace_id, project_id)

    assigned_to = data.get('assigned_to')
    if assigned_to:
        _ensure_workspace_member(workspace_id, assigned_to)

    task = Task.objects.create(
        workspace_id=workspace_id,
        project=project,
        title=data['title'],
        description=data.get('description'),
        priority=data.get('priority') or TaskPriority.MEDIUM,
        status=data.get('status') or TaskStatus.TODO,
        assigned_to_id=assigned_to,
        due_date=data.get('due_date'),
        created_by=user,
    )
    logger.info(f"Task {task.task_id} created in project {project_id} by user {user.user_id} at {timezone.now()}")
    return task


def update_task(workspace_id, project_id, task_id, user, role, data):
    """
    Apply a field-level filtered update to a task.

    Owners and admins may change every updatable field. The task's assignee,
    when not owner or admin, may change only ``status``. Anyone else is
    refused. Status values are not transition-constrained.
    """
    _get_project_in_workspace(workspace_id, project_id)

    task = Task.objects.filter(task_id=task_id, project_id=project_id).first()
    if task is None:
        logger.error(f"Task {task_id} not found in project {project_id} at {timezone.now()}")
        raise NotFoundException("Task not found or does not belong to this project")

    is_owner_or_admin = role in (Roles.OWNER, Roles.ADMIN)
    is_assignee = task.assigned_to_id is not None and task.assigned_to_id == user.user_id

    if not is_owner_or_admin and not is_assignee:
        logger.warning(f"User {user.user_id} refused update of task {task_id} at {timezone.now()}")
        raise UnauthorizedException("You are not authorized to update this task")

    provided = [field for field in UPDATABLE_FIELDS if field in data]

    if not is_owner_or_admin and any(field not in STATUS_ONLY_FIELDS for field in provided):
        logger.warning(f"Member {user.user_id} tried to update {provided} on task {task_id} at {timezone.now()}")
        raise UnauthorizedException("Members can only update the task status")

    updates = {}
    if 'status' in data:
        updates['status'] = data['status']

    if is_owner_or_admin:
        for field in ('title', 'description', 'priority', 'due_date'):
            if field in data:
                updates[field] = data[field]

        if 'assigned_to' in data:
            assignee = data['assigned_to']
            if assignee:
                _ensure_workspace_member(workspace_id, assignee)
            updates['assigned_to_id'] = assignee or None

    if not updates:
        raise BadRequestException("No updates were provided")

    for field, value in updates.items():
        setattr(task, field, value)
    task.save(update_fields=list(updates) + ['updated_at'])

    logger.info(f"Task {task_id} updated fields {sorted(updates)} by user {user.user_id} at {timezone.now()}")
    return Task.objects.select_related('assigned_to', 'project').get(task_id=task.task_id)


def get_all_tasks(workspace_id, filters):
    queryset = Task.objects.filter(workspace_id=workspace_id)

    if filters.get('project_id'):
        queryset = queryset.filter(project_id=filters['project_id'])
    if filters.get('status'):
        queryset = queryset.filter(status__in=filters['status'])
    if filters.get('priority'):
        queryset = queryset.filter(priority__in=filters['priority'])
    if filters.get('assigned_to'):
        queryset = queryset.filter(assigned_to_id__in=filters['assigned_to'])
    if filters.get('keyword'):
        queryset = queryset.filter(title__icontains=filters['keyword'])
    if filters.get('due_date'):
        queryset = queryset.filter(due_date=filters['due_date'])

    return queryset.select_related('assigned_to', 'project').order_by('-created_at')


def get_task_by_id(workspace_id, project_id, task_id):
    _get_project_in_workspace(workspace_id, project_id)

    task = (
        Task.objects.select_related('assigned_to', 'project')
        .filter(task_id=task_id, workspace_id=workspace_id, project_id=project_id)
        .first()
    )
    if task is None:
        logger.error(f"Task {task_id} not found at {timezone.now()}")
        raise NotFoundException("Task not found.")
    return task


def delete_task(workspace_id, task_id):
    deleted, _ = Task.objects.filter(task_id=task_id, workspace_id=workspace_id).delete()
    if not deleted:
        logger.error(f"Task {task_id} not found in workspace {workspace_id} for deletion at {timezone.now()}")
        raise NotFoundException("Task not found or does not belong to the specified workspace")
    logger.info(f"Task {task_id} deleted from workspace {workspace_id} at {timezone.now()}")


def _clarifications_with_responses():
    return TaskClarification.objects.select_related('asked_by').prefetch_related(
        Prefetch(
            'responses',
            queryset=ClarificationResponse.objects.select_related('responded_by').order_by('created_at', 'id'),
        )
    )


def get_task_clarifications(workspace_id, task_id):
    verify_task_belongs_to_workspace(workspace_id, task_id)
    return list(
        _clarifications_with_responses()
        .filter(workspace_id=workspace_id, task_id=task_id)
        .order_by('-created_at')
    )


def create_task_clarification(workspace_id, task_id, user, question):
    task = verify_task_belongs_to_workspace(workspace_id, task_id)
    clarification = TaskClarification.objects.create(
        workspace_id=workspace_id,
        task=task,
        asked_by=user,
        question=question,
    )
    logger.info(f"Clarification {clarification.clarification_id} asked on task {task_id} by user {user.user_id} at {timezone.now()}")
    return _clarifications_with_responses().get(clarification_id=clarification.clarification_id)


def respond_to_task_clarification(workspace_id, task_id, clarification_id, user, message):
    verify_task_belongs_to_workspace(workspace_id, task_id)

    clarification = TaskClarification.objects.filter(
        clarification_id=clarification_id,
        workspace_id=workspace_id,
        task_id=task_id,
    ).first()
    if clarification is None:
        logger.error(f"Clarification {clarification_id} not found for task {task_id} at {timezone.now()}")
        raise NotFoundException("Clarification not found for this task")

    ClarificationResponse.objects.create(clarification=clarification, message=message, responded_by=user)
    # bump updated_at on the thread
    clarification.save(update_fields=['updated_at'])
    logger.info(f"Clarification {clarification_id} answered by user {user.user_id} at {timezone.now()}")
    return _clarifications_with_responses().get(clarification_id=clarification_id)
