# workspace/services.py
import logging

from django.db import transaction
from django.utils import timezone

from accounts.models import User
from task.models import Task
from task.services import get_task_analytics
from teamassist.exceptions import BadRequestException, NotFoundException, UnauthorizedException
from .models import Member, Workspace
from .roles import Roles

logger = logging.getLogger(__name__)


def get_workspace_or_404(workspace_id):
    try:
        return Workspace.objects.get(workspace_id=workspace_id)
    except Workspace.DoesNotExist:
        logger.error(f"Workspace {workspace_id} not found at {timezone.now()}")
        raise NotFoundException("Workspace not found")


def create_workspace(user, name, description=None):
    with transaction.atomic():
        workspace = Workspace.objects.create(name=name, description=description, owner=user)
        user.current_workspace = workspace
        user.save(update_fields=['current_workspace'])
    return workspace


def get_user_workspaces(user):
    return Workspace.objects.filter(members__user=user).select_related('owner').distinct()


def get_workspace_members(workspace_id):
    return Member.objects.filter(workspace_id=workspace_id).select_related('user')


def get_workspace_analytics(workspace_id):
    return get_task_analytics(Task.objects.filter(workspace_id=workspace_id))


def change_member_role(workspace_id, member_user_id, role):
    workspace = get_workspace_or_404(workspace_id)

    if role == Roles.OWNER:
        raise BadRequestException("The owner role cannot be assigned")

    try:
        member = Member.objects.select_related('user').get(workspace=workspace, user_id=member_user_id)
    except Member.DoesNotExist:
        raise NotFoundException("Member not found in the workspace")

    if member.user_id == workspace.owner_id:
        raise BadRequestException("The workspace owner's role cannot be changed")

    member.role = role
    member.save(update_fields=['role'])
    logger.info(f"Member {member.user_id} role changed to {role} in workspace {workspace_id} at {timezone.now()}")
    return member


def remove_member(workspace_id, member_user_id):
    workspace = get_workspace_or_404(workspace_id)

    if str(member_user_id) == str(workspace.owner_id):
        raise BadRequestException("The workspace owner cannot be removed")

    try:
        member = Member.objects.get(workspace=workspace, user_id=member_user_id)
    except Member.DoesNotExist:
        raise NotFoundException("Member not found in the workspace")

    with transaction.atomic():
        Task.objects.filter(workspace=workspace, assigned_to_id=member_user_id).update(assigned_to=None)
        member.delete()
        User.objects.filter(user_id=member_user_id, current_workspace=workspace).update(current_workspace=None)
    logger.info(f"Member {member_user_id} removed from workspace {workspace_id} at {timezone.now()}")


def update_workspace(workspace_id, **fields):
    workspace = get_workspace_or_404(workspace_id)
    for field, value in fields.items():
        setattr(workspace, field, value)
    workspace.save()
    return workspace


def delete_workspace(workspace_id, user):
    workspace = get_workspace_or_404(workspace_id)

    if workspace.owner_id != user.user_id:
        raise UnauthorizedException("You are not authorized to delete this workspace")

    with transaction.atomic():
        affected_user_ids = list(
            User.objects.filter(current_workspace=workspace).values_list('user_id', flat=True)
        )
        workspace.delete()

        for affected in User.objects.filter(user_id__in=affected_user_ids):
            fallback = Member.objects.filter(user=affected).order_by('joined_at').first()
            affected.current_workspace_id = fallback.workspace_id if fallback else None
            affected.save(update_fields=['current_workspace'])

    logger.info(f"Workspace {workspace_id} deleted by user {user.user_id} at {timezone.now()}")
    user.refresh_from_db(fields=['current_workspace'])
    return user.current_workspace


def join_workspace_by_invite(user, invite_code):
    try:
        workspace = Workspace.objects.get(invite_code=invite_code)
    except Workspace.DoesNotExist:
        logger.error(f"Invalid invite code {invite_code} used by {user.user_id} at {timezone.now()}")
        raise NotFoundException("Invalid invite code or workspace not found")

    if Member.objects.filter(user=user, workspace=workspace).exists():
        raise BadRequestException("You are already a member of this workspace")

    Member.objects.create(user=user, workspace=workspace, role=Roles.MEMBER)
    return workspace, Roles.MEMBER
