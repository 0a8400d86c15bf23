import logging

from rest_framework import permissions

from teamassist.exceptions import NotFoundException, UnauthorizedException
from .models import Member, Workspace
from .roles import ROLE_PERMISSIONS, Permissions

logger = logging.getLogger(__name__)


def get_member_role_in_workspace(user, workspace_id):
    if not Workspace.objects.filter(workspace_id=workspace_id).exists():
        logger.error(f"Workspace {workspace_id} not found")
        raise NotFoundException("Workspace not found")

    membership = Member.objects.filter(user=user, workspace_id=workspace_id).only('role').first()
    if membership is None:
        logger.warning(f"No membership found for user {user.user_id} in workspace {workspace_id}")
        raise UnauthorizedException("You are not a member of this workspace")
    return membership.role


def role_guard(role, required_permissions):
    allowed = ROLE_PERMISSIONS.get(role, frozenset())
    missing = [permission for permission in required_permissions if permission not in allowed]
    if missing:
        logger.warning(f"Role {role} lacks permissions {missing}")
        raise UnauthorizedException("You do not have the necessary permissions to perform this action")


class HasWorkspacePermission(permissions.BasePermission):
    """
    Resolves the caller's role in the workspace named by the URL and checks it
    against ``view.required_permissions[request.method]``.

    The resolved role is stored on ``request.workspace_role`` for the view.
    Methods missing from the mapping require VIEW_ONLY.
    """

    def has_permission(self, request, view):
        workspace_id = view.kwargs.get('workspace_id')
        logger.debug(f"Checking workspace permission for workspace_id: {workspace_id}")
        if not workspace_id:
            logger.warning("No workspace_id provided in request.")
            return False

        user = request.user
        if not user or not user.is_authenticated:
            return False

        method = 'GET' if request.method == 'HEAD' else request.method
        required = getattr(view, 'required_permissions', {}).get(method, [Permissions.VIEW_ONLY])

        role = get_member_role_in_workspace(user, workspace_id)
        role_guard(role, required)
        request.workspace_role = role
        logger.debug(f"User {user.user_id} allowed {method} in workspace {workspace_id} as {role}")
        return True
