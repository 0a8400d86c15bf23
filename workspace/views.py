# workspace/views.py
import logging

from django.utils import timezone
from rest_framework import generics, status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from accounts.serializers import UserSerializer
from . import services
from .permissions import HasWorkspacePermission
from .roles import Permissions
from .serializers import (
    ChangeRoleSerializer,
    MemberSerializer,
    WorkspaceDetailSerializer,
    WorkspaceSerializer,
    WorkspaceWriteSerializer,
)

logger = logging.getLogger(__name__)


class WorkspaceBaseView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated, HasWorkspacePermission]
    required_permissions = {}


class CreateWorkspaceView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated]
    serializer_class = WorkspaceWriteSerializer

    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        workspace = services.create_workspace(request.user, **serializer.validated_data)
        logger.info(f"Workspace {workspace.workspace_id} created by user {request.user.user_id} at {timezone.now()}")
        return Response(
            {
                "message": "Workspace created successfully",
                "workspace": WorkspaceSerializer(workspace, context={'request': request}).data,
            },
            status=status.HTTP_201_CREATED,
        )


class ListWorkspacesView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated]
    serializer_class = WorkspaceSerializer

    def get(self, request):
        workspaces = services.get_user_workspaces(request.user)
        serializer = self.get_serializer(workspaces, many=True)
        return Response(
            {"message": "User workspaces fetched successfully", "workspaces": serializer.data},
            status=status.HTTP_200_OK,
        )


class WorkspaceDetailView(WorkspaceBaseView):
    serializer_class = WorkspaceDetailSerializer
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, workspace_id):
        workspace = services.get_workspace_or_404(workspace_id)
        serializer = self.get_serializer(workspace)
        return Response(
            {"message": "Workspace fetched successfully", "workspace": serializer.data},
            status=status.HTTP_200_OK,
        )


class WorkspaceMembersView(WorkspaceBaseView):
    serializer_class = MemberSerializer
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, workspace_id):
        members = services.get_workspace_members(workspace_id)
        serializer = self.get_serializer(members, many=True)
        return Response(
            {"message": "Workspace members retrieved successfully", "members": serializer.data},
            status=status.HTTP_200_OK,
        )


class WorkspaceAnalyticsView(WorkspaceBaseView):
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, workspace_id):
        analytics = services.get_workspace_analytics(workspace_id)
        return Response(
            {"message": "Workspace analytics retrieved successfully", "analytics": analytics},
            status=status.HTTP_200_OK,
        )


class ChangeMemberRoleView(WorkspaceBaseView):
    serializer_class = ChangeRoleSerializer
    required_permissions = {'PUT': [Permissions.CHANGE_MEMBER_ROLE]}

    def put(self, request, workspace_id):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        member = services.change_member_role(
            workspace_id,
            serializer.validated_data['user_id'],
            serializer.validated_data['role'],
        )
        return Response(
            {"message": "Member role changed successfully", "member": MemberSerializer(member).data},
            status=status.HTTP_200_OK,
        )


class RemoveWorkspaceMemberView(WorkspaceBaseView):
    required_permissions = {'DELETE': [Permissions.REMOVE_MEMBER]}

    def delete(self, request, workspace_id, user_id):
        services.remove_member(workspace_id, user_id)
        return Response({"message": "Member removed successfully"}, status=status.HTTP_200_OK)


class UpdateWorkspaceView(WorkspaceBaseView):
    serializer_class = WorkspaceWriteSerializer
    required_permissions = {'PUT': [Permissions.EDIT_WORKSPACE]}

    def put(self, request, workspace_id):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        workspace = services.update_workspace(workspace_id, **serializer.validated_data)
        logger.info(f"Workspace {workspace_id} updated by user {request.user.user_id} at {timezone.now()}")
        return Response(
            {
                "message": "Workspace updated successfully",
                "workspace": WorkspaceSerializer(workspace, context={'request': request}).data,
            },
            status=status.HTTP_200_OK,
        )


class DeleteWorkspaceView(WorkspaceBaseView):
    required_permissions = {'DELETE': [Permissions.DELETE_WORKSPACE]}

    def delete(self, request, workspace_id):
        current_workspace = services.delete_workspace(workspace_id, request.user)
        return Response(
            {
                "message": "Workspace deleted successfully",
                "current_workspace": current_workspace.workspace_id if current_workspace else None,
            },
            status=status.HTTP_200_OK,
        )


class JoinWorkspaceView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request, invite_code):
        workspace, role = services.join_workspace_by_invite(request.user, invite_code)
        return Response(
            {
                "message": "Successfully joined the workspace",
                "workspace_id": workspace.workspace_id,
                "role": role,
                "user": UserSerializer(request.user).data,
            },
            status=status.HTTP_200_OK,
        )
