# project/views.py
import logging

from rest_framework import generics, status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from teamassist.pagination import WorkspacePageNumberPagination
from workspace.permissions import HasWorkspacePermission
from workspace.roles import Permissions
from . import services
from .serializers import ProjectSerializer, ProjectWriteSerializer

logger = logging.getLogger(__name__)


class ProjectBaseView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated, HasWorkspacePermission]
    serializer_class = ProjectWriteSerializer
    required_permissions = {}


class CreateProjectView(ProjectBaseView):
    required_permissions = {'POST': [Permissions.CREATE_PROJECT]}

    def post(self, request, workspace_id):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        project = services.create_project(workspace_id, request.user, **serializer.validated_data)
        return Response(
            {"message": "Project created successfully", "project": ProjectSerializer(project).data},
            status=status.HTTP_201_CREATED,
        )


class ListProjectsView(ProjectBaseView):
    pagination_class = WorkspacePageNumberPagination
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, workspace_id):
        projects = self.paginate_queryset(services.get_projects_in_workspace(workspace_id))
        return self.get_paginated_response({
            "message": "Project fetched successfully",
            "projects": ProjectSerializer(projects, many=True).data,
        })


class ProjectDetailView(ProjectBaseView):
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, project_id, workspace_id):
        project = services.get_project_in_workspace(workspace_id, project_id)
        return Response(
            {"message": "Project fetched successfully", "project": ProjectSerializer(project).data},
            status=status.HTTP_200_OK,
        )


class ProjectAnalyticsView(ProjectBaseView):
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, project_id, workspace_id):
        analytics = services.get_project_analytics(workspace_id, project_id)
        return Response(
            {"message": "Project analytics retrieved successfully", "analytics": analytics},
            status=status.HTTP_200_OK,
        )


class UpdateProjectView(ProjectBaseView):
    required_permissions = {'PUT': [Permissions.EDIT_PROJECT]}

    def put(self, request, project_id, workspace_id):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        project = services.update_project(workspace_id, project_id, **serializer.validated_data)
        return Response(
            {"message": "Project updated successfully", "project": ProjectSerializer(project).data},
            status=status.HTTP_200_OK,
        )


class DeleteProjectView(ProjectBaseView):
    required_permissions = {'DELETE': [Permissions.DELETE_PROJECT]}

    def delete(self, request, project_id, workspace_id):
        services.delete_project(workspace_id, project_id)
        return Response({"message": "Project deleted successfully"}, status=status.HTTP_200_OK)
