# task/views.py
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
from .serializers import (
    CreateClarificationSerializer,
    RespondClarificationSerializer,
    TaskClarificationSerializer,
    TaskFilterSerializer,
    TaskSerializer,
    TaskWriteSerializer,
)

logger = logging.getLogger(__name__)


class TaskBaseView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated, HasWorkspacePermission]
    serializer_class = TaskWriteSerializer
    required_permissions = {}


class CreateTaskView(TaskBaseView):
    required_permissions = {'POST': [Permissions.CREATE_TASK]}

    def post(self, request, project_id, workspace_id):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task = services.create_task(workspace_id, project_id, request.user, serializer.validated_data)
        return Response(
            {"message": "Task created successfully", "task": TaskSerializer(task).data},
            status=status.HTTP_201_CREATED,
        )


class UpdateTaskView(TaskBaseView):
    required_permissions = {'PUT': [Permissions.EDIT_TASK]}

    def put(self, request, task_id, project_id, workspace_id):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        task = services.update_task(
            workspace_id,
            project_id,
            task_id,
            request.user,
            request.workspace_role,
            serializer.validated_data,
        )
        return Response(
            {"message": "Task updated successfully", "task": TaskSerializer(task).data},
            status=status.HTTP_200_OK,
        )


class ListTasksView(TaskBaseView):
    pagination_class = WorkspacePageNumberPagination
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, workspace_id):
        query = TaskFilterSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        tasks = self.paginate_queryset(services.get_all_tasks(workspace_id, query.to_filters()))
        return self.get_paginated_response({
            "message": "All tasks fetched successfully",
            "tasks": TaskSerializer(tasks, many=True).data,
        })


class TaskDetailView(TaskBaseView):
    required_permissions = {'GET': [Permissions.VIEW_ONLY]}

    def get(self, request, task_id, project_id, workspace_id):
        task = services.get_task_by_id(workspace_id, project_id, task_id)
        return Response(
            {"message": "Task fetched successfully", "task": TaskSerializer(task).data},
            status=status.HTTP_200_OK,
        )


class DeleteTaskView(TaskBaseView):
    required_permissions = {'DELETE': [Permissions.DELETE_TASK]}

    def delete(self, request, task_id, workspace_id):
        services.delete_task(workspace_id, task_id)
        return Response({"message": "Task deleted successfully"}, status=status.HTTP_200_OK)


class TaskClarificationsView(TaskBaseView):
    """
    GET lists a task's clarification threads, newest first.
    POST asks a new question on the task.
    """
    serializer_class = CreateClarificationSerializer
    required_permissions = {
        'GET': [Permissions.VIEW_ONLY],
        'POST': [Permissions.VIEW_ONLY],
    }

    def get(self, request, task_id, workspace_id):
        clarifications = services.get_task_clarifications(workspace_id, task_id)
        return Response(
            {
                "message": "Clarifications fetched successfully",
                "clarifications": TaskClarificationSerializer(clarifications, many=True).data,
            },
            status=status.HTTP_200_OK,
        )

    def post(self, request, task_id, workspace_id):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        clarification = services.create_task_clarification(
            workspace_id, task_id, request.user, serializer.validated_data['question']
        )
        return Response(
            {
                "message": "Clarification submitted successfully",
                "clarification": TaskClarificationSerializer(clarification).data,
            },
            status=status.HTTP_201_CREATED,
        )


class RespondToClarificationView(TaskBaseView):
    serializer_class = RespondClarificationSerializer
    required_permissions = {'POST': [Permissions.MANAGE_WORKSPACE_SETTINGS]}

    def post(self, request, task_id, workspace_id, clarification_id):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        clarification = services.respond_to_task_clarification(
            workspace_id, task_id, clarification_id, request.user, serializer.validated_data['message']
        )
        return Response(
            {
                "message": "Clarification updated successfully",
                "clarification": TaskClarificationSerializer(clarification).data,
            },
            status=status.HTTP_200_OK,
        )
