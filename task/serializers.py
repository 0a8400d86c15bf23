# task/serializers.py
import uuid

from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from project.serializers import ProjectSummarySerializer
from teamassist.pagination import PaginationQuerySerializer
from .models import ClarificationResponse, Task, TaskClarification, TaskPriority, TaskStatus


class TaskSerializer(serializers.ModelSerializer):
    workspace = serializers.UUIDField(source='workspace_id', read_only=True)
    project = ProjectSummarySerializer(read_only=True)
    assigned_to = UserSummarySerializer(read_only=True)
    created_by = serializers.UUIDField(source='created_by_id', read_only=True)

    class Meta:
        model = Task
        fields = [
            'task_id', 'task_code', 'workspace', 'project', 'title', 'description', 'status', 'priority',
            'assigned_to', 'due_date', 'created_by', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class TaskWriteSerializer(serializers.Serializer):
    """
    Validates task bodies for create and update.

    Used with ``partial=True`` for updates so that validated_data holds only the
    fields the caller sent. Unknown keys are dropped.
    """
    title = serializers.CharField(min_length=1, max_length=255, trim_whitespace=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)
    priority = serializers.ChoiceField(choices=TaskPriority.choices, required=False)
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
    assigned_to = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)
    due_date = serializers.DateField(required=False, allow_null=True)

    def validate_assigned_to(self, value):
        # blank or null means unassigned
        if not value:
            return None
        try:
            return uuid.UUID(value)
        except ValueError:
            raise serializers.ValidationError("Assigned user must be a valid user id.")


class CommaSeparatedListField(serializers.ListField):
    """Accepts ``a,b,c`` as well as repeated query parameters."""

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = [data]
        if isinstance(data, (list, tuple)):
            data = [part.strip() for value in data for part in str(value).split(',') if part.strip()]
        return super().to_internal_value(data)


class TaskFilterSerializer(PaginationQuerySerializer):
    projectId = serializers.UUIDField(required=False)
    status = CommaSeparatedListField(child=serializers.ChoiceField(choices=TaskStatus.choices), required=False)
    priority = CommaSeparatedListField(child=serializers.ChoiceField(choices=TaskPriority.choices), required=False)
    assignedTo = CommaSeparatedListField(child=serializers.UUIDField(), required=False)
    keyword = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    dueDate = serializers.DateField(required=False)

    def to_filters(self):
        data = self.validated_data
        return {
            'project_id': data.get('projectId'),
            'status': data.get('status'),
            'priority': data.get('priority'),
            'assigned_to': data.get('assignedTo'),
            'keyword': data.get('keyword'),
            'due_date': data.get('dueDate'),
        }


class ClarificationResponseSerializer(serializers.ModelSerializer):
    responded_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = ClarificationResponse
        fields = ['id', 'message', 'responded_by', 'created_at']
        read_only_fields = fields


class TaskClarificationSerializer(serializers.ModelSerializer):
    task = serializers.UUIDField(source='task_id', read_only=True)
    workspace = serializers.UUIDField(source='workspace_id', read_only=True)
    asked_by = UserSummarySerializer(read_only=True)
    responses = ClarificationResponseSerializer(many=True, read_only=True)

    class Meta:
        model = TaskClarification
        fields = ['clarification_id', 'task', 'workspace', 'question', 'asked_by', 'responses', 'created_at', 'updated_at']
        read_only_fields = fields


class CreateClarificationSerializer(serializers.Serializer):
    question = serializers.CharField(
        min_length=5,
        max_length=1000,
        trim_whitespace=True,
        error_messages={
            'min_length': "Question should be at least 5 characters long",
            'max_length': "Question should not exceed 1000 characters",
        },
    )


class RespondClarificationSerializer(serializers.Serializer):
    message = serializers.CharField(
        min_length=1,
        max_length=1000,
        trim_whitespace=True,
        error_messages={
            'blank': "Response cannot be empty",
            'max_length': "Response should not exceed 1000 characters",
        },
    )
