from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from .models import Project


class ProjectSerializer(serializers.ModelSerializer):
    workspace = serializers.UUIDField(source='workspace_id', read_only=True)
    created_by = UserSummarySerializer(read_only=True)

    class Meta:
        model = Project
        fields = ['project_id', 'workspace', 'name', 'emoji', 'description', 'created_by', 'created_at', 'updated_at']
        read_only_fields = fields


class ProjectSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = ['project_id', 'name', 'emoji']
        read_only_fields = fields


class ProjectWriteSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=255, trim_whitespace=True)
    emoji = serializers.CharField(required=False, max_length=16, trim_whitespace=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)

