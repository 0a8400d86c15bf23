# workspace/serializers.py
from django.urls import reverse
from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from .models import Member, Workspace
from .roles import Roles


class WorkspaceSerializer(serializers.ModelSerializer):
    owner = serializers.UUIDField(source='owner_id', read_only=True)
    role = serializers.SerializerMethodField()
    links = serializers.SerializerMethodField()

    class Meta:
        model = Workspace
        fields = ['workspace_id', 'name', 'description', 'owner', 'invite_code', 'role', 'created_at', 'updated_at', 'links']
        read_only_fields = fields

    def get_role(self, obj):
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            membership = Member.objects.filter(workspace=obj, user=request.user).only('role').first()
            return membership.role if membership else None
        return None

    def get_links(self, obj):
        request = self.context.get('request')
        if request is None:
            return {}
        kwargs = {'workspace_id': obj.workspace_id}
        return {
            'self': request.build_absolute_uri(reverse('workspace-detail', kwargs=kwargs)),
            'members': request.build_absolute_uri(reverse('workspace-members', kwargs=kwargs)),
            'analytics': request.build_absolute_uri(reverse('workspace-analytics', kwargs=kwargs)),
            'projects': request.build_absolute_uri(reverse('list-projects', kwargs=kwargs)),
            'tasks': request.build_absolute_uri(reverse('list-tasks', kwargs=kwargs)),
        }


class WorkspaceWriteSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=255, trim_whitespace=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)


class MemberSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Member
        fields = ['member_id', 'user', 'role', 'joined_at']
        read_only_fields = fields


class WorkspaceDetailSerializer(WorkspaceSerializer):
    members = MemberSerializer(many=True, read_only=True)

    class Meta(WorkspaceSerializer.Meta):
        fields = WorkspaceSerializer.Meta.fields + ['members']
        read_only_fields = fields


class ChangeRoleSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    role = serializers.ChoiceField(choices=Roles.choices)
