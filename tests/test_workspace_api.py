import datetime

import pytest
from django.urls import reverse
from django.utils import timezone

from accounts.models import User
from project.models import Project
from task.models import Task, TaskStatus
from workspace.models import Member, Workspace
from workspace.roles import Roles


@pytest.mark.django_db
class TestWorkspaceLifecycle:

    def test_create_makes_caller_owner(self, client_for, member):
        response = client_for(member).post(reverse('create-workspace'), {'name': 'Side project'})

        assert response.status_code == 201
        workspace = Workspace.objects.get(workspace_id=response.data['workspace']['workspace_id'])
        assert workspace.owner == member
        assert Member.objects.get(workspace=workspace, user=member).role == Roles.OWNER
        assert response.data['workspace']['role'] == Roles.OWNER
        assert len(workspace.invite_code) == 8
        assert response.data['workspace']['links']['tasks'].endswith(f"/api/task/workspace/{workspace.workspace_id}/all")
        member.refresh_from_db()
        assert member.current_workspace == workspace

    def test_create_requires_name(self, client_for, member):
        response = client_for(member).post(reverse('create-workspace'), {'name': '   '})

        assert response.status_code == 400

    def test_list_only_own_workspaces(self, client_for, member, workspace, other_workspace):
        response = client_for(member).get(reverse('list-workspaces'))

        assert response.status_code == 200
        assert [item['workspace_id'] for item in response.data['workspaces']] == [str(workspace.workspace_id)]

    def test_detail_includes_members(self, client_for, member, workspace):
        response = client_for(member).get(reverse('workspace-detail', kwargs={'workspace_id': workspace.workspace_id}))

        assert response.status_code == 200
        roles = {item['user']['email']: item['role'] for item in response.data['workspace']['members']}
        assert roles == {
            'owner@example.com': Roles.OWNER,
            'admin@example.com': Roles.ADMIN,
            'member@example.com': Roles.MEMBER,
        }

    def test_detail_refused_to_non_member(self, client_for, outsider, workspace):
        response = client_for(outsider).get(reverse('workspace-detail', kwargs={'workspace_id': workspace.workspace_id}))

        assert response.status_code == 403

    def test_members_listing(self, client_for, member, workspace):
        response = client_for(member).get(reverse('workspace-members', kwargs={'workspace_id': workspace.workspace_id}))

        assert response.status_code == 200
        assert len(response.data['members']) == 3

    def test_owner_updates_workspace(self, client_for, owner, workspace):
        url = reverse('update-workspace', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(owner).put(url, {'name': 'Acme Corp'})

        assert response.status_code == 200
        workspace.refresh_from_db()
        assert workspace.name == 'Acme Corp'
        assert workspace.description == 'Acme workspace'

    def test_admin_cannot_update_workspace(self, client_for, admin, workspace):
        url = reverse('update-workspace', kwargs={'workspace_id': workspace.workspace_id})

        assert client_for(admin).put(url, {'name': 'Hijacked'}).status_code == 403

    def test_owner_deletes_workspace_and_everything_in_it(self, client_for, owner, member, workspace, make_task):
        other = Workspace.objects.create(name='Backup', owner=owner)
        make_task()
        member.current_workspace = workspace
        member.save()

        response = client_for(owner).delete(reverse('delete-workspace', kwargs={'workspace_id': workspace.workspace_id}))

        assert response.status_code == 200
        assert not Workspace.objects.filter(workspace_id=workspace.workspace_id).exists()
        assert not Project.objects.exists()
        assert not Task.objects.exists()
        assert not Member.objects.filter(user=member).exists()
        owner.refresh_from_db()
        member.refresh_from_db()
        assert owner.current_workspace == other
        assert member.current_workspace is None
        assert response.data['current_workspace'] == other.workspace_id

    def test_admin_cannot_delete_workspace(self, client_for, admin, workspace):
        response = client_for(admin).delete(reverse('delete-workspace', kwargs={'workspace_id': workspace.workspace_id}))

        assert response.status_code == 403
        assert Workspace.objects.filter(workspace_id=workspace.workspace_id).exists()


@pytest.mark.django_db
class TestMembership:

    def test_owner_promotes_member(self, client_for, owner, member, workspace):
        url = reverse('change-member-role', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(owner).put(url, {'user_id': str(member.user_id), 'role': Roles.ADMIN})

        assert response.status_code == 200
        assert Member.objects.get(workspace=workspace, user=member).role == Roles.ADMIN

    def test_admin_cannot_change_roles(self, client_for, admin, member, workspace):
        url = reverse('change-member-role', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(admin).put(url, {'user_id': str(member.user_id), 'role': Roles.ADMIN})

        assert response.status_code == 403
        assert Member.objects.get(workspace=workspace, user=member).role == Roles.MEMBER

    def test_owner_role_cannot_be_granted(self, client_for, owner, member, workspace):
        url = reverse('change-member-role', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(owner).put(url, {'user_id': str(member.user_id), 'role': Roles.OWNER})

        assert response.status_code == 400

    def test_owner_role_cannot_be_changed(self, client_for, owner, workspace):
        url = reverse('change-member-role', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(owner).put(url, {'user_id': str(owner.user_id), 'role': Roles.MEMBER})

        assert response.status_code == 400
        assert Member.objects.get(workspace=workspace, user=owner).role == Roles.OWNER

    def test_changing_role_of_non_member_is_not_found(self, client_for, owner, outsider, workspace):
        url = reverse('change-member-role', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(owner).put(url, {'user_id': str(outsider.user_id), 'role': Roles.ADMIN})

        assert response.status_code == 404

    def test_remove_member_unassigns_their_tasks(self, client_for, owner, member, workspace, make_task):
        task = make_task(assigned_to=member)
        url = reverse('remove-workspace-member', kwargs={
            'workspace_id': workspace.workspace_id,
            'user_id': member.user_id,
        })
        response = client_for(owner).delete(url)

        assert response.status_code == 200
        assert not Member.objects.filter(workspace=workspace, user=member).exists()
        task.refresh_from_db()
        assert task.assigned_to is None

    def test_owner_cannot_be_removed(self, client_for, owner, workspace):
        url = reverse('remove-workspace-member', kwargs={
            'workspace_id': workspace.workspace_id,
            'user_id': owner.user_id,
        })

        assert client_for(owner).delete(url).status_code == 400

    def test_join_by_invite_code(self, client_for, outsider, workspace):
        url = reverse('join-workspace', kwargs={'invite_code': workspace.invite_code})
        response = client_for(outsider).post(url)

        assert response.status_code == 200
        assert response.data['role'] == Roles.MEMBER
        assert Member.objects.get(workspace=workspace, user=outsider).role == Roles.MEMBER

    def test_join_twice_is_bad_request(self, client_for, member, workspace):
        url = reverse('join-workspace', kwargs={'invite_code': workspace.invite_code})

        assert client_for(member).post(url).status_code == 400

    def test_join_with_unknown_code_is_not_found(self, client_for, outsider, workspace):
        url = reverse('join-workspace', kwargs={'invite_code': 'nope1234'})

        assert client_for(outsider).post(url).status_code == 404


@pytest.mark.django_db
def test_workspace_analytics(client_for, member, workspace, make_task):
    yesterday = timezone.localdate() - datetime.timedelta(days=1)
    make_task(status=TaskStatus.DONE, due_date=yesterday)
    make_task(status=TaskStatus.TODO, due_date=yesterday)
    make_task(status=TaskStatus.IN_PROGRESS)

    response = client_for(member).get(reverse('workspace-analytics', kwargs={'workspace_id': workspace.workspace_id}))

    assert response.status_code == 200
    assert response.data['analytics'] == {'total_tasks': 3, 'overdue_tasks': 1, 'completed_tasks': 1}


@pytest.mark.django_db
def test_owner_membership_created_with_workspace(owner):
    workspace = Workspace.objects.create(name='Signals', owner=owner)

    assert Member.objects.filter(workspace=workspace, user=owner, role=Roles.OWNER).count() == 1
    assert User.objects.get(user_id=owner.user_id).memberships.count() == 1
