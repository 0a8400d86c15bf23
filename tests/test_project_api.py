import uuid

import pytest
from django.urls import reverse

from project.models import Project
from task.models import Task, TaskStatus


def project_url(name, project):
    return reverse(name, kwargs={'project_id': project.project_id, 'workspace_id': project.workspace_id})


@pytest.mark.django_db
class TestProjects:

    def test_admin_creates_project(self, client_for, admin, workspace):
        url = reverse('create-project', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(admin).post(url, {'name': 'Marketing', 'emoji': '📣'})

        assert response.status_code == 201
        project = Project.objects.get(project_id=response.data['project']['project_id'])
        assert project.workspace == workspace
        assert project.created_by == admin
        assert project.emoji == '📣'

    def test_member_cannot_create_project(self, client_for, member, workspace):
        url = reverse('create-project', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(member).post(url, {'name': 'Rogue'})

        assert response.status_code == 403
        assert not Project.objects.exists()

    def test_list_is_paginated_newest_first(self, client_for, member, owner, workspace):
        for name in ('One', 'Two', 'Three'):
            Project.objects.create(workspace=workspace, name=name, created_by=owner)

        url = reverse('list-projects', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(member).get(url, {'pageSize': 2})

        assert response.status_code == 200
        assert len(response.data['projects']) == 2
        assert response.data['pagination']['total_count'] == 3
        assert response.data['pagination']['total_pages'] == 2

    @pytest.mark.parametrize('params', [{'pageNumber': 0}, {'pageSize': 'ten'}])
    def test_malformed_page_query_is_bad_request(self, client_for, member, workspace, params):
        url = reverse('list-projects', kwargs={'workspace_id': workspace.workspace_id})
        response = client_for(member).get(url, params)

        assert response.status_code == 400
        assert response.data['error_code'] == 'VALIDATION_ERROR'

    def test_get_project(self, client_for, member, project):
        response = client_for(member).get(project_url('project-detail', project))

        assert response.status_code == 200
        assert response.data['project']['name'] == 'Website'

    def test_project_outside_workspace_is_not_found(self, client_for, outsider, other_workspace, project):
        url = reverse('project-detail', kwargs={
            'project_id': project.project_id,
            'workspace_id': other_workspace.workspace_id,
        })

        assert client_for(outsider).get(url).status_code == 404

    def test_unknown_project_is_not_found(self, client_for, owner, workspace):
        url = reverse('project-detail', kwargs={'project_id': uuid.uuid4(), 'workspace_id': workspace.workspace_id})

        assert client_for(owner).get(url).status_code == 404

    def test_update_project(self, client_for, admin, project):
        response = client_for(admin).put(project_url('update-project', project), {'name': 'Web v2'})

        assert response.status_code == 200
        project.refresh_from_db()
        assert project.name == 'Web v2'
        assert project.emoji == '🌐'

    def test_delete_project_removes_its_tasks(self, client_for, admin, project, make_task):
        make_task()
        make_task()

        response = client_for(admin).delete(project_url('delete-project', project))

        assert response.status_code == 200
        assert not Project.objects.exists()
        assert not Task.objects.exists()

    def test_project_analytics(self, client_for, member, project, make_task):
        make_task(status=TaskStatus.DONE)
        make_task(status=TaskStatus.TODO)

        response = client_for(member).get(project_url('project-analytics', project))

        assert response.status_code == 200
        assert response.data['analytics'] == {'total_tasks': 2, 'overdue_tasks': 0, 'completed_tasks': 1}
