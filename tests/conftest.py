import itertools
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import User
from project.models import Project
from task.models import Task
from workspace.models import Member
from workspace.roles import Roles
from workspace.services import create_workspace


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make_user(name=None, email=None, password='secret123'):
        n = next(counter)
        return User.objects.create_user(
            email=email or f"user{n}@example.com",
            name=name or f"User {n}",
            password=password,
        )

    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user(name='Olivia Owner', email='owner@example.com')


@pytest.fixture
def admin(make_user):
    return make_user(name='Adam Admin', email='admin@example.com')


@pytest.fixture
def member(make_user):
    return make_user(name='Mia Member', email='member@example.com')


@pytest.fixture
def outsider(make_user):
    return make_user(name='Otto Outsider', email='outsider@example.com')


@pytest.fixture
def workspace(owner, admin, member):
    workspace = create_workspace(owner, name='Acme', description='Acme workspace')
    Member.objects.create(user=admin, workspace=workspace, role=Roles.ADMIN)
    Member.objects.create(user=member, workspace=workspace, role=Roles.MEMBER)
    return workspace


@pytest.fixture
def other_workspace(outsider):
    return create_workspace(outsider, name='Elsewhere')


@pytest.fixture
def project(workspace, owner):
    return Project.objects.create(workspace=workspace, name='Website', emoji='🌐', created_by=owner)


@pytest.fixture
def make_task(project, owner):
    counter = itertools.count(1)
    base_time = timezone.now() - timedelta(days=1)

    def _make_task(**fields):
        n = next(counter)
        fields.setdefault('title', f"Task {n}")
        fields.setdefault('workspace', project.workspace)
        fields.setdefault('project', project)
        fields.setdefault('created_by', owner)
        # strictly increasing creation times keep newest-first ordering deterministic
        fields.setdefault('created_at', base_time + timedelta(minutes=n))
        return Task.objects.create(**fields)

    return _make_task


@pytest.fixture
def client_for():
    def _client_for(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _client_for
