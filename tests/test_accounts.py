import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from workspace.models import Member
from workspace.roles import Roles


@pytest.mark.django_db
class TestAccounts:

    def test_register_creates_personal_workspace(self):
        response = APIClient().post(reverse('register'), {
            'email': 'new@example.com',
            'name': 'New Person',
            'password': 'secret123',
        })

        assert response.status_code == 201
        user = User.objects.get(email='new@example.com')
        assert user.check_password('secret123')
        assert user.current_workspace is not None
        assert user.current_workspace.name == 'My Workspace'
        assert Member.objects.get(user=user, workspace=user.current_workspace).role == Roles.OWNER
        assert 'password' not in response.data['user']

    def test_register_rejects_duplicate_email(self, owner):
        response = APIClient().post(reverse('register'), {
            'email': 'owner@example.com',
            'name': 'Copycat',
            'password': 'secret123',
        })

        assert response.status_code == 400
        assert 'email' in response.data['errors']

    def test_login_returns_tokens_and_opens_session(self, owner):
        client = APIClient()
        response = client.post(reverse('login'), {'email': 'owner@example.com', 'password': 'secret123'})

        assert response.status_code == 200
        assert response.data['access_token']
        assert response.data['refresh_token']

        current = client.get(reverse('current-user'))
        assert current.status_code == 200
        assert current.data['user']['email'] == 'owner@example.com'

    def test_login_with_wrong_password(self, owner):
        response = APIClient().post(reverse('login'), {'email': 'owner@example.com', 'password': 'wrong'})

        assert response.status_code == 400
        assert response.data['error_code'] == 'VALIDATION_ERROR'

    def test_bearer_token_authenticates(self, owner):
        login = APIClient().post(reverse('login'), {'email': 'owner@example.com', 'password': 'secret123'})

        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access_token']}")
        response = client.get(reverse('current-user'))

        assert response.status_code == 200
        assert response.data['user']['user_id'] == str(owner.user_id)

    def test_current_user_requires_authentication(self):
        response = APIClient().get(reverse('current-user'))

        assert response.status_code in (401, 403)

    def test_logout_blacklists_refresh_token(self, owner, client_for):
        login = APIClient().post(reverse('login'), {'email': 'owner@example.com', 'password': 'secret123'})
        refresh_token = login.data['refresh_token']

        response = client_for(owner).post(reverse('logout'), {'refresh_token': refresh_token})
        assert response.status_code == 200

        again = client_for(owner).post(reverse('logout'), {'refresh_token': refresh_token})
        assert again.status_code == 400
