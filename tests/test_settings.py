import importlib

import pytest
from django.conf import settings
from django.urls import reverse

from teamassist import settings as project_settings


def list_url(workspace):
    return reverse('list-tasks', kwargs={'workspace_id': workspace.workspace_id})


@pytest.mark.django_db
class TestCrossOriginRequests:

    def test_frontend_origin_is_allowed_with_credentials(self, client_for, member, workspace):
        response = client_for(member).get(list_url(workspace), HTTP_ORIGIN=settings.FRONTEND_ORIGIN)

        assert response.status_code == 200
        assert response['Access-Control-Allow-Origin'] == settings.FRONTEND_ORIGIN
        assert response['Access-Control-Allow-Credentials'] == 'true'

    def test_preflight_from_frontend_origin(self, client_for, member, workspace):
        response = client_for(member).options(
            list_url(workspace),
            HTTP_ORIGIN=settings.FRONTEND_ORIGIN,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='PUT',
        )

        assert response.status_code == 200
        assert response['Access-Control-Allow-Origin'] == settings.FRONTEND_ORIGIN
        assert 'PUT' in response['Access-Control-Allow-Methods']

    def test_unknown_origin_gets_no_cors_headers(self, client_for, member, workspace):
        response = client_for(member).get(list_url(workspace), HTTP_ORIGIN='http://evil.example.com')

        assert response.status_code == 200
        assert 'Access-Control-Allow-Origin' not in response


class TestEnvironmentSettings:

    @pytest.fixture
    def reload_settings(self, monkeypatch):
        monkeypatch.setattr('dotenv.load_dotenv', lambda *args, **kwargs: False)
        yield lambda: importlib.reload(project_settings)
        monkeypatch.undo()
        importlib.reload(project_settings)

    def test_debug_is_off_without_environment(self, monkeypatch, reload_settings):
        monkeypatch.delenv('DJANGO_DEBUG', raising=False)

        module = reload_settings()

        assert module.DEBUG is False
        assert module.SESSION_COOKIE_SECURE is True

    def test_debug_can_be_enabled(self, monkeypatch, reload_settings):
        monkeypatch.setenv('DJANGO_DEBUG', 'true')

        assert reload_settings().DEBUG is True

    def test_cors_follows_frontend_origin(self, monkeypatch, reload_settings):
        monkeypatch.setenv('FRONTEND_ORIGIN', 'https://app.teamassist.test')

        module = reload_settings()

        assert module.CORS_ALLOWED_ORIGINS == ['https://app.teamassist.test']
        assert module.CORS_ALLOW_CREDENTIALS is True
