# teamassist/urls.py
from django.urls import include, path

from accounts.views import CurrentUserAPIView
from workspace.views import JoinWorkspaceView

urlpatterns = [
    path('api/auth/', include('accounts.urls')),
    path('api/user/current', CurrentUserAPIView.as_view(), name='current-user'),
    path('api/workspace/', include('workspace.urls')),
    path('api/member/workspace/<str:invite_code>/join', JoinWorkspaceView.as_view(), name='join-workspace'),
    path('api/project/', include('project.urls')),
    path('api/task/', include('task.urls')),
]
