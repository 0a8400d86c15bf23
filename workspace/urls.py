# workspace/urls.py
from django.urls import path

from . import views

urlpatterns = [
    path('create/new', views.CreateWorkspaceView.as_view(), name='create-workspace'),
    path('all', views.ListWorkspacesView.as_view(), name='list-workspaces'),
    path('members/<uuid:workspace_id>', views.WorkspaceMembersView.as_view(), name='workspace-members'),
    path('analytics/<uuid:workspace_id>', views.WorkspaceAnalyticsView.as_view(), name='workspace-analytics'),
    path('change/member/role/<uuid:workspace_id>', views.ChangeMemberRoleView.as_view(), name='change-member-role'),
    path('update/<uuid:workspace_id>', views.UpdateWorkspaceView.as_view(), name='update-workspace'),
    path('delete/<uuid:workspace_id>', views.DeleteWorkspaceView.as_view(), name='delete-workspace'),
    path('<uuid:workspace_id>/member/<uuid:user_id>/remove', views.RemoveWorkspaceMemberView.as_view(),
         name='remove-workspace-member'),
    path('<uuid:workspace_id>', views.WorkspaceDetailView.as_view(), name='workspace-detail'),
]
