# project/urls.py
from django.urls import path

from . import views

urlpatterns = [
    path('workspace/<uuid:workspace_id>/create', views.CreateProjectView.as_view(), name='create-project'),
    path('workspace/<uuid:workspace_id>/all', views.ListProjectsView.as_view(), name='list-projects'),
    path('<uuid:project_id>/workspace/<uuid:workspace_id>/analytics', views.ProjectAnalyticsView.as_view(),
         name='project-analytics'),
    path('<uuid:project_id>/workspace/<uuid:workspace_id>/update', views.UpdateProjectView.as_view(),
         name='update-project'),
    path('<uuid:project_id>/workspace/<uuid:workspace_id>/delete', views.DeleteProjectView.as_view(),
         name='delete-project'),
    path('<uuid:project_id>/workspace/<uuid:workspace_id>', views.ProjectDetailView.as_view(),
         name='project-detail'),
]
