# task/urls.py
from django.urls import path

from . import views

urlpatterns = [
    path('project/<uuid:project_id>/workspace/<uuid:workspace_id>/create', views.CreateTaskView.as_view(),
         name='create-task'),
    path('workspace/<uuid:workspace_id>/all', views.ListTasksView.as_view(), name='list-tasks'),
    path('<uuid:task_id>/project/<uuid:project_id>/workspace/<uuid:workspace_id>/update',
         views.UpdateTaskView.as_view(), name='update-task'),
    path('<uuid:task_id>/project/<uuid:project_id>/workspace/<uuid:workspace_id>', views.TaskDetailView.as_view(),
         name='task-detail'),
    path('<uuid:task_id>/workspace/<uuid:workspace_id>/delete', views.DeleteTaskView.as_view(), name='delete-task'),
    path('<uuid:task_id>/workspace/<uuid:workspace_id>/clarifications', views.TaskClarificationsView.as_view(),
         name='task-clarifications'),
    path('<uuid:task_id>/workspace/<uuid:workspace_id>/clarifications/<uuid:clarification_id>/respond',
         views.RespondToClarificationView.as_view(), name='respond-clarification'),
]
