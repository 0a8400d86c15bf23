# task/models.py
import secrets
import string
import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from accounts.models import User
from project.models import Project
from workspace.models import Workspace


def generate_task_code():
    alphabet = string.ascii_lowercase + string.digits
    return 'task-' + ''.join(secrets.choice(alphabet) for _ in range(3))


class TaskStatus(models.TextChoices):
    BACKLOG = 'BACKLOG', 'Backlog'
    TODO = 'TODO', 'Todo'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    IN_REVIEW = 'IN_REVIEW', 'In Review'
    DONE = 'DONE', 'Done'


class TaskPriority(models.TextChoices):
    LOW = 'LOW', 'Low'
    MEDIUM = 'MEDIUM', 'Medium'
    HIGH = 'HIGH', 'High'


class Task(models.Model):
    task_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    task_code = models.CharField(max_length=16, default=generate_task_code, db_index=True)
    workspace = models.ForeignKey(Workspace, on_delete=models.CASCADE, related_name='tasks')
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='tasks')
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=TaskStatus.choices, default=TaskStatus.TODO)
    priority = models.CharField(max_length=20, choices=TaskPriority.choices, default=TaskPriority.MEDIUM)
    assigned_to = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name='assigned_tasks'
    )
    created_by = models.ForeignKey(User, on_delete=models.CASCADE, related_name='created_tasks')
    due_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['workspace', 'created_at'], name='task_workspace_created_idx'),
        ]

    def __str__(self):
        return f"{self.task_code} {self.title}"

    def clean(self):
        if self.project_id and self.workspace_id and self.project.workspace_id != self.workspace_id:
            raise ValidationError("Task project must belong to the task workspace.")


class TaskClarification(models.Model):
    clarification_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    task = models.ForeignKey(Task, on_delete=models.CASCADE, related_name='clarifications')
    workspace = models.ForeignKey(Workspace, on_delete=models.CASCADE, related_name='task_clarifications')
    question = models.TextField(max_length=1000)
    asked_by = models.ForeignKey(User, on_delete=models.CASCADE, related_name='asked_clarifications')
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['workspace', 'task'], name='clarification_ws_task_idx'),
        ]

    def __str__(self):
        return f"Clarification on {self.task_id}: {self.question[:40]}"


class ClarificationResponse(models.Model):
    """One answer in a clarification thread. Rows are written once and never updated."""
    clarification = models.ForeignKey(TaskClarification, on_delete=models.CASCADE, related_name='responses')
    message = models.TextField(max_length=1000)
    responded_by = models.ForeignKey(User, on_delete=models.CASCADE, related_name='clarification_responses')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Response by {self.responded_by_id} on {self.clarification_id}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("Clarification responses are append-only.")
        super().save(*args, **kwargs)
