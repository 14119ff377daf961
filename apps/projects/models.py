# apps/projects/models.py
import uuid

from django.db import models
from django.conf import settings


class Project(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    project_name = models.CharField(max_length=200)

    # Full image and its square preview (PNG)
    image_data = models.BinaryField(default=bytes)
    thumbnail_data = models.BinaryField(default=bytes, blank=True)

    show_grid = models.BooleanField(default=False)
    deadline = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return self.project_name


class Cell(models.Model):
    project = models.ForeignKey(Project, on_delete=models.CASCADE, related_name='cells')
    position = models.PositiveIntegerField()
    is_colored = models.BooleanField(default=False)

    class Meta:
        ordering = ['position']
        unique_together = ('project', 'position')  # one cell per grid slot

    def __str__(self):
        return f"{self.project_id}#{self.position}"
