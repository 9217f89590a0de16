from django.db import models

from apps.users.models import User


class Task(models.Model):
    """
    A to-do item owned by exactly one User.

    Ownership is fixed at creation; deleting the owner deletes its tasks.
    """
    title = models.CharField(max_length=255)
    description = models.TextField()
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='tasks')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title
