"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Movie(models.Model):
    """Persistence model for watch-list movies."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    genre = models.CharField(max_length=100)
    seen = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name", "created_at", "id"]
        indexes = [
            models.Index(fields=["is_deleted", "name"], name="movie_active_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.genre})"
