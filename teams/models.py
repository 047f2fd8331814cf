# teams/models.py

from django.conf import settings
from django.db import models

from .codes import generate_join_code


class Team(models.Model):
    """
    Hackathon team formed around a join code.

    Single-team membership and delete-on-empty are enforced by
    ``teams.services.TeamLifecycleService``, not by the schema.
    """
    name = models.CharField(max_length=100, unique=True)
    devpost = models.URLField(blank=True, default="")

    # Shared with teammates; never regenerated
    join_code = models.CharField(max_length=7, unique=True, editable=False, default=generate_join_code)

    members = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name="teams", blank=True)

    # Optimistic concurrency counter, bumped on every save through the repository
    version = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["created_at"], name="team_created_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.join_code})"
