# schedule/models.py

from django.db import models


class ScheduleAssignment(models.Model):
    """
    One judging session: a team presenting in a room at a given time.

    Rows are a snapshot of an imported schedule; team and judge details are
    copied in so later team edits do not rewrite the published schedule.
    """
    # Import order; the organizer grid groups times in this order
    position = models.PositiveIntegerField()

    # ISO 8601 string kept verbatim
    time = models.CharField(max_length=64)
    room = models.CharField(max_length=32)
    room_url = models.URLField(blank=True, default="")

    team_id = models.CharField(max_length=64)
    team_name = models.CharField(max_length=100)
    devpost = models.URLField(blank=True, default="")
    member_names = models.JSONField(default=list, blank=True, help_text="Team member display names")
    judges = models.JSONField(default=list, blank=True, help_text="List of {id, name} objects")

    imported_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["time", "room"], name="assignment_time_room_idx"),
        ]

    def __str__(self):
        return f"{self.time} {self.room}: {self.team_name}"
