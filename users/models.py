# users/models.py
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    ROLE_HACKER = 'hacker'
    ROLE_ORGANIZER = 'organizer'
    ROLE_JUDGE = 'judge'

    ROLE_CHOICES = (
        (ROLE_HACKER, 'Hacker'),
        (ROLE_ORGANIZER, 'Organizer'),
        (ROLE_JUDGE, 'Judge'),
    )

    role = models.CharField(
        max_length=30,
        choices=ROLE_CHOICES,
        default=ROLE_HACKER
    )

    # Shown on team rosters and judging schedules
    name = models.CharField(max_length=150, blank=True, default='')

    @property
    def display_name(self):
        return self.name or self.get_full_name() or self.username

    def __str__(self):
        return self.username
