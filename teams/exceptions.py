# teams/exceptions.py
"""
Team lifecycle failures.

Each one is a DRF ``APIException`` so views can let them propagate to
``core.exceptions.custom_exception_handler``.
"""
from rest_framework import status
from rest_framework.exceptions import APIException, PermissionDenied


class Unauthorized(PermissionDenied):
    default_detail = "Only hackers can manage teams."
    default_code = "unauthorized"


class AlreadyOnTeam(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "You are already on a team."
    default_code = "already_on_team"


class TeamNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Team not found"
    default_code = "team_not_found"


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The team was changed by someone else. Please retry."
    default_code = "conflict"


# Persistence-level signals raised by the repository

class StaleTeam(Exception):
    """The stored team version moved on since it was read."""


class DuplicateTeam(Exception):
    """A uniqueness constraint (team name or join code) was violated."""
