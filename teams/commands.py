# teams/commands.py
"""
Validated team-management commands.

Every mutating request is parsed into exactly one of these before the
service runs, so the service never inspects raw request bodies.
"""
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class CreateTeam:
    name: str
    devpost: str = ""


@dataclass(frozen=True)
class JoinTeam:
    join_code: str


@dataclass(frozen=True)
class UpdateTeam:
    """
    Partial update: ``None`` leaves a field untouched, any other value is
    applied. A blank name is rejected; a blank devpost clears the link.
    """
    name: Optional[str] = None
    devpost: Optional[str] = None


@dataclass(frozen=True)
class LeaveTeam:
    pass


TeamCommand = Union[CreateTeam, JoinTeam, UpdateTeam, LeaveTeam]
