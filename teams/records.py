# teams/records.py
"""
Immutable team records passed across the persistence boundary.

Services never mutate a record in place: they read one, build the next value
with ``dataclasses.replace`` and hand it to ``TeamRepository.save``.
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class TeamRecord:
    name: str
    join_code: str
    devpost: str = ""
    member_ids: Tuple[int, ...] = ()
    id: Optional[int] = None
    version: int = 0

    def has_member(self, user_id: int) -> bool:
        return user_id in self.member_ids

    def with_member(self, user_id: int) -> "TeamRecord":
        if self.has_member(user_id):
            return self
        return replace(self, member_ids=self.member_ids + (user_id,))

    def without_member(self, user_id: int) -> "TeamRecord":
        return replace(self, member_ids=tuple(m for m in self.member_ids if m != user_id))

    @property
    def is_empty(self) -> bool:
        return not self.member_ids


@dataclass(frozen=True)
class Member:
    id: int
    name: str


@dataclass(frozen=True)
class TeamProfile:
    """Team with its member ids resolved to users."""
    id: int
    name: str
    devpost: str
    join_code: str
    members: Tuple[Member, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LeaveResult:
    deleted: bool
    team: Optional[TeamProfile] = None
    message: str = ""
