# users/identity.py
"""
Explicit caller identity for the hackathon cores.

Views resolve the authenticated request into a ``Caller`` once and pass it
down; services never look at ``request.user`` themselves.
"""
from dataclasses import dataclass

from .models import User


@dataclass(frozen=True)
class Caller:
    user_id: int
    role: str

    @classmethod
    def from_user(cls, user) -> "Caller":
        return cls(user_id=user.pk, role=user.role)

    @property
    def is_hacker(self) -> bool:
        return self.role == User.ROLE_HACKER

    @property
    def is_organizer(self) -> bool:
        return self.role == User.ROLE_ORGANIZER

    @property
    def is_judge(self) -> bool:
        return self.role == User.ROLE_JUDGE
