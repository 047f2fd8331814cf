# teams/services.py
"""
Team lifecycle for hackathon participants.

Operations:
- get_my_team   -> caller's team or None
- create_team   -> new team with the caller as its only member
- join_team     -> add caller to the team owning a join code
- update_team   -> partial rename / devpost change
- leave_team    -> remove caller, deleting the team once it is empty

Invariants kept here (not by the schema):
- a user belongs to at most one team
- a team never exists without members

Every write goes through ``TeamRepository.save`` which is version-checked;
a concurrent change to the same team surfaces as ``Conflict`` and the call
is not retried. Create and join also row-lock the caller, so one user
racing into two teams is serialised rather than last-write-wins.
"""
import logging
from dataclasses import replace
from typing import Optional

from django.conf import settings
from django.db import transaction
from rest_framework.exceptions import ValidationError

from .codes import generate_join_code
from .commands import CreateTeam, JoinTeam, LeaveTeam, UpdateTeam
from .exceptions import (
    AlreadyOnTeam,
    Conflict,
    DuplicateTeam,
    StaleTeam,
    TeamNotFound,
    Unauthorized,
)
from .records import LeaveResult, TeamProfile, TeamRecord
from .repository import TeamRepository

logger = logging.getLogger("hackops.teams")


class TeamLifecycleService:

    def __init__(self, repository: Optional[TeamRepository] = None, join_code_factory=generate_join_code):
        self.repository = repository or TeamRepository()
        self.join_code_factory = join_code_factory

    # ---- Queries -------------------------------------------------------

    def get_my_team(self, caller) -> Optional[TeamProfile]:
        self._require_hacker(caller)
        record = self.repository.find_one(member_id=caller.user_id)
        if record is None:
            return None
        return self.repository.populate(record)

    # ---- Commands ------------------------------------------------------

    def execute(self, caller, command):
        """Dispatch a parsed ``TeamCommand``."""
        if isinstance(command, CreateTeam):
            return self.create_team(caller, command.name, command.devpost)
        if isinstance(command, JoinTeam):
            return self.join_team(caller, command.join_code)
        if isinstance(command, UpdateTeam):
            return self.update_team(caller, name=command.name, devpost=command.devpost)
        if isinstance(command, LeaveTeam):
            return self.leave_team(caller)
        raise TypeError(f"Unknown team command: {command!r}")

    def create_team(self, caller, name: str, devpost: str = "") -> TeamProfile:
        self._require_hacker(caller)

        with transaction.atomic():
            self.repository.lock_member(caller.user_id)

            if self.repository.find_one(member_id=caller.user_id) is not None:
                logger.warning(f"Create rejected, already on a team: user={caller.user_id}")
                raise AlreadyOnTeam()

            record = TeamRecord(
                name=name,
                devpost=devpost or "",
                join_code=self._new_join_code(),
                member_ids=(caller.user_id,),
            )
            saved = self._save(record)

        logger.info(f"Team created: team={saved.id}, name={saved.name!r}, user={caller.user_id}")
        return self.repository.populate(saved)

    def join_team(self, caller, join_code: str) -> TeamProfile:
        self._require_hacker(caller)

        team = self.repository.find_one(join_code=join_code)
        if team is None:
            logger.warning(f"Join rejected, unknown code: user={caller.user_id}")
            raise TeamNotFound()

        if team.has_member(caller.user_id):
            return self.repository.populate(team)

        with transaction.atomic():
            self.repository.lock_member(caller.user_id)

            current = self.repository.find_one(member_id=caller.user_id)
            if current is not None:
                logger.warning(
                    f"Join rejected, already on a team: user={caller.user_id}, "
                    f"current={current.id}, target={team.id}"
                )
                raise AlreadyOnTeam()

            saved = self._save(team.with_member(caller.user_id))

        logger.info(f"Team joined: team={saved.id}, user={caller.user_id}, size={len(saved.member_ids)}")
        return self.repository.populate(saved)

    def update_team(self, caller, name: Optional[str] = None, devpost: Optional[str] = None) -> TeamProfile:
        self._require_hacker(caller)

        team = self._team_of(caller)

        changes = {}
        if name is not None:
            if not name.strip():
                raise ValidationError({"team_name": ["Team name cannot be blank."]})
            changes["name"] = name.strip()
        if devpost is not None:
            changes["devpost"] = devpost
        if not changes:
            return self.repository.populate(team)

        saved = self._save(replace(team, **changes))

        logger.info(f"Team updated: team={saved.id}, fields={sorted(changes)}, user={caller.user_id}")
        return self.repository.populate(saved)

    def leave_team(self, caller) -> LeaveResult:
        self._require_hacker(caller)

        team = self._team_of(caller)
        remaining = team.without_member(caller.user_id)

        if remaining.is_empty:
            try:
                self.repository.delete_one(team)
            except StaleTeam:
                raise Conflict()
            logger.info(f"Team deleted after last member left: team={team.id}, user={caller.user_id}")
            return LeaveResult(deleted=True, message=f"Team {team.name} deleted successfully.")

        saved = self._save(remaining)

        logger.info(f"Team left: team={saved.id}, user={caller.user_id}, size={len(saved.member_ids)}")
        return LeaveResult(deleted=False, team=self.repository.populate(saved))

    # ---- Helpers -------------------------------------------------------

    def _require_hacker(self, caller):
        if caller is None or not caller.is_hacker:
            raise Unauthorized()

    def _team_of(self, caller) -> TeamRecord:
        team = self.repository.find_one(member_id=caller.user_id)
        if team is None:
            raise TeamNotFound()
        return team

    def _save(self, record: TeamRecord) -> TeamRecord:
        try:
            return self.repository.save(record)
        except StaleTeam:
            logger.warning(f"Concurrent team change detected: team={record.id}")
            raise Conflict()
        except DuplicateTeam:
            raise Conflict(f"A team named '{record.name}' already exists.")

    def _new_join_code(self) -> str:
        attempts = getattr(settings, "TEAM_JOIN_CODE_ATTEMPTS", 5)
        for _ in range(attempts):
            code = self.join_code_factory()
            if not self.repository.join_code_exists(code):
                return code
        logger.error(f"Could not generate a free join code after {attempts} attempts")
        raise Conflict("Could not allocate a join code. Please retry.")
