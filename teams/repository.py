# teams/repository.py
"""
Persistence boundary for teams.

Exposes the handful of primitives the lifecycle service relies on
(find-one, save, delete-one, populate) on top of the Django ORM.
Writes are version-checked: a save against an outdated record raises
``StaleTeam`` instead of silently overwriting a concurrent change.
"""
import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import F

from .exceptions import DuplicateTeam, StaleTeam
from .models import Team
from .records import Member, TeamProfile, TeamRecord

logger = logging.getLogger("hackops.teams")

User = get_user_model()


def to_record(team: Team) -> TeamRecord:
    # Through-table order keeps members in the order they joined
    member_ids = tuple(
        Team.members.through.objects.filter(team_id=team.id)
        .order_by("id")
        .values_list("user_id", flat=True)
    )
    return TeamRecord(
        id=team.id,
        name=team.name,
        devpost=team.devpost,
        join_code=team.join_code,
        member_ids=member_ids,
        version=team.version,
    )


class TeamRepository:

    def find_one(
        self,
        *,
        member_id: Optional[int] = None,
        join_code: Optional[str] = None,
        team_id: Optional[int] = None,
    ) -> Optional[TeamRecord]:
        qs = Team.objects.all()
        if member_id is not None:
            qs = qs.filter(members__id=member_id)
        if join_code is not None:
            qs = qs.filter(join_code=join_code)
        if team_id is not None:
            qs = qs.filter(id=team_id)

        team = qs.order_by("id").first()
        return to_record(team) if team else None

    def lock_member(self, member_id: int) -> None:
        """
        Row-lock the user for the rest of the surrounding transaction.

        Serialises a user's own create/join calls so two teams cannot both
        pass the "already on a team" check. No-op on SQLite.
        """
        list(User.objects.select_for_update().filter(pk=member_id).values_list("pk", flat=True))

    def join_code_exists(self, join_code: str) -> bool:
        return Team.objects.filter(join_code=join_code).exists()

    def save(self, record: TeamRecord) -> TeamRecord:
        """
        Upsert a team record and return the stored value.

        Inserts when ``record.id`` is None; otherwise updates only if the
        stored version still equals ``record.version``.
        """
        try:
            with transaction.atomic():
                if record.id is None:
                    team = Team.objects.create(
                        name=record.name,
                        devpost=record.devpost,
                        join_code=record.join_code,
                    )
                else:
                    updated = Team.objects.filter(id=record.id, version=record.version).update(
                        name=record.name,
                        devpost=record.devpost,
                        version=F("version") + 1,
                    )
                    if not updated:
                        raise StaleTeam(f"team={record.id} version={record.version}")
                    team = Team.objects.get(id=record.id)

                team.members.set(record.member_ids)
        except IntegrityError as exc:
            logger.warning(f"Team uniqueness violation: name={record.name!r}, error={exc}")
            raise DuplicateTeam(str(exc)) from exc

        return to_record(team)

    def delete_one(self, record: TeamRecord) -> None:
        deleted, _ = Team.objects.filter(id=record.id, version=record.version).delete()
        if not deleted:
            raise StaleTeam(f"team={record.id} version={record.version}")

    def populate(self, record: TeamRecord) -> TeamProfile:
        users = User.objects.in_bulk(record.member_ids)
        members = tuple(
            Member(id=users[user_id].id, name=users[user_id].display_name)
            for user_id in record.member_ids
            if user_id in users
        )
        return TeamProfile(
            id=record.id,
            name=record.name,
            devpost=record.devpost,
            join_code=record.join_code,
            members=members,
        )
