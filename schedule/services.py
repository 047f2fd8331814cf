# schedule/services.py
"""
Database and clock collaborators around the reconciler.
"""
import logging
from datetime import datetime
from typing import Iterable, List, Sequence

from django.db import transaction

from core.datetime_utils import as_aware, parse_iso

from .models import ScheduleAssignment
from .records import Assignment, Judge
from .rooms import configured_rooms

logger = logging.getLogger("hackops.schedule")


def to_assignment(row: ScheduleAssignment) -> Assignment:
    return Assignment(
        time=row.time,
        room=row.room,
        team_id=row.team_id,
        team_name=row.team_name,
        devpost=row.devpost,
        member_names=tuple(row.member_names or ()),
        judges=tuple(
            Judge(id=str(judge.get("id", "")), name=judge.get("name", ""))
            for judge in (row.judges or ())
        ),
        room_url=row.room_url,
    )


def load_assignments() -> List[Assignment]:
    """Stored assignments in import order."""
    return [to_assignment(row) for row in ScheduleAssignment.objects.order_by("position", "id")]


def _instant(assignment: Assignment) -> datetime:
    return as_aware(parse_iso(assignment.time))


def chronological(assignments: Iterable[Assignment]) -> List[Assignment]:
    """Stable sort by parsed start time."""
    return sorted(assignments, key=_instant)


def past_cutoff_index(assignments: Sequence[Assignment], current: datetime) -> int:
    """
    Number of leading sessions that started before ``current``.

    ``assignments`` must be chronological.
    """
    current = as_aware(current)
    index = 0
    for assignment in assignments:
        if _instant(assignment) >= current:
            break
        index += 1
    return index


@transaction.atomic
def replace_schedule(rows: Sequence[dict]) -> List[Assignment]:
    """
    Replace the whole schedule with already-validated rows.

    Rows without a ``room_url`` get the configured URL of their room.
    """
    room_urls = {room.id: room.url for room in configured_rooms()}

    deleted, _ = ScheduleAssignment.objects.all().delete()
    created = ScheduleAssignment.objects.bulk_create(
        ScheduleAssignment(
            position=position,
            time=row["time"],
            room=row["room"],
            room_url=row.get("room_url") or room_urls.get(row["room"], ""),
            team_id=str(row["team_id"]),
            team_name=row["team_name"],
            devpost=row.get("devpost", ""),
            member_names=list(row.get("member_names", [])),
            judges=[{"id": str(j["id"]), "name": j["name"]} for j in row.get("judges", [])],
        )
        for position, row in enumerate(rows)
    )

    logger.info(f"Schedule replaced: removed={deleted}, imported={len(created)}")
    return [to_assignment(row) for row in created]
