# schedule/reconciler.py
"""
Schedule reconciliation.

Pure functions over an immutable assignment list:

- build_organizer_grid: time x room grid for organizers. Rows follow the
  first-seen order of each distinct time string; bucketing uses string
  equality, so two spellings of the same instant are two rows.
- build_judge_schedule: one row per assignment, optionally skipping the
  sessions before a caller-supplied cutoff index.

Nothing here touches the database, settings or the clock.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from core.datetime_utils import format_time_of_day

from .records import Assignment, GridRow, JudgeRow, OrganizerSchedule, Room

logger = logging.getLogger("hackops.schedule")

DEFAULT_FORM_URL_TEMPLATE = "/judging?id={team_id}"


def build_organizer_grid(
    assignments: Iterable[Assignment],
    rooms: Sequence[Room],
    tz=None,
) -> OrganizerSchedule:
    room_ids = [room.id for room in rooms]
    known_rooms = set(room_ids)

    buckets: Dict[str, Dict[str, Optional[Assignment]]] = {}
    for assignment in assignments:
        cells = buckets.get(assignment.time)
        if cells is None:
            cells = dict.fromkeys(room_ids)
            buckets[assignment.time] = cells

        if assignment.room not in known_rooms:
            logger.warning(
                f"Assignment outside configured rooms: time={assignment.time}, "
                f"room={assignment.room}, team={assignment.team_id}"
            )
            continue

        previous = cells[assignment.room]
        if previous is not None:
            logger.warning(
                f"Room double-booked, keeping the later assignment: time={assignment.time}, "
                f"room={assignment.room}, dropped={previous.team_id}, kept={assignment.team_id}"
            )
        cells[assignment.room] = assignment

    rows = tuple(
        GridRow(time=time, display_time=format_time_of_day(time, tz), cells=cells)
        for time, cells in buckets.items()
    )
    return OrganizerSchedule(rows=rows, rooms=tuple(rooms))


def build_judge_schedule(
    assignments: Sequence[Assignment],
    cutoff_index: int = 0,
    show_past: bool = False,
    form_url_template: str = DEFAULT_FORM_URL_TEMPLATE,
    tz=None,
) -> List[JudgeRow]:
    """
    Project assignments into judge rows.

    ``assignments`` must already be chronological; ``cutoff_index`` is the
    number of leading sessions considered past and is ignored when
    ``show_past`` is set.
    """
    if cutoff_index < 0:
        raise ValueError(f"cutoff_index must be >= 0, got {cutoff_index}")

    start = 0 if show_past else cutoff_index
    return [
        JudgeRow(
            time=assignment.time,
            display_time=format_time_of_day(assignment.time, tz),
            project_name=assignment.team_name,
            project_link=assignment.devpost,
            member_names=assignment.member_names,
            judge_names=assignment.judge_names,
            form_link=form_url_template.format(team_id=assignment.team_id),
            room_link=assignment.room_url,
        )
        for assignment in list(assignments)[start:]
    ]
