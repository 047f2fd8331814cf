# schedule/records.py
"""
Read-only schedule records.

Assignments come from an external import and are never modified by the
reconciler; grid rows and judge rows are derived on every call.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Judge:
    id: str
    name: str


@dataclass(frozen=True)
class Assignment:
    time: str  # ISO string exactly as imported
    room: str
    team_id: str
    team_name: str
    devpost: str = ""
    member_names: Tuple[str, ...] = ()
    judges: Tuple[Judge, ...] = ()
    room_url: str = ""

    @property
    def judge_names(self) -> Tuple[str, ...]:
        return tuple(judge.name for judge in self.judges)


@dataclass(frozen=True)
class Room:
    id: str
    label: str
    url: str


@dataclass(frozen=True)
class GridRow:
    time: str
    display_time: str
    cells: Dict[str, Optional[Assignment]] = field(default_factory=dict)


@dataclass(frozen=True)
class OrganizerSchedule:
    rows: Tuple[GridRow, ...]
    rooms: Tuple[Room, ...]


@dataclass(frozen=True)
class JudgeRow:
    time: str
    display_time: str
    project_name: str
    project_link: str
    member_names: Tuple[str, ...]
    judge_names: Tuple[str, ...]
    form_link: str
    room_link: str
