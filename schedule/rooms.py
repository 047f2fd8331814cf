# schedule/rooms.py
from typing import Tuple

from django.conf import settings

from .records import Room

DEFAULT_ROOM_COUNT = 4
DEFAULT_ROOM_URL_TEMPLATE = "https://vhl.ink/room-{number}"


def build_rooms(count: int, url_template: str = DEFAULT_ROOM_URL_TEMPLATE) -> Tuple[Room, ...]:
    """Rooms ``room-1`` .. ``room-<count>`` in display order."""
    return tuple(
        Room(
            id=f"room-{number}",
            label=f"Room {number}",
            url=url_template.format(number=number),
        )
        for number in range(1, count + 1)
    )


def configured_rooms() -> Tuple[Room, ...]:
    return build_rooms(
        getattr(settings, "SCHEDULE_ROOM_COUNT", DEFAULT_ROOM_COUNT),
        getattr(settings, "SCHEDULE_ROOM_URL_TEMPLATE", DEFAULT_ROOM_URL_TEMPLATE),
    )
