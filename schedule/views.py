# schedule/views.py - Schedule API

from django.conf import settings
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.datetime_utils import now
from users.permissions import IsOrganizer

from .reconciler import DEFAULT_FORM_URL_TEMPLATE, build_judge_schedule, build_organizer_grid
from .rooms import configured_rooms
from .serializers import (
    AssignmentImportSerializer,
    JudgeRowSerializer,
    RoomSerializer,
    grid_row_data,
)
from .services import chronological, load_assignments, past_cutoff_index, replace_schedule

TRUTHY = ("1", "true", "yes", "on")


def organizer_schedule_payload():
    rooms = configured_rooms()
    grid = build_organizer_grid(load_assignments(), rooms, tz=timezone.get_current_timezone())
    return {
        "rooms": RoomSerializer(grid.rooms, many=True).data,
        "rows": [grid_row_data(row, grid.rooms) for row in grid.rows],
    }


class OrganizerScheduleView(APIView):
    """
    GET /api/schedule/  -> time x room grid
    PUT /api/schedule/  -> replace the schedule with a list of assignments
    """
    permission_classes = [IsAuthenticated, IsOrganizer]

    def get(self, request):
        return Response(organizer_schedule_payload(), status=status.HTTP_200_OK)

    def put(self, request):
        serializer = AssignmentImportSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)
        replace_schedule(serializer.validated_data)
        return Response(organizer_schedule_payload(), status=status.HTTP_200_OK)


class JudgeScheduleView(APIView):
    """
    GET /api/schedule/judging/?show_past=true

    Chronological list of sessions. Sessions that already started are
    hidden unless ``show_past`` is set.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        show_past = request.query_params.get("show_past", "").lower() in TRUTHY

        assignments = chronological(load_assignments())
        cutoff_index = past_cutoff_index(assignments, now())

        rows = build_judge_schedule(
            assignments,
            cutoff_index=cutoff_index,
            show_past=show_past,
            form_url_template=getattr(settings, "JUDGING_FORM_URL_TEMPLATE", DEFAULT_FORM_URL_TEMPLATE),
            tz=timezone.get_current_timezone(),
        )
        return Response(
            {
                "cutoff_index": cutoff_index,
                "show_past": show_past,
                "results": JudgeRowSerializer(rows, many=True).data,
            },
            status=status.HTTP_200_OK,
        )
