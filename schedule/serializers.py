# schedule/serializers.py

from rest_framework import serializers

from core.datetime_utils import parse_iso

from .rooms import configured_rooms


class JudgeSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()


class AssignmentImportSerializer(serializers.Serializer):
    """One imported judging session."""
    time = serializers.CharField(max_length=64)
    room = serializers.CharField(max_length=32)
    room_url = serializers.URLField(required=False, allow_blank=True)
    team_id = serializers.CharField(max_length=64)
    team_name = serializers.CharField(max_length=100)
    devpost = serializers.URLField(required=False, allow_blank=True, default="")
    member_names = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    judges = JudgeSerializer(many=True, required=False, default=list)

    def validate_time(self, value):
        if parse_iso(value) is None:
            raise serializers.ValidationError("Time must be an ISO 8601 datetime.")
        return value

    def validate_room(self, value):
        valid = [room.id for room in configured_rooms()]
        if value not in valid:
            raise serializers.ValidationError(f"Unknown room. Valid rooms: {', '.join(valid)}")
        return value


class AssignmentSerializer(serializers.Serializer):
    """Read-only rendering of ``records.Assignment``."""
    time = serializers.CharField()
    room = serializers.CharField()
    room_url = serializers.CharField()
    team_id = serializers.CharField()
    team_name = serializers.CharField()
    devpost = serializers.CharField()
    member_names = serializers.ListField(child=serializers.CharField())
    judges = JudgeSerializer(many=True)


class RoomSerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    url = serializers.CharField()


def grid_row_data(row, rooms):
    """Flatten a ``GridRow`` into ``{"time": ..., "<room id>": cell, ...}``."""
    data = {"time": row.time, "display_time": row.display_time}
    for room in rooms:
        cell = row.cells.get(room.id)
        data[room.id] = AssignmentSerializer(cell).data if cell is not None else None
    return data


class JudgeRowSerializer(serializers.Serializer):
    time = serializers.CharField()
    display_time = serializers.CharField()
    project = serializers.SerializerMethodField()
    team_members = serializers.ListField(source="member_names", child=serializers.CharField())
    judges = serializers.ListField(source="judge_names", child=serializers.CharField())
    form = serializers.CharField(source="form_link")
    room = serializers.CharField(source="room_link")

    def get_project(self, obj):
        return {"name": obj.project_name, "link": obj.project_link}
