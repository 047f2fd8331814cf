# teams/serializers.py

from rest_framework import serializers

from .codes import JOIN_CODE_LENGTH, is_join_code
from .commands import CreateTeam, JoinTeam, LeaveTeam, UpdateTeam


class TeamPostSerializer(serializers.Serializer):
    """
    POST body: either ``join_code`` (join) or ``team_name`` (create).
    """
    join_code = serializers.CharField(required=False, allow_blank=True)
    team_name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    devpost = serializers.URLField(required=False, allow_blank=True)

    def validate_join_code(self, value):
        value = value.strip()
        if value and not is_join_code(value):
            raise serializers.ValidationError(
                f"Join codes are {JOIN_CODE_LENGTH} lowercase letters."
            )
        return value

    def validate_team_name(self, value):
        return value.strip()

    def validate(self, attrs):
        if not attrs.get("join_code") and not attrs.get("team_name"):
            raise serializers.ValidationError("Either join_code or team_name required.")
        return attrs

    def to_command(self):
        data = self.validated_data
        if data.get("join_code"):
            return JoinTeam(join_code=data["join_code"])
        return CreateTeam(name=data["team_name"], devpost=data.get("devpost", ""))


class TeamPatchSerializer(serializers.Serializer):
    """PATCH body: partial update, omitted fields stay untouched."""
    team_name = serializers.CharField(required=False, max_length=100)
    devpost = serializers.URLField(required=False, allow_blank=True)

    def validate_team_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Team name cannot be blank.")
        return value

    def to_command(self):
        data = self.validated_data
        return UpdateTeam(name=data.get("team_name"), devpost=data.get("devpost"))


def parse_team_command(method, data):
    """
    Map an HTTP method + body onto a ``TeamCommand``.

    Raises ``serializers.ValidationError`` for malformed bodies.
    """
    if method == "POST":
        serializer = TeamPostSerializer(data=data)
    elif method == "PATCH":
        serializer = TeamPatchSerializer(data=data)
    elif method == "DELETE":
        return LeaveTeam()
    else:
        raise ValueError(f"Unsupported method for team commands: {method}")

    serializer.is_valid(raise_exception=True)
    return serializer.to_command()


class MemberSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


class TeamProfileSerializer(serializers.Serializer):
    """Read-only rendering of ``records.TeamProfile``."""
    id = serializers.IntegerField()
    name = serializers.CharField()
    devpost = serializers.CharField()
    join_code = serializers.CharField()
    members = MemberSerializer(many=True)
