# teams/views.py - Team management API

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from users.identity import Caller
from users.permissions import IsHacker

from .serializers import TeamProfileSerializer, parse_team_command
from .services import TeamLifecycleService
from .throttles import TeamJoinThrottle


class TeamManagementView(APIView):
    """
    GET    /api/team-management/  -> caller's team (409 + null when teamless)
    POST   /api/team-management/  -> join by join_code or create by team_name
    PATCH  /api/team-management/  -> rename / change devpost
    DELETE /api/team-management/  -> leave; last member out deletes the team
    """
    permission_classes = [IsAuthenticated, IsHacker]
    throttle_classes = [TeamJoinThrottle]

    service_class = TeamLifecycleService

    def get_service(self):
        return self.service_class()

    def get(self, request):
        team = self.get_service().get_my_team(Caller.from_user(request.user))
        if team is None:
            return Response(None, status=status.HTTP_409_CONFLICT)
        return Response(TeamProfileSerializer(team).data, status=status.HTTP_200_OK)

    def post(self, request):
        return self._run(request, status.HTTP_201_CREATED)

    def patch(self, request):
        return self._run(request, status.HTTP_200_OK)

    def delete(self, request):
        result = self._execute(request)
        if result.deleted:
            return Response({"detail": result.message}, status=status.HTTP_200_OK)
        return Response(TeamProfileSerializer(result.team).data, status=status.HTTP_200_OK)

    def _run(self, request, success_status):
        team = self._execute(request)
        return Response(TeamProfileSerializer(team).data, status=success_status)

    def _execute(self, request):
        command = parse_team_command(request.method, request.data)
        return self.get_service().execute(Caller.from_user(request.user), command)
