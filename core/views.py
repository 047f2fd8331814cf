import logging
import time

from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from schedule.models import ScheduleAssignment
from teams.models import Team

logger = logging.getLogger("hackops.api")


class HealthCheckView(APIView):
    """
    GET /api/health/

    Public probe for uptime checks and the organizer dashboard banner.
    Reports database reachability, how many teams and judging sessions
    exist, and whether the throttle cache answers.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request, *args, **kwargs):
        started = time.perf_counter()

        counts = None
        try:
            counts = {
                "teams": Team.objects.count(),
                "sessions": ScheduleAssignment.objects.count(),
            }
        except DatabaseError:
            logger.exception("Health check could not reach the database")

        cache.set("hackops:health", "ok", 5)
        cache_ok = cache.get("hackops:health") == "ok"

        healthy = counts is not None and cache_ok
        return Response(
            {
                "status": "ok" if healthy else "degraded",
                "db": counts is not None,
                "cache": cache_ok,
                "counts": counts,
                "env": getattr(settings, "ENV", "unknown"),
                "latency_ms": round((time.perf_counter() - started) * 1000, 1),
            }
        )
