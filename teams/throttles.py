# teams/throttles.py

from rest_framework.throttling import SimpleRateThrottle


class TeamJoinThrottle(SimpleRateThrottle):
    """
    Throttle join-code attempts per user.

    Scope key: 'team-join'
    Cache key shape:
      throttle_team-join_u<user_id>
    """
    scope = "team-join"

    def allow_request(self, request, view):
        # Only POSTs carrying a join code count against the budget;
        # non-object bodies are left for the serializer to reject
        data = request.data if isinstance(request.data, dict) else {}
        if request.method != "POST" or not data.get("join_code"):
            return True
        return super().allow_request(request, view)

    def get_cache_key(self, request, view):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return None

        return f"throttle_{self.scope}_u{user.id}"
