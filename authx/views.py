import logging

from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from .serializers import LoginSerializer

logger = logging.getLogger("hackops.auth")


class LoginView(APIView):
    """
    POST /api/auth/login/  {username, password}

    Returns a SimpleJWT pair plus the caller's role so the front end can
    route hackers, organizers and judges to their own pages.
    """
    permission_classes = []
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={"request": request})
        try:
            serializer.is_valid(raise_exception=True)
        except serializers.ValidationError:
            logger.warning(f"Login failed: username={request.data.get('username')!r}")
            raise

        user = serializer.validated_data["user"]
        refresh = RefreshToken.for_user(user)
        refresh["role"] = user.role

        logger.info(f"Issued token pair: user={user.id}, role={user.role}")
        return Response(
            {
                "access": str(refresh.access_token),
                "refresh": str(refresh),
                "role": user.role,
                "name": user.display_name,
            },
            status=status.HTTP_200_OK,
        )
