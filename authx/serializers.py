from django.contrib.auth import authenticate, get_user_model
from rest_framework import serializers

User = get_user_model()


class LoginSerializer(serializers.Serializer):
    """
    ``username`` may also be the account's email address.
    """
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        login = attrs["username"].strip()

        if "@" in login:
            match = User.objects.filter(email__iexact=login).only("username").first()
            if match is not None:
                login = match.username

        user = authenticate(
            request=self.context.get("request"),
            username=login,
            password=attrs["password"],
        )
        if not user:
            raise serializers.ValidationError("Invalid credentials", code="invalid_credentials")

        attrs["user"] = user
        return attrs
