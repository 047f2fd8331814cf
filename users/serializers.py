from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'name',
            'display_name',
            'role',
            'date_joined',
        ]
        # role is assigned by organizers through the admin
        read_only_fields = ['id', 'username', 'role', 'date_joined']
