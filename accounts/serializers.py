from django.contrib.auth import authenticate
from django.db import transaction
from rest_framework import serializers
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .models import User


class UserSerializer(serializers.ModelSerializer):
    current_workspace = serializers.UUIDField(source='current_workspace_id', read_only=True)

    class Meta:
        model = User
        fields = ['user_id', 'email', 'name', 'profile_picture', 'current_workspace', 'date_joined']
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user payload embedded in members, tasks and clarifications."""

    class Meta:
        model = User
        fields = ['user_id', 'name', 'email', 'profile_picture']
        read_only_fields = fields


class SignupSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=4, style={'input_type': 'password'})
    name = serializers.CharField(max_length=150, trim_whitespace=True)

    class Meta:
        model = User
        fields = ['email', 'name', 'password']

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def create(self, validated_data):
        from workspace.services import create_workspace

        with transaction.atomic():
            user = User.objects.create_user(
                email=validated_data['email'],
                name=validated_data['name'],
                password=validated_data['password'],
            )
            create_workspace(user, name='My Workspace', description=f"Workspace created for {user.name}")
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def get_tokens(self, user):
        refresh = RefreshToken.for_user(user)
        return {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }

    def validate(self, data):
        user = authenticate(
            request=self.context.get('request'),
            email=data.get('email'),
            password=data.get('password'),
        )

        if not user:
            raise serializers.ValidationError("Invalid email or password.")
        if not user.is_active:
            raise serializers.ValidationError("This account is inactive.")

        data['user'] = user
        data['tokens'] = self.get_tokens(user)
        return data


class LogoutSerializer(serializers.Serializer):
    refresh_token = serializers.CharField(required=False, allow_blank=True)

    def save(self, **kwargs):
        token = self.validated_data.get('refresh_token')
        if not token:
            return
        try:
            RefreshToken(token).blacklist()
        except TokenError:
            raise serializers.ValidationError({'refresh_token': "Invalid refresh token."})
