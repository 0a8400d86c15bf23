import logging

from django.contrib.auth import login, logout
from django.utils import timezone
from rest_framework import generics, status
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from .serializers import LoginSerializer, LogoutSerializer, SignupSerializer, UserSerializer

logger = logging.getLogger(__name__)


class SignupAPIView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"User {user.user_id} registered at {timezone.now()}")
        return Response(
            {"message": "User created successfully", "user": UserSerializer(user).data},
            status=status.HTTP_201_CREATED,
        )


class LoginAPIView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']
        tokens = serializer.validated_data['tokens']
        login(request, user)
        logger.info(f"User {user.user_id} logged in at {timezone.now()}")
        return Response(
            {
                "message": "Logged in successfully",
                "user": UserSerializer(user).data,
                "access_token": tokens['access'],
                "refresh_token": tokens['refresh'],
            },
            status=status.HTTP_200_OK,
        )


class LogoutAPIView(APIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        user_id = request.user.user_id
        logout(request)
        logger.info(f"User {user_id} logged out at {timezone.now()}")
        return Response({"message": "Logged out successfully"}, status=status.HTTP_200_OK)


class CurrentUserAPIView(generics.GenericAPIView):
    authentication_classes = [SessionAuthentication, JWTAuthentication]
    permission_classes = [IsAuthenticated]
    serializer_class = UserSerializer

    def get(self, request):
        serializer = self.get_serializer(request.user)
        return Response(
            {"message": "User fetch successfully", "user": serializer.data},
            status=status.HTTP_200_OK,
        )
