"""Auth API views.

Token-based admin sign-up, sign-in and sign-out. Signing in opens the admin's
session (and with it the live order dashboard); signing out deletes the token
and closes that session.
"""

from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from user_auth_app.sessions import get_session_registry
from .permissions import AllowAdminSignup, AllowedAnyLogin
from .serializers import LoginSerializer, RegistrationSerializer


def _token_payload(user, token):
    return {
        "token": token.key,
        "email": user.email,
        "user_id": user.id,
    }


class RegistrationView(APIView):
    """POST /api/registration/ -> create an admin user, return auth token."""

    authentication_classes = []
    permission_classes = [AllowAdminSignup]

    def post(self, request, *args, **kwargs):
        serializer = RegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.save()
        token, _ = Token.objects.get_or_create(user=user)
        get_session_registry().open(user)
        return Response(_token_payload(user, token), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """POST /api/login/ -> validate credentials and return auth token."""

    authentication_classes = []
    permission_classes = [AllowedAnyLogin]

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.validated_data["user"]
        token, _ = Token.objects.get_or_create(user=user)
        get_session_registry().open(user)
        return Response(_token_payload(user, token), status=status.HTTP_200_OK)


class LogoutView(APIView):
    """POST /api/logout/ -> delete the auth token and close the admin session."""

    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        get_session_registry().close(request.user)
        Token.objects.filter(user=request.user).delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
