"""Auth API serializers.

Admin accounts are identified by email. Registration enforces a unique email
and a minimum password length; login authenticates email/password.
"""

from django.contrib.auth import authenticate, get_user_model
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

User = get_user_model()


class RegistrationSerializer(serializers.Serializer):
    """Validate and create a new admin (staff) user."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        error_messages={"min_length": _("Password should be at least 6 characters.")},
    )

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists() or User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError(_("This email address is already in use."))
        return value

    def create(self, validated_data):
        email = validated_data["email"]
        user = User(username=email, email=email, is_staff=True)
        user.set_password(validated_data["password"])
        user.save()
        return user


class LoginSerializer(serializers.Serializer):
    """Authenticate email/password and attach the user to validated data."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        user = authenticate(
            username=attrs.get("email", "").strip().lower(),
            password=attrs.get("password"),
        )
        if not user or not user.is_staff:
            raise serializers.ValidationError(
                {"detail": "Failed to sign in. Please check your credentials."}
            )
        attrs["user"] = user
        return attrs
