import logging

from django.contrib.auth import authenticate, get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .authentication import serialize_user

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@api_view(["POST"])
@permission_classes([AllowAny])
def register(request):
    name = (request.data.get("name") or "").strip()
    email = (request.data.get("email") or "").strip().lower()
    password = request.data.get("password") or ""

    if not name or not email or not password:
        return Response(
            {"message": "Name, email and password are required"},
            status=status.HTTP_400_BAD_REQUEST,
        )
    try:
        validate_email(email)
    except ValidationError:
        return Response(
            {"message": "Please enter a valid email address"},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if len(password) < MIN_PASSWORD_LENGTH:
        return Response(
            {"message": f"Password must be at least {MIN_PASSWORD_LENGTH} characters"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    User = get_user_model()
    if User.objects.filter(email__iexact=email).exists():
        return Response(
            {"message": "Email already registered"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    user = User.objects.create_user(
        username=email, email=email, password=password, first_name=name
    )
    token, _ = Token.objects.get_or_create(user=user)
    logger.info(f"[Auth] Registered user {user.id}")
    return Response(
        {"token": token.key, "user": serialize_user(user)},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@permission_classes([AllowAny])
def login(request):
    email = (request.data.get("email") or "").strip().lower()
    password = request.data.get("password") or ""

    user = authenticate(request, username=email, password=password)
    if user is None:
        return Response(
            {"message": "Invalid email or password"},
            status=status.HTTP_401_UNAUTHORIZED,
        )

    token, _ = Token.objects.get_or_create(user=user)
    return Response({"token": token.key, "user": serialize_user(user)})


@api_view(["GET"])
def me(request):
    return Response(serialize_user(request.user))
