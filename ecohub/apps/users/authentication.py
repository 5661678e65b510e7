from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """Accepts ``Authorization: Bearer <token>`` as sent by the web client."""

    keyword = "Bearer"


def display_name(user) -> str:
    return user.get_full_name() or user.first_name or user.username


def serialize_user(user) -> dict:
    return {"id": user.id, "name": display_name(user), "email": user.email}
