from django.urls import path
from .views import register, login, me

urlpatterns = [
    path("register", register, name="auth-register"),
    path("login", login, name="auth-login"),
    path("me", me, name="auth-me"),
]
