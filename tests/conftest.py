"""Shared fixtures for the ecohub test suite."""

from datetime import datetime
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from ecohub.apps.carbon.models import EmissionRecord
from ecohub.apps.carbon.services.periods import month_identifier, week_identifier


def local_dt(year, month, day, hour=12, minute=0):
    """Aware datetime in the project time zone."""
    return timezone.make_aware(datetime(year, month, day, hour, minute))


@pytest.fixture
def make_user(db):
    User = get_user_model()
    counter = {"n": 0}

    def factory(name=None, email=None, password="secret123"):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        return User.objects.create_user(
            username=email,
            email=email,
            password=password,
            first_name=name or f"User {counter['n']}",
        )

    return factory


@pytest.fixture
def user(make_user):
    return make_user(name="Asha", email="asha@example.com")


@pytest.fixture
def make_record(db):
    def factory(user, when, score=80, total=150.0, **extra):
        total = Decimal(str(total))
        return EmissionRecord.objects.create(
            user=user,
            date=when,
            week_identifier=week_identifier(when),
            month_identifier=month_identifier(when),
            total_emissions=total,
            transportation=total,
            energy=Decimal("0"),
            food=Decimal("0"),
            waste=Decimal("0"),
            score=score,
            feedback="",
            recommendations=[],
            **extra,
        )

    return factory


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(user):
    client = APIClient()
    token, _ = Token.objects.get_or_create(user=user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return client
