from datetime import datetime, timedelta, timezone

import pytest

from telemedcart.domain.models import PublicUser
from telemedcart.infrastructure.auth.tokens import TokenService
from telemedcart.infrastructure.config import Settings


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("TELEMEDCART_TOKEN_SECRET", "test-secret")
    monkeypatch.setenv("TELEMEDCART_TOKEN_TTL_HOURS", "24")
    return Settings()


@pytest.fixture
def user():
    return PublicUser(id="42", name="Jane Doe", email="jane@example.com", role="patient")


def test_issue_and_verify(settings, user):
    service = TokenService(settings)
    claims = service.verify(service.issue(user))

    assert claims["id"] == "42"
    assert claims["email"] == "jane@example.com"
    assert claims["role"] == "patient"
    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_expired_token_rejected(settings, user):
    service = TokenService(settings)
    token = service.issue(user, now=datetime.now(timezone.utc) - timedelta(hours=25))
    assert service.verify(token) is None


def test_tampered_token_rejected(settings, user):
    service = TokenService(settings)
    token = service.issue(user)
    assert service.verify(token[:-2] + ("aa" if token[-2:] != "aa" else "bb")) is None


def test_token_from_other_secret_rejected(settings, user, monkeypatch):
    token = TokenService(settings).issue(user)
    monkeypatch.setenv("TELEMEDCART_TOKEN_SECRET", "another-secret")
    assert TokenService(Settings()).verify(token) is None


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_garbage_token(settings, token):
    assert TokenService(settings).verify(token) is None
