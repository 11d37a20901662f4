"""Tests for the shared-password auth gate and the session endpoint.

Run with: pytest django-api/tests/test_auth.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from movies.auth import SignedTokenGate
from movies.domain.errors import UnauthorizedError

PASSWORD = "movienight"


class TestSignedTokenGate:
    """Tests for token issue and verification."""

    def test_issued_token_verifies(self, gate: SignedTokenGate):
        session = gate.authenticate(PASSWORD)

        verified = gate.verify(session.token)

        assert verified.token == session.token

    def test_token_valid_for_thirty_days(self, gate: SignedTokenGate):
        before = datetime.now(timezone.utc)
        session = gate.authenticate(PASSWORD)

        assert session.expires_at - before >= timedelta(days=30) - timedelta(seconds=1)
        assert session.expires_at - before <= timedelta(days=30, seconds=1)

    def test_wrong_password_rejected(self, gate: SignedTokenGate):
        with pytest.raises(UnauthorizedError):
            gate.authenticate("popcorn")

    def test_empty_password_rejected(self, gate: SignedTokenGate):
        with pytest.raises(UnauthorizedError):
            gate.authenticate("")

    def test_tampered_token_rejected(self, gate: SignedTokenGate):
        token = gate.authenticate(PASSWORD).token

        with pytest.raises(UnauthorizedError):
            gate.verify(token[:-1] + ("A" if token[-1] != "A" else "B"))

    def test_expired_token_rejected(self):
        gate = SignedTokenGate(password=PASSWORD, max_age=timedelta(seconds=-1))
        token = gate.authenticate(PASSWORD).token

        with pytest.raises(UnauthorizedError):
            gate.verify(token)

    def test_token_from_other_key_rejected(self, gate: SignedTokenGate):
        other = SignedTokenGate(password=PASSWORD, max_age=timedelta(days=30), secret_key="other")
        token = other.authenticate(PASSWORD).token

        with pytest.raises(UnauthorizedError):
            gate.verify(token)

    def test_empty_configured_password_refused(self):
        with pytest.raises(ValueError):
            SignedTokenGate(password="", max_age=timedelta(days=1))


class TestSessionEndpoint:
    """Tests for POST /api/auth/session"""

    def test_correct_password_returns_token(self, api_client: APIClient, settings):
        settings.WATCHLIST_PASSWORD = PASSWORD

        response = api_client.post("/api/auth/session", {"password": PASSWORD}, format="json")

        assert response.status_code == 200
        assert response.json()["token"]
        assert "expiresAt" in response.json()

    def test_wrong_password_returns_401(self, api_client: APIClient, settings):
        settings.WATCHLIST_PASSWORD = PASSWORD

        response = api_client.post("/api/auth/session", {"password": "nope"}, format="json")

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid password"}

    def test_missing_password_returns_400(self, api_client: APIClient):
        response = api_client.post("/api/auth/session", {}, format="json")

        assert response.status_code == 400
        assert "error" in response.json()
