"""Auth gate for the shared watch-list account.

A single shared password unlocks the collection. Successful authentication
yields a timestamp-signed token; verifying a token needs no server-side
session table, only the signing key and the configured max age.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Self

from django.conf import settings
from django.core import signing
from django.utils.crypto import constant_time_compare

from movies.domain.errors import UnauthorizedError

logger = logging.getLogger(__name__)

SESSION_SUBJECT = "watchlist"
SESSION_SALT = "movies.auth.session"


@dataclass(frozen=True)
class SessionToken:
    """An issued or verified session token."""

    token: str
    expires_at: datetime


class AuthGate(ABC):
    """Interface every Collection Service call is checked against."""

    @abstractmethod
    def verify(self, token: str | None) -> SessionToken:
        """Return the session for a valid token.

        Raises:
            UnauthorizedError: If the token is missing, tampered with or expired.
        """
        ...


class SignedTokenGate(AuthGate):
    """Shared-password gate issuing signed, time-limited tokens."""

    def __init__(self, password: str, max_age: timedelta, secret_key: str | None = None) -> None:
        if not password:
            raise ValueError("Shared password must not be empty")
        self._password = password
        self._max_age = max_age
        self._signer = signing.TimestampSigner(key=secret_key, salt=SESSION_SALT)

    @classmethod
    def from_settings(cls) -> Self:
        return cls(
            password=settings.WATCHLIST_PASSWORD,
            max_age=timedelta(seconds=settings.WATCHLIST_SESSION_MAX_AGE),
        )

    def authenticate(self, password: str | None) -> SessionToken:
        """Exchange the shared password for a session token.

        Raises:
            UnauthorizedError: If the password does not match.
        """
        if not password or not constant_time_compare(password, self._password):
            logger.warning("Rejected sign-in attempt with wrong password")
            raise UnauthorizedError()
        issued_at = datetime.now(timezone.utc)
        token = self._signer.sign_object(
            {"sub": SESSION_SUBJECT, "iat": int(issued_at.timestamp())}
        )
        return SessionToken(token=token, expires_at=issued_at + self._max_age)

    def verify(self, token: str | None) -> SessionToken:
        if not token:
            raise UnauthorizedError()
        try:
            payload = self._signer.unsign_object(token, max_age=self._max_age)
        except signing.SignatureExpired:
            logger.info("Rejected expired session token")
            raise UnauthorizedError() from None
        except signing.BadSignature:
            logger.warning("Rejected session token with bad signature")
            raise UnauthorizedError() from None
        if not isinstance(payload, dict) or payload.get("sub") != SESSION_SUBJECT:
            raise UnauthorizedError()
        issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
        return SessionToken(token=token, expires_at=issued_at + self._max_age)
