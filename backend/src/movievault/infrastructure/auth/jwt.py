"""JWT creation and verification using python-jose."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

from jose import JWTError, jwt

from movievault.config import Settings
from movievault.domain.clock import SYSTEM_CLOCK, Clock

ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


class TokenService:
    """Issues and validates stateless bearer tokens for a user id.

    Validation fails closed: anything short of a well-formed, correctly signed,
    unexpired access token with an integer subject is reported as ``None``.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        clock: Clock = SYSTEM_CLOCK,
    ) -> None:
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = SYSTEM_CLOCK) -> TokenService:
        return cls(
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.jwt_access_token_expire_minutes,
            clock=clock,
        )

    def issue(self, user_id: int) -> IssuedToken:
        issued_at = self._clock.now()
        expires_at = issued_at + self._lifetime
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": str(uuid4()),
            "iat": issued_at,
            "exp": expires_at,
            "type": ACCESS_TOKEN_TYPE,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def validate(self, token: str) -> int | None:
        """Return the embedded user id, or ``None`` if the token is not acceptable."""
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm], options={"verify_exp": False}
            )
        except (JWTError, ValueError, TypeError, AttributeError):
            return None
        expires = payload.get("exp")
        if isinstance(expires, bool) or not isinstance(expires, (int, float)):
            return None
        if expires <= self._clock.now().timestamp():
            return None
        if payload.get("type") != ACCESS_TOKEN_TYPE:
            return None
        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.isdigit():
            return None
        return int(subject)
