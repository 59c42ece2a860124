"""Signed session tokens for signed-in users."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from telemedcart.domain.models import PublicUser
from telemedcart.infrastructure.config import Settings


logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class TokenService:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._secret = self.settings.token_secret
        self._ttl = timedelta(hours=self.settings.token_ttl_hours)

    def issue(self, user: PublicUser, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "email": user.email,
            "role": user.role,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Return the token claims, or None when missing, expired or tampered."""
        if not token:
            return None
        try:
            return jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.info("Session token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning("Rejected session token: %s", e)
            return None
