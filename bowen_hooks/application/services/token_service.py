"""Token service: JWT issuance/verification plus refresh-token and presence cache entries"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.config import settings
from ...core.errors import InvalidTokenError
from ...core.security import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
    decode_refresh_token,
    tokens_match,
)
from ...domain.entities.user import User
from ...domain.enums import PresenceStatus, UserRole
from ...domain.repositories.cache_client import ICacheClient

logger = logging.getLogger(__name__)

REFRESH_TOKEN_KEY = "refresh_token:{user_id}"
PRESENCE_KEY = "user:online:{user_id}"


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class TokenPayload:
    id: str
    email: str
    role: UserRole

    @classmethod
    def from_claims(cls, claims: dict) -> "TokenPayload":
        try:
            role = UserRole(claims.get("role", "user"))
        except ValueError as e:
            raise InvalidTokenError() from e
        return cls(id=claims["id"], email=claims.get("email", ""), role=role)


class TokenService:

    def __init__(self, cache: ICacheClient):
        self.cache = cache
        self.refresh_ttl_seconds = settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60
        self.presence_ttl_seconds = settings.PRESENCE_TTL_SECONDS

    def issue_tokens(self, user: User) -> TokenPair:
        claims = user.token_claims()
        return TokenPair(
            access_token=create_access_token(claims),
            refresh_token=create_refresh_token(claims),
        )

    def verify_access(self, token: str) -> TokenPayload:
        """Raises InvalidTokenError or TokenExpiredError"""
        return TokenPayload.from_claims(decode_access_token(token))

    def verify_refresh(self, token: str) -> TokenPayload:
        """Raises InvalidTokenError or TokenExpiredError"""
        return TokenPayload.from_claims(decode_refresh_token(token))

    def store_refresh_token(self, user_id: str, refresh_token: str) -> None:
        # Overwrites any previous token: one active refresh token per user
        self.cache.set_with_expiry(
            REFRESH_TOKEN_KEY.format(user_id=user_id),
            refresh_token,
            self.refresh_ttl_seconds,
        )

    def issue_and_store(self, user: User) -> TokenPair:
        tokens = self.issue_tokens(user)
        self.store_refresh_token(str(user.id.value), tokens.refresh_token)
        return tokens

    def matches_stored_refresh_token(self, user_id: str, refresh_token: str) -> bool:
        stored: Optional[str] = self.cache.get(REFRESH_TOKEN_KEY.format(user_id=user_id))
        if not stored:
            return False
        return tokens_match(refresh_token, stored)

    def revoke_refresh_token(self, user_id: str) -> None:
        self.cache.delete(REFRESH_TOKEN_KEY.format(user_id=user_id))

    def set_presence(self, user_id: str, status: PresenceStatus, now: Optional[datetime] = None) -> None:
        now = now or datetime.utcnow()
        value = json.dumps({"status": status.value, "last_seen": now.isoformat()})
        self.cache.set_with_expiry(PRESENCE_KEY.format(user_id=user_id), value, self.presence_ttl_seconds)

    def get_presence(self, user_id: str) -> Optional[dict]:
        value = self.cache.get(PRESENCE_KEY.format(user_id=user_id))
        return json.loads(value) if value else None
