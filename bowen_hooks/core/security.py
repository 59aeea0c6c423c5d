"""Security utilities"""

from datetime import datetime, timedelta
from typing import Any, Dict
from uuid import uuid4
import hmac
import secrets

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from .config import settings
from .errors import InvalidTokenError, TokenExpiredError


ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

# Password context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password"""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def _encode(payload: Dict[str, Any], secret: str, expires_delta: timedelta, token_type: str) -> str:
    now = datetime.utcnow()
    to_encode = dict(payload)
    to_encode.update({
        "iat": now,
        "exp": now + expires_delta,
        "type": token_type,
        "jti": uuid4().hex,
    })
    return jwt.encode(to_encode, secret, algorithm=settings.JWT_ALGORITHM)


def _decode(token: str, secret: str, token_type: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError as e:
        raise TokenExpiredError("Token expired, please login again") from e
    except JWTError as e:
        raise InvalidTokenError() from e

    if payload.get("type") != token_type or not payload.get("id"):
        raise InvalidTokenError()
    return payload


def create_access_token(payload: Dict[str, Any]) -> str:
    """Create access token"""
    return _encode(
        payload,
        settings.JWT_SECRET,
        timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
        ACCESS_TOKEN_TYPE,
    )


def create_refresh_token(payload: Dict[str, Any]) -> str:
    """Create refresh token"""
    return _encode(
        payload,
        settings.JWT_REFRESH_SECRET,
        timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        REFRESH_TOKEN_TYPE,
    )


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify access token and return its claims"""
    return _decode(token, settings.JWT_SECRET, ACCESS_TOKEN_TYPE)


def decode_refresh_token(token: str) -> Dict[str, Any]:
    """Verify refresh token and return its claims"""
    return _decode(token, settings.JWT_REFRESH_SECRET, REFRESH_TOKEN_TYPE)


def tokens_match(presented: str, stored: str) -> bool:
    """Constant-time comparison of two token strings"""
    return hmac.compare_digest(presented.encode("utf-8"), stored.encode("utf-8"))


def generate_secure_token() -> str:
    """Generate a 32-byte random token, hex encoded."""
    return secrets.token_hex(32)
