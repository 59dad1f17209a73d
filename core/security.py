"""
Password hashing and the session token authority.

Tokens are stateless HS256 JWTs signed with the process-wide secret from
settings. They carry the user id, email and nickname and expire 24 hours after
issuance. There is no server-side revocation.
"""

import base64
import binascii
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ConfigDict, ValidationError

from app.config import settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger("nutriapp.security")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

# Values front-ends send when no token is stored
PLACEHOLDER_TOKENS = frozenset({"null", "undefined"})

MISSING_TOKEN_MESSAGE = "Not authorized"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class TokenClaims(BaseModel):
    """Identity carried by a verified session token."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    email: str
    nickname: str


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a bcrypt hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unknown or corrupted hash format
        return False


def issue_token(
    user_id: int,
    email: str,
    nickname: str,
    *,
    now: Optional[datetime] = None,
    secret: Optional[str] = None,
) -> str:
    """Create a signed session token for the given identity."""
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(hours=settings.token_expire_hours)
    payload = {
        "user_id": user_id,
        "email": email,
        "nickname": nickname,
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(
        payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def _is_canonical(token: str) -> bool:
    """Every segment must round-trip through base64url unchanged.

    The decoder ignores the spare bits of a segment's last character, so a
    flipped final character can otherwise still verify.
    """
    segments = token.split(".")
    if len(segments) != 3:
        return False
    for segment in segments:
        padded = segment + "=" * (-len(segment) % 4)
        try:
            raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        except (binascii.Error, ValueError, UnicodeEncodeError):
            return False
        if base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii") != segment:
            return False
    return True


def verify_token(token: Optional[str], *, secret: Optional[str] = None) -> TokenClaims:
    """Validate a session token and return its claims.

    Raises:
        UnauthorizedError: token absent, placeholder, malformed, tampered with
            or expired.
    """
    if not token or token in PLACEHOLDER_TOKENS:
        raise UnauthorizedError(MISSING_TOKEN_MESSAGE)

    if not _is_canonical(token):
        logger.info("token_rejected reason=malformed")
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

    try:
        # Signature and expiry are checked by decode
        payload = jwt.decode(
            token, secret or settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        logger.info(f"token_rejected reason={e.__class__.__name__}")
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

    try:
        return TokenClaims(
            user_id=payload.get("user_id"),
            email=payload.get("email"),
            nickname=payload.get("nickname"),
        )
    except ValidationError:
        logger.info("token_rejected reason=missing_claims")
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
