"""
API dependencies for dependency injection
"""

from typing import Generator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.security import TokenClaims, verify_token
from domain.models import get_db_session

# Extracts "Authorization: Bearer <token>"; a missing header is handled by verify_token
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Verify the bearer token and return its claims.

    Every protected route depends on this. Any failure raises UnauthorizedError
    (401). The claims are also kept on ``request.state`` for the lifetime of the
    request.
    """
    token = credentials.credentials if credentials else None
    claims = verify_token(token)
    request.state.claims = claims
    return claims
