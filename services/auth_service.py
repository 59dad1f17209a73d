"""
Registration and login.
"""

import logging
from typing import Tuple

from sqlalchemy.orm import Session

from app.exceptions import ServiceValidationError, UnauthorizedError
from core.password_policy import validate_password
from core.security import hash_password, issue_token, verify_password
from domain.models import User
from domain.schemas.auth_schemas import RegisterRequest
from repositories import UserRepository

logger = logging.getLogger("nutriapp.auth")

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."


class AuthService:
    """Account creation and token issuance"""

    @staticmethod
    def register(db: Session, data: RegisterRequest) -> User:
        """Create an account after checking the password policy.

        Raises:
            ServiceValidationError: weak password (all violations, space-joined)
            ConflictError: email or nickname already taken
        """
        violations = validate_password(data.password)
        if violations:
            logger.info(f"register_rejected reason=weak_password violations={len(violations)}")
            raise ServiceValidationError(
                " ".join(violations), details={"password": violations}
            )

        user = UserRepository(db).create_user(
            email=data.email,
            password_hash=hash_password(data.password),
            nickname=data.nickname,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            gender=data.gender,
        )
        logger.info(f"user_registered user_id={user.user_id}")
        return user

    @staticmethod
    def login(db: Session, identifier: str, password: str) -> Tuple[str, User]:
        """Check credentials (email or nickname) and issue a session token"""
        user = UserRepository(db).get_by_login_identifier(identifier)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("login_failed")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        token = issue_token(user.user_id, user.email, user.nickname)
        logger.info(f"login_succeeded user_id={user.user_id}")
        return token, user
